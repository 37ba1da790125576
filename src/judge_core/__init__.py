"""judge-core — client-side mirror of server-declared field validations.

Runs every validator declared for an input element, synchronous and remote
alike, and reports a single aggregate status once all of them have answered.

Usage::

    from judge_core import validate

    queue = validate(element, document=document, transport=transport)
    outcome = await queue.wait()
"""

from __future__ import annotations

from .primitives import (
    CollaboratorError,
    CompanionNotFoundError,
    ConfigurationError,
    InvalidOptionsError,
    JudgeError,
    MalformedSpecError,
    MessagePayloadError,
    MissingCollaboratorError,
    MissingMessageError,
    Observable,
    PatternTranslationError,
    UnknownValidatorError,
    ValidationTransportError,
    ValidatorRegistrationError,
)
from .queue import QueueOutcome, QueueStatus, ValidationQueue, validate
from .result import Resolved, ResultStatus, ValidationResult
from .settings import JudgeSettings
from .validators import (
    ValidationContext,
    ValidatorRegistry,
    build_default_registry,
    get_validator_registry,
    register_validator,
    set_validator_registry,
)
from .wire import ValidatorSpec, encode_validators, parse_validator_specs

__all__ = [
    "CollaboratorError",
    "CompanionNotFoundError",
    "ConfigurationError",
    "InvalidOptionsError",
    "JudgeError",
    "JudgeSettings",
    "MalformedSpecError",
    "MessagePayloadError",
    "MissingCollaboratorError",
    "MissingMessageError",
    "Observable",
    "PatternTranslationError",
    "QueueOutcome",
    "QueueStatus",
    "Resolved",
    "ResultStatus",
    "UnknownValidatorError",
    "ValidationContext",
    "ValidationQueue",
    "ValidationResult",
    "ValidationTransportError",
    "ValidatorRegistrationError",
    "ValidatorRegistry",
    "ValidatorSpec",
    "build_default_registry",
    "encode_validators",
    "get_validator_registry",
    "parse_validator_specs",
    "register_validator",
    "set_validator_registry",
    "validate",
]
