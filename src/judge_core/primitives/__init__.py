"""Primitives: exceptions, event dispatch."""

from __future__ import annotations

from .dispatcher import Observable
from .exceptions import (
    CollaboratorError,
    CompanionNotFoundError,
    ConfigurationError,
    InvalidOptionsError,
    JudgeError,
    MalformedSpecError,
    MessagePayloadError,
    MissingCollaboratorError,
    MissingMessageError,
    PatternTranslationError,
    UnknownValidatorError,
    ValidationTransportError,
    ValidatorRegistrationError,
)

__all__ = [
    "CollaboratorError",
    "CompanionNotFoundError",
    "ConfigurationError",
    "InvalidOptionsError",
    "JudgeError",
    "MalformedSpecError",
    "MessagePayloadError",
    "MissingCollaboratorError",
    "MissingMessageError",
    "Observable",
    "PatternTranslationError",
    "UnknownValidatorError",
    "ValidationTransportError",
    "ValidatorRegistrationError",
]
