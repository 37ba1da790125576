"""Exception hierarchy for judge-core.

Only *structural* failures are exceptions. A value that breaks a rule is data:
it ends up as a message on a :class:`~judge_core.result.ValidationResult`.

All exceptions inherit from ``JudgeError`` and provide ``to_dict()`` so host
code can surface them as system errors, distinct from user input errors.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class JudgeError(Exception):
    """Root exception for the entire judge-core library."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


# ── Configuration ────────────────────────────────────────────────────


class ConfigurationError(JudgeError):
    """Base class for malformed validator configuration.

    Raised while a queue is being built. A skipped rule would read as a false
    "valid", so configuration problems are never silently ignored.
    """


class MalformedSpecError(ConfigurationError):
    """The serialised validator list could not be decoded."""

    def __init__(self, reason: str, raw: object = None) -> None:
        self.reason = reason
        self.raw = raw
        super().__init__(f"Malformed validator configuration: {reason}")


class UnknownValidatorError(ConfigurationError):
    """No validator is registered under the requested kind.

    Provides fuzzy-matched suggestions for likely intended kinds.
    """

    def __init__(self, kind: str, available_kinds: list[str]) -> None:
        self.kind = kind
        self.available_kinds = available_kinds
        self.suggestions = get_close_matches(kind, available_kinds, n=3, cutoff=0.6)

        message = f"Unknown validator kind: '{kind}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_VALIDATOR",
            "message": str(self),
            "kind": self.kind,
            "suggestions": self.suggestions,
        }


class InvalidOptionsError(ConfigurationError):
    """The options of a validator spec do not fit the kind's option model."""

    def __init__(self, kind: str, errors: list[str]) -> None:
        self.kind = kind
        self.errors = errors
        super().__init__(f"Invalid options for '{kind}' validator: {'; '.join(errors)}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_OPTIONS",
            "message": str(self),
            "kind": self.kind,
            "errors": self.errors,
        }


class MissingMessageError(ConfigurationError):
    """A validator needed a message key the spec does not carry."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"Validator '{kind}' has no '{key}' message")


class PatternTranslationError(ConfigurationError):
    """A foreign-dialect pattern could not be turned into a Python regex."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot translate pattern {source!r}: {reason}")


class ValidatorRegistrationError(ConfigurationError):
    """Raised when a validator kind registration conflict is detected."""


# ── Collaborators ────────────────────────────────────────────────────


class CollaboratorError(JudgeError):
    """Base class for failures of an external collaborator lookup."""


class CompanionNotFoundError(CollaboratorError):
    """The companion control of a confirmation rule does not exist."""

    def __init__(self, companion_id: str | None, element_name: str) -> None:
        self.companion_id = companion_id
        self.element_name = element_name
        if companion_id is None:
            msg = f"Element '{element_name}' has no id to derive a companion from"
        else:
            msg = f"Companion element '{companion_id}' of '{element_name}' not found"
        super().__init__(msg)


class MissingCollaboratorError(CollaboratorError):
    """A validator needs a collaborator that was not supplied."""

    def __init__(self, kind: str, collaborator: str) -> None:
        self.kind = kind
        self.collaborator = collaborator
        super().__init__(f"Validator '{kind}' requires a {collaborator}")


# ── Transport ────────────────────────────────────────────────────────


class ValidationTransportError(JudgeError):
    """The network round trip of a remote validator failed.

    Fatal for that validator: its result is never resolved as valid.
    """

    def __init__(
        self,
        url: str,
        status: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.url = url
        self.status = status
        self.reason = reason

        msg = f"Validation request to {url} was unsuccessful"
        if status is not None:
            msg += f" (HTTP {status})"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "TRANSPORT_FAILURE",
            "message": str(self),
            "url": self.url,
            "status": self.status,
        }


class MessagePayloadError(JudgeError):
    """A messages payload is not an ordered list of strings."""
