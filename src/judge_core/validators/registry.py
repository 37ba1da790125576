"""Validator registry — validator kind name → check function."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import (
    InvalidOptionsError,
    MissingMessageError,
    UnknownValidatorError,
    ValidatorRegistrationError,
)

if TYPE_CHECKING:
    from ..result import ValidationResult
    from ..wire import ValidatorSpec
    from .context import ValidationContext
    from .options import ValidatorOptions

logger = logging.getLogger(__name__)

ValidatorCheck = Callable[["ValidationContext", Any, Mapping[str, str]], "ValidationResult"]
"""``check(context, options, messages) -> ValidationResult``."""


@dataclass(frozen=True)
class ValidatorDefinition:
    """A registered kind: its check function and optional options model."""

    kind: str
    check: ValidatorCheck
    options_model: type[ValidatorOptions] | None = None

    def prepare_options(self, options: Mapping[str, Any]) -> Any:
        """Validate raw *options* against the options model, if any."""
        if self.options_model is None:
            return dict(options)
        try:
            return self.options_model.model_validate(dict(options))
        except PydanticValidationError as exc:
            errors = [
                f"{'.'.join(str(p) for p in error.get('loc', ()))}: {error.get('msg')}"
                for error in exc.errors()
            ]
            raise InvalidOptionsError(self.kind, errors) from exc


def message_for(messages: Mapping[str, str], kind: str, key: str) -> str:
    """Return the message under *key* or fail loudly."""
    try:
        return messages[key]
    except KeyError:
        raise MissingMessageError(kind, key) from None


class ValidatorRegistry:
    """Store of validator kinds.

    Built-ins are registered once by
    :func:`~judge_core.validators.build_default_registry`; custom kinds are
    added through :meth:`register`. Every kind shares the same contract, so
    the queue treats them identically.

    **Conflict detection:** registering a different function under an
    existing kind raises ``ValidatorRegistrationError`` unless
    ``replace=True`` is passed.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, ValidatorDefinition] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(
        self,
        kind: str,
        check: ValidatorCheck,
        *,
        options_model: type[ValidatorOptions] | None = None,
        replace: bool = False,
    ) -> ValidatorDefinition:
        if not callable(check):
            raise ValidatorRegistrationError(f"Validator '{kind}' is not callable")
        existing = self._definitions.get(kind)
        if existing is not None and existing.check is not check and not replace:
            msg = (
                f"Duplicate validator kind '{kind}': "
                f"{getattr(existing.check, '__name__', existing.check)!r} already "
                f"registered, cannot register {getattr(check, '__name__', check)!r}"
            )
            raise ValidatorRegistrationError(msg)
        definition = ValidatorDefinition(kind, check, options_model)
        self._definitions[kind] = definition
        logger.debug("Registered validator kind %s", kind)
        return definition

    def unregister(self, kind: str) -> None:
        self._definitions.pop(kind, None)

    # ── Lookup ───────────────────────────────────────────────────

    def get(self, kind: str) -> ValidatorDefinition:
        """Return the definition of *kind*.

        Raises:
            UnknownValidatorError: If nothing is registered under *kind*.
        """
        definition = self._definitions.get(kind)
        if definition is None:
            raise UnknownValidatorError(kind, self.kinds)
        return definition

    def has(self, kind: str) -> bool:
        return kind in self._definitions

    @property
    def kinds(self) -> list[str]:
        return list(self._definitions)

    def prepare(self, spec: ValidatorSpec) -> tuple[ValidatorDefinition, Any]:
        """Resolve the definition of *spec* and validate its options."""
        definition = self.get(spec.kind)
        return definition, definition.prepare_options(spec.options)

    def copy(self) -> ValidatorRegistry:
        """Return an independent registry with the same kinds."""
        clone = ValidatorRegistry()
        clone._definitions = dict(self._definitions)
        return clone

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Remove every kind (testing utility)."""
        self._definitions.clear()


__all__ = ["ValidatorCheck", "ValidatorDefinition", "ValidatorRegistry", "message_for"]
