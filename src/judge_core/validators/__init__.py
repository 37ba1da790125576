"""
Validator kinds and their registry.

Usage::

    from judge_core.validators import build_default_registry, register_validator

    registry = build_default_registry()
    definition = registry.get("length")

    @register_validator("postcode")
    def postcode(context, options, messages):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .builtin import (
    acceptance,
    confirmation,
    exclusion,
    format_,
    inclusion,
    length,
    numericality,
    presence,
)
from .comparison import NumericComparison
from .context import ValidationContext
from .options import (
    FormatOptions,
    LengthOptions,
    MembershipOptions,
    NumericalityOptions,
    ValidatorOptions,
)
from .registry import ValidatorCheck, ValidatorDefinition, ValidatorRegistry, message_for
from .uniqueness import uniqueness

if TYPE_CHECKING:
    from collections.abc import Callable


def build_default_registry() -> ValidatorRegistry:
    """Create a registry holding every built-in kind."""
    registry = ValidatorRegistry()
    registry.register("presence", presence)
    registry.register("length", length, options_model=LengthOptions)
    registry.register("exclusion", exclusion, options_model=MembershipOptions)
    registry.register("inclusion", inclusion, options_model=MembershipOptions)
    registry.register("numericality", numericality, options_model=NumericalityOptions)
    registry.register("format", format_, options_model=FormatOptions)
    registry.register("acceptance", acceptance)
    registry.register("confirmation", confirmation)
    registry.register("uniqueness", uniqueness)
    return registry


_default_registry: ValidatorRegistry | None = None


def get_validator_registry() -> ValidatorRegistry:
    """Return the process-wide registry, building the built-ins on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry


def set_validator_registry(registry: ValidatorRegistry | None) -> None:
    """Replace the process-wide registry. ``None`` rebuilds it on next use."""
    global _default_registry
    _default_registry = registry


def register_validator(
    kind: str,
    *,
    options_model: type[ValidatorOptions] | None = None,
    replace: bool = False,
) -> Callable[[ValidatorCheck], ValidatorCheck]:
    """Decorator registering a custom kind in the process-wide registry."""

    def decorator(check: ValidatorCheck) -> ValidatorCheck:
        get_validator_registry().register(
            kind, check, options_model=options_model, replace=replace
        )
        return check

    return decorator


__all__ = [
    "FormatOptions",
    "LengthOptions",
    "MembershipOptions",
    "NumericComparison",
    "NumericalityOptions",
    "ValidationContext",
    "ValidatorCheck",
    "ValidatorDefinition",
    "ValidatorOptions",
    "ValidatorRegistry",
    "build_default_registry",
    "get_validator_registry",
    "message_for",
    "register_validator",
    "set_validator_registry",
]
