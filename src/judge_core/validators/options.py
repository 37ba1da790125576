"""Option models of the built-in validator kinds.

Options arrive as loosely typed JSON. Each built-in kind declares a frozen
pydantic model so a malformed rule fails loudly when the queue is built,
even when the rule ends up skipped for a blank value.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..regexp import convert_pattern


class ValidatorOptions(BaseModel):
    """Base for option models. Unknown keys are kept, never rejected."""

    model_config = ConfigDict(frozen=True, extra="allow")


class LengthOptions(ValidatorOptions):
    minimum: int | None = Field(default=None, ge=0)
    maximum: int | None = Field(default=None, ge=0)
    is_: int | None = Field(default=None, alias="is", ge=0)


class MembershipOptions(ValidatorOptions):
    """Options of ``inclusion`` and ``exclusion``."""

    in_: list[Any] = Field(alias="in")


class NumericalityOptions(ValidatorOptions):
    odd: bool = False
    even: bool = False
    only_integer: bool = False
    greater_than: float | None = None
    greater_than_or_equal_to: float | None = None
    equal_to: float | None = None
    less_than: float | None = None
    less_than_or_equal_to: float | None = None


class FormatOptions(ValidatorOptions):
    with_: str | None = Field(default=None, alias="with")
    without: str | None = None

    @field_validator("with_", "without")
    @classmethod
    def _must_translate(cls, value: str | None) -> str | None:
        if value is not None:
            convert_pattern(value)
        return value
