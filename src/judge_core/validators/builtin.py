"""Synchronous built-in validators, ported from ActiveModel.

See <https://api.rubyonrails.org/classes/ActiveModel/Validations.html> for
the server-side originals. Every function resolves its result inline and
reports one message per violated constraint.
"""

from __future__ import annotations

import math
import operator
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import CompanionNotFoundError
from ..regexp import matches
from ..result import ValidationResult
from .comparison import NumericComparison, satisfies
from .registry import message_for

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .context import ValidationContext
    from .options import (
        FormatOptions,
        LengthOptions,
        MembershipOptions,
        NumericalityOptions,
    )

# (option, failing comparison of value length against the bound, message key)
_LENGTH_BOUNDS: tuple[tuple[str, Callable[[int, int], bool], str], ...] = (
    ("minimum", operator.lt, "too_short"),
    ("maximum", operator.gt, "too_long"),
    ("is_", operator.ne, "wrong_length"),
)


def parse_number(value: str) -> float | None:
    """Parse *value* as a number, or return ``None`` when it is not one.

    ``nan`` is never a number. Of the spelled-out infinities only
    ``Infinity`` (optionally signed) is accepted; an overflowing literal such
    as ``1e999`` still parses to infinity.
    """
    text = value.strip()
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    word = text.lstrip("+-")
    if word.isalpha() and word != "Infinity":
        return None
    return number


def stringify(member: Any) -> str:
    """Render a configured set member the way the value would be spelled."""
    if member is None:
        return ""
    if isinstance(member, bool):
        return "true" if member else "false"
    if isinstance(member, float) and member.is_integer():
        return str(int(member))
    return str(member)


def presence(
    context: ValidationContext, options: Any, messages: Mapping[str, str]
) -> ValidationResult:
    if context.value:
        return ValidationResult([])
    return ValidationResult([message_for(messages, "presence", "blank")])


def length(
    context: ValidationContext, options: LengthOptions, messages: Mapping[str, str]
) -> ValidationResult:
    size = len(context.value)
    msgs = []
    for option, fails, key in _LENGTH_BOUNDS:
        bound = getattr(options, option)
        if bound is not None and fails(size, bound):
            msgs.append(message_for(messages, "length", key))
    return ValidationResult(msgs)


def exclusion(
    context: ValidationContext, options: MembershipOptions, messages: Mapping[str, str]
) -> ValidationResult:
    members = {stringify(member) for member in options.in_}
    if context.value in members:
        return ValidationResult([message_for(messages, "exclusion", "exclusion")])
    return ValidationResult([])


def inclusion(
    context: ValidationContext, options: MembershipOptions, messages: Mapping[str, str]
) -> ValidationResult:
    members = {stringify(member) for member in options.in_}
    if context.value not in members:
        return ValidationResult([message_for(messages, "inclusion", "inclusion")])
    return ValidationResult([])


def numericality(
    context: ValidationContext,
    options: NumericalityOptions,
    messages: Mapping[str, str],
) -> ValidationResult:
    number = parse_number(context.value)
    if number is None:
        return ValidationResult([message_for(messages, "numericality", "not_a_number")])

    msgs = []
    is_even = number % 2 == 0
    if options.odd and is_even:
        msgs.append(message_for(messages, "numericality", "odd"))
    if options.even and not is_even:
        msgs.append(message_for(messages, "numericality", "even"))
    if options.only_integer and not number.is_integer():
        msgs.append(message_for(messages, "numericality", "not_an_integer"))
    for comparison in NumericComparison:
        bound = getattr(options, comparison.value)
        if bound is not None and not satisfies(comparison, number, bound):
            msgs.append(message_for(messages, "numericality", comparison.value))
    return ValidationResult(msgs)


def format_(
    context: ValidationContext, options: FormatOptions, messages: Mapping[str, str]
) -> ValidationResult:
    msgs = []
    if options.with_ is not None and not matches(options.with_, context.value):
        msgs.append(message_for(messages, "format", "invalid"))
    if options.without is not None and matches(options.without, context.value):
        msgs.append(message_for(messages, "format", "invalid"))
    return ValidationResult(msgs)


def acceptance(
    context: ValidationContext, options: Any, messages: Mapping[str, str]
) -> ValidationResult:
    if context.element.checked is True:
        return ValidationResult([])
    return ValidationResult([message_for(messages, "acceptance", "accepted")])


def confirmation(
    context: ValidationContext, options: Any, messages: Mapping[str, str]
) -> ValidationResult:
    """Compare the value with the ``<id>_confirmation`` companion control."""
    element = context.element
    if not element.element_id:
        raise CompanionNotFoundError(None, element.name)
    companion_id = f"{element.element_id}_confirmation"
    companion = context.require_document("confirmation").get_element_by_id(companion_id)
    if companion is None:
        raise CompanionNotFoundError(companion_id, element.name)
    if context.value == (companion.value or ""):
        return ValidationResult([])
    return ValidationResult([message_for(messages, "confirmation", "confirmation")])
