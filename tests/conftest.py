"""Shared fixtures for judge-core tests."""

from __future__ import annotations

from typing import Any

import pytest

from judge_core.adapters.memory import InMemoryDocument, InMemoryElement, InMemoryTransport
from judge_core.validators import build_default_registry, set_validator_registry

MESSAGES = {
    "blank": "can't be blank",
    "too_short": "is too short",
    "too_long": "is too long",
    "wrong_length": "is the wrong length",
    "exclusion": "is reserved",
    "inclusion": "is not included in the list",
    "not_a_number": "is not a number",
    "not_an_integer": "must be an integer",
    "odd": "must be odd",
    "even": "must be even",
    "greater_than": "must be greater than",
    "greater_than_or_equal_to": "must be greater than or equal to",
    "equal_to": "must be equal to",
    "less_than": "must be less than",
    "less_than_or_equal_to": "must be less than or equal to",
    "invalid": "is invalid",
    "accepted": "must be accepted",
    "confirmation": "doesn't match confirmation",
    "taken": "has already been taken",
}


def _rule(kind: str, **options: Any) -> dict[str, Any]:
    return {"kind": kind, "options": options, "messages": dict(MESSAGES)}


@pytest.fixture(autouse=True)
def _fresh_global_registry():
    """Isolate tests that touch the process-wide registry."""
    set_validator_registry(None)
    yield
    set_validator_registry(None)


@pytest.fixture
def rule():
    """Build a wire-format spec for a kind, carrying every known message."""
    return _rule


@pytest.fixture
def messages():
    return dict(MESSAGES)


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def document():
    return InMemoryDocument()


@pytest.fixture
def transport():
    return InMemoryTransport()


@pytest.fixture
def make_element():
    def _make(
        value: str = "",
        *specs: dict[str, Any],
        name: str = "user[email]",
        element_id: str | None = "user_email",
        checked: bool | None = None,
    ) -> InMemoryElement:
        element = InMemoryElement(name, value, element_id=element_id, checked=checked)
        return element.validate_with(specs)

    return _make
