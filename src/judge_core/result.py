"""ValidationResult — the eventually-resolved outcome of one validator."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .primitives.dispatcher import Observable
from .primitives.exceptions import JudgeError, MessagePayloadError

if TYPE_CHECKING:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

MessagesPayload = Union[Sequence[str], str, bytes]

_messages_adapter: TypeAdapter[list[str]] = TypeAdapter(list[str])


class ResultStatus(str, Enum):
    """Observable state of a result or queue."""

    PENDING = "pending"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class Resolved:
    """Terminal outcome: the ordered failure messages (empty when valid)."""

    messages: tuple[str, ...]

    @property
    def succeeded(self) -> bool:
        return not self.messages


def parse_messages(payload: MessagesPayload) -> list[str]:
    """Return *payload* as a list of messages, decoding wire text first."""
    try:
        if isinstance(payload, (str, bytes)):
            return _messages_adapter.validate_json(payload)
        return _messages_adapter.validate_python(list(payload))
    except (PydanticValidationError, TypeError) as exc:
        raise MessagePayloadError(f"Expected a list of messages, got {payload!r}") from exc


class ValidationResult(Observable):
    """Outcome of one validator invocation.

    Synchronous validators pass their messages to the constructor and the
    result is resolved immediately. Remote validators create an unresolved
    result and resolve it later from a completion callback.

    Events:

    - ``"closed"`` with ``(succeeded, messages)`` once resolved.
    - ``"failed"`` with ``(error,)`` when the remote check breaks down.

    Usage::

        ValidationResult([]).status()            # ResultStatus.VALID
        pending = ValidationResult()
        pending.on("closed", on_closed)
        pending.resolve('["has already been taken"]')
    """

    def __init__(self, messages: MessagesPayload | None = None) -> None:
        self._outcome: Resolved | None = None
        self._error: JudgeError | None = None
        if messages is not None:
            self.resolve(messages)

    # ── Resolution ───────────────────────────────────────────────

    def resolve(self, messages: MessagesPayload | None) -> Self | None:
        """Fix the outcome and trigger ``"closed"``.

        Returns ``None`` without doing anything when *messages* is absent or
        the result is already resolved or failed.
        """
        if messages is None or self._outcome is not None or self._error is not None:
            return None
        parsed = parse_messages(messages)
        self._outcome = Resolved(tuple(parsed))
        self.trigger("closed", self._outcome.succeeded, parsed)
        return self

    def fail(self, error: JudgeError) -> Self | None:
        """Record a structural failure and trigger ``"failed"``.

        The result stays unresolved: a broken check is never a valid one.
        """
        if self._outcome is not None or self._error is not None:
            return None
        self._error = error
        logger.debug("Validation result failed: %s", error)
        self.trigger("failed", error)
        return self

    close = resolve

    # ── Introspection ────────────────────────────────────────────

    @property
    def outcome(self) -> Resolved | None:
        return self._outcome

    @property
    def error(self) -> JudgeError | None:
        return self._error

    def is_resolved(self) -> bool:
        return self._outcome is not None

    closed = is_resolved

    def status(self) -> ResultStatus:
        if self._outcome is None:
            return ResultStatus.PENDING
        return ResultStatus.VALID if self._outcome.succeeded else ResultStatus.INVALID

    def get_messages(self) -> list[str] | None:
        """Return the messages, or ``None`` while no answer is available."""
        if self._outcome is None:
            return None
        return list(self._outcome.messages)

    def __repr__(self) -> str:
        return f"<ValidationResult {self.status().value} messages={self.get_messages()!r}>"
