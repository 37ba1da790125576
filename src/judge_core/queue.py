"""ValidationQueue — aggregates every result of one element.

The queue runs all applicable validators of an element, keeps the results it
is still waiting for in ``pending`` and closes exactly once, when the last of
them resolves. Synchronous validators resolve during construction; remote
ones resolve later on the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .primitives.dispatcher import Observable
from .result import ResultStatus, ValidationResult
from .settings import DEFAULT_SETTINGS, JudgeSettings
from .validators import get_validator_registry
from .validators.context import ValidationContext
from .wire import parse_validator_specs

if TYPE_CHECKING:
    from collections.abc import Callable

    from .ports.element import IDocument, IElement
    from .ports.transport import IValidationTransport
    from .primitives.exceptions import JudgeError
    from .validators.registry import ValidatorRegistry
    from .wire import ValidatorSpec

logger = logging.getLogger(__name__)

QueueStatus = ResultStatus


@dataclass(frozen=True)
class QueueOutcome:
    """Terminal aggregate of a closed queue."""

    status: QueueStatus
    messages: tuple[str, ...]

    @property
    def is_valid(self) -> bool:
        return self.status is QueueStatus.VALID


class ValidationQueue(Observable):
    """The set of results produced by validating one element.

    States: OPEN → CLOSED, never back. Events:

    - ``"closed"`` with ``(status, messages)``, fired exactly once;
    - ``"failed"`` with ``(error,)`` when a remote check breaks down. The
      queue then stays open for good.

    Listeners given to the constructor are attached before the validators
    run, so they also observe a queue that closes during construction::

        queue = ValidationQueue(element, on_closed=show_errors)
        outcome = await queue.wait()
    """

    def __init__(
        self,
        element: IElement,
        *,
        document: IDocument | None = None,
        transport: IValidationTransport | None = None,
        registry: ValidatorRegistry | None = None,
        settings: JudgeSettings | None = None,
        on_closed: Callable[[QueueStatus, list[str]], Any] | None = None,
        on_failed: Callable[[JudgeError], Any] | None = None,
    ) -> None:
        self.element = element
        self.settings = settings or DEFAULT_SETTINGS
        self.closed = False
        self.pending: set[ValidationResult] = set()
        self.closed_results: list[ValidationResult] = []
        self.results: list[ValidationResult] = []
        self.error: JudgeError | None = None
        self._outcome: QueueOutcome | None = None
        self._populating = True

        if on_closed is not None:
            self.on("closed", on_closed)
        if on_failed is not None:
            self.on("failed", on_failed)

        self.context = ValidationContext(
            element=element,
            document=document,
            transport=transport,
            settings=self.settings,
        )
        self.validator_specs = parse_validator_specs(
            element.get_attribute(self.settings.validators_attribute)
        )
        self._populate(registry or get_validator_registry())

    # ── Population ───────────────────────────────────────────────

    def _populate(self, registry: ValidatorRegistry) -> None:
        # Every spec is checked before any runs: a malformed rule must not
        # go unnoticed just because the value is blank.
        prepared = [(spec, *registry.prepare(spec)) for spec in self.validator_specs]
        has_value = bool(self.element.value)
        try:
            for spec, definition, options in prepared:
                if has_value or not self._allows_blank(spec):
                    self._add(definition.check(self.context, options, spec.messages))
        except BaseException:
            # The queue is never handed out, so its round trips are dropped.
            for task in self.context.pending_tasks:
                task.cancel()
            raise
        self._populating = False
        logger.debug(
            "Queue for %s populated: %d result(s), %d pending",
            self.element.name,
            len(self.results),
            len(self.pending),
        )
        self.close()

    def _allows_blank(self, spec: ValidatorSpec) -> bool:
        return spec.options.get(self.settings.allow_blank_option) is True

    def _add(self, result: ValidationResult) -> None:
        self.results.append(result)
        if result.is_resolved():
            self.closed_results.append(result)
            return
        self.pending.add(result)
        result.on("closed", lambda _succeeded, _messages: self._settle(result))
        result.on("failed", self._fail)
        if result.error is not None:
            self._fail(result.error)

    def _settle(self, result: ValidationResult) -> None:
        self.pending.discard(result)
        self.closed_results.append(result)
        self.close()

    def _fail(self, error: JudgeError) -> None:
        if self.error is None:
            self.error = error
        logger.debug("Queue for %s cannot close: %s", self.element.name, error)
        self.trigger("failed", error)

    # ── Closure ──────────────────────────────────────────────────

    def close(self) -> None:
        """Fix the aggregate and trigger ``"closed"``.

        Does nothing while results are pending or once already closed.
        """
        if self.closed or self.pending or self._populating:
            return
        self.closed = True
        messages = self.get_messages()
        status = QueueStatus.INVALID if messages else QueueStatus.VALID
        self._outcome = QueueOutcome(status, tuple(messages))
        logger.debug("Queue for %s closed as %s", self.element.name, status.value)
        self.trigger("closed", status, messages)

    def status(self) -> QueueStatus:
        if self._outcome is None:
            return QueueStatus.PENDING
        return self._outcome.status

    def get_messages(self) -> list[str]:
        """Messages of every resolved result, in the order results were added."""
        messages: list[str] = []
        for result in self.results:
            messages.extend(result.get_messages() or [])
        return messages

    @property
    def outcome(self) -> QueueOutcome | None:
        return self._outcome

    async def wait(self, timeout: float | None = None) -> QueueOutcome:
        """Wait until the queue closes and return its outcome.

        Raises:
            JudgeError: The structural error of a failed remote check.
            asyncio.TimeoutError: If *timeout* elapses first; the queue stays
                open.
        """
        if self.error is not None:
            raise self.error
        if self._outcome is not None:
            return self._outcome

        waiter: asyncio.Future[QueueOutcome] = asyncio.get_running_loop().create_future()

        def _on_closed(_status: QueueStatus, _messages: list[str]) -> None:
            if not waiter.done() and self._outcome is not None:
                waiter.set_result(self._outcome)

        def _on_failed(error: JudgeError) -> None:
            if not waiter.done():
                waiter.set_exception(error)

        self.on("closed", _on_closed)
        self.on("failed", _on_failed)
        return await asyncio.wait_for(waiter, timeout)

    def __repr__(self) -> str:
        return (
            f"<ValidationQueue {self.element.name!r} {self.status().value} "
            f"pending={len(self.pending)}>"
        )


def validate(element: IElement, **kwargs: Any) -> ValidationQueue:
    """Validate *element*; see :class:`ValidationQueue` for the keywords."""
    return ValidationQueue(element, **kwargs)
