"""ValidationContext — what a validator function is bound to."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import MissingCollaboratorError
from ..settings import DEFAULT_SETTINGS, JudgeSettings

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from ..ports.element import IDocument, IElement
    from ..ports.transport import IValidationTransport

logger = logging.getLogger(__name__)


@dataclass
class ValidationContext:
    """The element under validation plus the collaborators validators may use.

    One context is shared by every validator of a queue. It also keeps strong
    references to the background tasks remote validators schedule, so they
    are not garbage collected mid-flight.
    """

    element: IElement
    document: IDocument | None = None
    transport: IValidationTransport | None = None
    settings: JudgeSettings = DEFAULT_SETTINGS
    _tasks: set[asyncio.Task[Any]] = field(default_factory=set, repr=False)

    @property
    def value(self) -> str:
        return self.element.value or ""

    @property
    def pending_tasks(self) -> frozenset[asyncio.Task[Any]]:
        return frozenset(self._tasks)

    def require_document(self, kind: str) -> IDocument:
        if self.document is None:
            raise MissingCollaboratorError(kind, "document")
        return self.document

    def require_transport(self, kind: str) -> IValidationTransport:
        if self.transport is None:
            raise MissingCollaboratorError(kind, "transport")
        return self.transport

    def schedule(self, kind: str, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Run *coro* as a task on the running loop.

        Raises:
            MissingCollaboratorError: If no event loop is running.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise MissingCollaboratorError(kind, "running event loop") from None
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        """Drop the reference and log failures instead of losing them."""
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning(
                "Remote validation of %s failed: %s",
                self.element.name,
                exc,
                exc_info=exc,
            )
