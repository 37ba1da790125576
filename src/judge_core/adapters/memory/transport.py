"""InMemoryTransport — scripted IValidationTransport for tests and demos."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from ...ports.transport import TransportResponse

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

Answer = Union[TransportResponse, Exception]


@dataclass(frozen=True)
class RecordedRequest:
    url: str
    headers: dict[str, str] = field(default_factory=dict)


class InMemoryTransport:
    """Answers GET requests from a script instead of the network.

    Answers are looked up by exact URL, then through *responder*, then fall
    back to *default* (``200 []``: nothing taken). An ``Exception`` answer is
    raised, simulating a transport-level failure.

    After :meth:`hold`, requests stay in flight until :meth:`release` is
    called, which lets tests decide completion order or leave a request
    unanswered forever.
    """

    def __init__(
        self,
        default: TransportResponse | None = None,
        *,
        responder: Callable[[str], Answer | None] | None = None,
    ) -> None:
        self.default = default or TransportResponse(200, "[]")
        self.responder = responder
        self.requests: list[RecordedRequest] = []
        self._answers: dict[str, Answer] = {}
        self._holding = False
        self._held: list[tuple[str, asyncio.Future[TransportResponse]]] = []

    # ── Scripting ────────────────────────────────────────────────

    def respond_with(self, url: str, answer: Answer) -> None:
        self._answers[url] = answer

    def hold(self) -> None:
        """Keep subsequent requests in flight until released."""
        self._holding = True

    @property
    def held_urls(self) -> list[str]:
        return [url for url, future in self._held if not future.done()]

    def release(self, url: str | None = None, answer: Answer | None = None) -> int:
        """Complete held requests for *url* (all when ``None``).

        Returns the number of requests completed.
        """
        released = 0
        for held_url, future in self._held:
            if future.done() or (url is not None and held_url != url):
                continue
            outcome = answer if answer is not None else self._answer(held_url)
            if isinstance(outcome, Exception):
                future.set_exception(outcome)
            else:
                future.set_result(outcome)
            released += 1
        self._held = [(u, f) for u, f in self._held if not f.done()]
        return released

    def release_nth(self, index: int, answer: Answer) -> None:
        """Complete the *index*-th request still in flight with *answer*."""
        _url, future = [held for held in self._held if not held[1].done()][index]
        if isinstance(answer, Exception):
            future.set_exception(answer)
        else:
            future.set_result(answer)

    # ── IValidationTransport ─────────────────────────────────────

    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        self.requests.append(RecordedRequest(url, dict(headers or {})))
        logger.debug("In-memory GET %s", url)
        if self._holding:
            future: asyncio.Future[TransportResponse] = (
                asyncio.get_running_loop().create_future()
            )
            self._held.append((url, future))
            return await future
        outcome = self._answer(url)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def _answer(self, url: str) -> Answer:
        if url in self._answers:
            return self._answers[url]
        if self.responder is not None:
            scripted = self.responder(url)
            if scripted is not None:
                return scripted
        return self.default
