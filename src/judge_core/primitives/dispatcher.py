"""Observable — minimal event dispatch mixin.

Concept borrowed from Backbone.js events, minimal by comparison. Mixed into
both :class:`~judge_core.result.ValidationResult` and
:class:`~judge_core.queue.ValidationQueue`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from typing_extensions import Self


class Observable:
    """Synchronous, single-threaded observer capability.

    Usage::

        result.on("closed", lambda succeeded, messages: ...)
        result.trigger("closed", True, [])

    Dispatch is synchronous, in registration order, without de-duplication
    and without re-entrancy protection.
    """

    _callbacks: dict[str, list[Callable[..., Any]]]

    def on(self, event: str, callback: Callable[..., Any]) -> Self:
        """Run *callback* on every future ``trigger(event, ...)``.

        Non-callables are ignored.
        """
        if not callable(callback):
            return self
        if "_callbacks" not in self.__dict__:
            self._callbacks = {}
        self._callbacks.setdefault(event, []).append(callback)
        return self

    def trigger(self, event: str, *args: Any) -> Self:
        """Invoke every callback registered for *event* with *args*."""
        callbacks = self.__dict__.get("_callbacks", {}).get(event)
        if not callbacks:
            return self
        # Listeners added during dispatch run from the next trigger on.
        for callback in list(callbacks):
            callback(*args)
        return self

    def listener_count(self, event: str) -> int:
        """Return how many callbacks are registered for *event*."""
        return len(self.__dict__.get("_callbacks", {}).get(event, []))
