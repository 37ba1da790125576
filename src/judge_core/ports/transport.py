"""IValidationTransport — network collaborator of remote validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of a completed request."""

    status: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299


@runtime_checkable
class IValidationTransport(Protocol):
    """Performs idempotent GET requests for remote validators.

    Implementations return a :class:`TransportResponse` for every completed
    round trip, whatever its status, and raise for transport-level failures
    (connection refused, timeout).
    """

    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        """Issue a GET request for *url*."""
        ...
