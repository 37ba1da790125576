"""HttpxTransport — IValidationTransport over HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.transport import TransportResponse
from ..settings import DEFAULT_SETTINGS, JudgeSettings

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Issues validation GET requests with an ``httpx.AsyncClient``.

    The request timeout configured in :class:`~judge_core.settings.JudgeSettings`
    bounds every round trip; a timed out request raises, so the validator
    fails instead of leaving its queue open forever.

    Usage::

        async with HttpxTransport("https://app.example.com") as transport:
            queue = validate(element, transport=transport)
            outcome = await queue.wait()
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        settings: JudgeSettings | None = None,
        client: httpx.AsyncClient | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        # Lazy import of httpx
        try:
            import httpx
        except ImportError as e:
            raise ImportError(
                "httpx is required for HttpxTransport. "
                "Install with: pip install 'judge-core[http]'"
            ) from e

        self.settings = settings or DEFAULT_SETTINGS
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=self.settings.request_timeout,
            headers={"X-Requested-With": self.settings.requested_with, **(headers or {})},
        )

    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        response = await self._client.get(url, headers=headers)
        logger.debug("GET %s -> %s", url, response.status_code)
        return TransportResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
