"""Remote ``uniqueness`` validator — the only asynchronous built-in."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import MessagePayloadError, ValidationTransportError
from ..result import ValidationResult
from ..urls import url_for

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports.transport import IValidationTransport
    from .context import ValidationContext

logger = logging.getLogger(__name__)


async def request_validation(
    transport: IValidationTransport,
    url: str,
    result: ValidationResult,
    headers: dict[str, str],
) -> None:
    """Perform the round trip and resolve *result* from the response body.

    Any failure fails *result* with a
    :class:`~judge_core.primitives.exceptions.ValidationTransportError` and
    re-raises it: a broken check never counts as a valid one.
    """
    try:
        response = await transport.get(url, headers=headers)
    except Exception as exc:
        error = ValidationTransportError(url, reason=str(exc) or type(exc).__name__)
        result.fail(error)
        raise error from exc

    if not response.ok:
        error = ValidationTransportError(url, status=response.status)
        result.fail(error)
        raise error

    try:
        result.resolve(response.body)
    except MessagePayloadError as exc:
        error = ValidationTransportError(
            url, status=response.status, reason="malformed messages body"
        )
        result.fail(error)
        raise error from exc
    logger.debug("Remote validation %s resolved: %s", url, result.status().value)


def uniqueness(
    context: ValidationContext, options: Any, messages: Mapping[str, str]
) -> ValidationResult:
    """Ask the server whether the value is already taken.

    Returns an unresolved result at once; it resolves when the response
    arrives on the running event loop.
    """
    transport = context.require_transport("uniqueness")
    url = url_for(context.element, "uniqueness", context.settings.engine_path)
    headers = {"X-Requested-With": context.settings.requested_with}
    result = ValidationResult()
    context.schedule("uniqueness", request_validation(transport, url, result, headers))
    logger.debug("Scheduled remote validation %s", url)
    return result
