"""Tests for the remote uniqueness validator and deferred queue closure."""

from __future__ import annotations

import asyncio
import logging

import pytest

from judge_core.adapters.memory import InMemoryTransport
from judge_core.ports.transport import TransportResponse
from judge_core.primitives.exceptions import (
    CompanionNotFoundError,
    MissingCollaboratorError,
    ValidationTransportError,
)
from judge_core.queue import QueueStatus, validate
from judge_core.settings import JudgeSettings
from judge_core.validators import ValidationContext
from judge_core.validators.uniqueness import uniqueness

EMAIL_URL = "/judge/validate?class=user&attribute=email&value=a%40b.c&kind=uniqueness"


async def _drain(queue) -> None:
    """Let scheduled round trips complete."""
    await asyncio.gather(*queue.context.pending_tasks, return_exceptions=True)
    await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_unique_value_resolves_valid(make_element, rule, registry, transport) -> None:
    queue = validate(
        make_element("a@b.c", rule("uniqueness")), registry=registry, transport=transport
    )

    assert not queue.closed
    assert queue.results[0].status() == "pending"

    outcome = await queue.wait(timeout=1)

    assert outcome.status is QueueStatus.VALID
    assert queue.results[0].status() == "valid"


@pytest.mark.asyncio
async def test_request_carries_url_and_programmatic_marker(
    make_element, rule, registry, transport
) -> None:
    queue = validate(
        make_element("a@b.c", rule("uniqueness")), registry=registry, transport=transport
    )
    await queue.wait(timeout=1)

    assert [request.url for request in transport.requests] == [EMAIL_URL]
    assert transport.requests[0].headers == {"X-Requested-With": "XMLHttpRequest"}


@pytest.mark.asyncio
async def test_taken_value_resolves_invalid(make_element, rule, registry, transport) -> None:
    transport.respond_with(EMAIL_URL, TransportResponse(200, '["has already been taken"]'))
    element = make_element("a@b.c", rule("presence"), rule("uniqueness"))

    outcome = await validate(element, registry=registry, transport=transport).wait(1)

    assert outcome.status is QueueStatus.INVALID
    assert outcome.messages == ("has already been taken",)


@pytest.mark.asyncio
async def test_non_2xx_status_fails_and_never_closes(
    make_element, rule, registry, transport, caplog
) -> None:
    transport.respond_with(EMAIL_URL, TransportResponse(500, "boom"))
    failures = []
    queue = validate(
        make_element("a@b.c", rule("uniqueness")),
        registry=registry,
        transport=transport,
        on_failed=failures.append,
    )

    with caplog.at_level(logging.WARNING):
        with pytest.raises(ValidationTransportError) as exc_info:
            await queue.wait(timeout=1)
        await _drain(queue)

    assert exc_info.value.status == 500
    assert failures == [exc_info.value]
    assert queue.error is exc_info.value
    assert not queue.closed
    assert queue.status() is QueueStatus.PENDING
    assert "Remote validation of user[email] failed" in caplog.text
    warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert len(warnings) == 1


@pytest.mark.asyncio
async def test_transport_exception_fails_the_result(make_element, rule, registry) -> None:
    transport = InMemoryTransport(default=ConnectionError("connection refused"))
    queue = validate(
        make_element("a@b.c", rule("uniqueness")), registry=registry, transport=transport
    )

    with pytest.raises(ValidationTransportError, match="connection refused"):
        await queue.wait(timeout=1)

    await _drain(queue)
    assert queue.results[0].error is queue.error
    assert not queue.closed


@pytest.mark.asyncio
async def test_malformed_body_is_a_transport_failure(
    make_element, rule, registry, transport
) -> None:
    transport.respond_with(EMAIL_URL, TransportResponse(200, "<html>"))
    queue = validate(
        make_element("a@b.c", rule("uniqueness")), registry=registry, transport=transport
    )

    with pytest.raises(ValidationTransportError, match="malformed"):
        await queue.wait(timeout=1)


@pytest.mark.asyncio
async def test_task_raises_the_transport_failure(rule, make_element, transport) -> None:
    transport.respond_with(EMAIL_URL, TransportResponse(404))
    context = ValidationContext(make_element("a@b.c"), transport=transport)

    result = uniqueness(context, {}, {})
    (task,) = context.pending_tasks

    with pytest.raises(ValidationTransportError):
        await task
    assert result.status() == "pending"


@pytest.mark.asyncio
async def test_unanswered_request_leaves_queue_open(make_element, rule, registry) -> None:
    transport = InMemoryTransport()
    transport.hold()
    queue = validate(
        make_element("a@b.c", rule("uniqueness")), registry=registry, transport=transport
    )

    with pytest.raises(asyncio.TimeoutError):
        await queue.wait(timeout=0.05)

    assert transport.held_urls == [EMAIL_URL]
    assert not queue.closed

    transport.release()
    outcome = await queue.wait(timeout=1)
    assert outcome.is_valid


@pytest.mark.asyncio
async def test_completion_order_does_not_change_message_order(
    make_element, rule, registry
) -> None:
    transport = InMemoryTransport()
    transport.hold()
    element = make_element("a@b.c", rule("uniqueness"), rule("uniqueness"))
    queue = validate(element, registry=registry, transport=transport)
    await asyncio.sleep(0)
    assert len(transport.held_urls) == 2

    transport.release_nth(1, TransportResponse(200, '["second"]'))
    await asyncio.sleep(0)
    assert not queue.closed
    transport.release_nth(0, TransportResponse(200, '["first"]'))

    outcome = await queue.wait(timeout=1)
    assert outcome.messages == ("first", "second")


@pytest.mark.asyncio
async def test_custom_engine_path(make_element, rule, registry, transport) -> None:
    settings = JudgeSettings(engine_path="/checks/")
    queue = validate(
        make_element("a@b.c", rule("uniqueness")),
        registry=registry,
        transport=transport,
        settings=settings,
    )
    await queue.wait(timeout=1)

    assert transport.requests[0].url.startswith("/checks/validate?")


def test_uniqueness_requires_transport(make_element, rule, registry) -> None:
    with pytest.raises(MissingCollaboratorError, match="transport"):
        validate(make_element("a@b.c", rule("uniqueness")), registry=registry)


def test_uniqueness_requires_running_loop(make_element, rule, registry, transport) -> None:
    with pytest.raises(MissingCollaboratorError, match="event loop"):
        validate(
            make_element("a@b.c", rule("uniqueness")),
            registry=registry,
            transport=transport,
        )


@pytest.mark.asyncio
async def test_failed_construction_cancels_scheduled_requests(
    make_element, rule, registry, transport, document
) -> None:
    element = make_element("a@b.c", rule("uniqueness"), rule("confirmation"))

    with pytest.raises(CompanionNotFoundError):
        validate(element, registry=registry, transport=transport, document=document)
    await asyncio.sleep(0.01)

    assert transport.requests == []
