import pytest

from judge_core.primitives.exceptions import MessagePayloadError, ValidationTransportError
from judge_core.result import Resolved, ResultStatus, ValidationResult, parse_messages

# --- Construction ---


def test_messages_given_to_constructor_resolve_immediately() -> None:
    result = ValidationResult(["is too short"])

    assert result.is_resolved()
    assert result.closed()
    assert result.status() is ResultStatus.INVALID
    assert result.get_messages() == ["is too short"]
    assert result.outcome == Resolved(("is too short",))


def test_empty_messages_are_valid() -> None:
    result = ValidationResult([])

    assert result.status() == "valid"
    assert result.get_messages() == []


def test_result_without_messages_is_pending() -> None:
    result = ValidationResult()

    assert not result.is_resolved()
    assert result.status() is ResultStatus.PENDING
    assert result.get_messages() is None


# --- Resolution ---


def test_resolve_triggers_closed_with_success_flag() -> None:
    result = ValidationResult()
    events = []
    result.on("closed", lambda succeeded, messages: events.append((succeeded, messages)))

    assert result.resolve(["taken"]) is result

    assert events == [(False, ["taken"])]


def test_resolve_accepts_serialized_payload() -> None:
    result = ValidationResult()
    events = []
    result.on("closed", lambda succeeded, messages: events.append((succeeded, messages)))

    result.resolve("[]")

    assert result.status() is ResultStatus.VALID
    assert events == [(True, [])]


def test_resolve_with_absent_payload_is_a_no_op() -> None:
    result = ValidationResult()

    assert result.resolve(None) is None
    assert not result.is_resolved()


def test_second_resolution_does_not_change_messages() -> None:
    result = ValidationResult(["first"])
    events = []
    result.on("closed", lambda *args: events.append(args))

    assert result.resolve(["second"]) is None
    assert result.close([]) is None

    assert result.get_messages() == ["first"]
    assert events == []


def test_get_messages_returns_a_copy() -> None:
    result = ValidationResult(["first"])

    result.get_messages().append("tampered")

    assert result.get_messages() == ["first"]


@pytest.mark.parametrize("payload", ['{"a": 1}', "not json", [1, 2], b"[null]"])
def test_malformed_payload_raises(payload) -> None:
    result = ValidationResult()

    with pytest.raises(MessagePayloadError):
        result.resolve(payload)

    assert not result.is_resolved()


def test_parse_messages_decodes_bytes() -> None:
    assert parse_messages(b'["a", "b"]') == ["a", "b"]


# --- Failure ---


def test_fail_keeps_result_pending_and_notifies() -> None:
    result = ValidationResult()
    errors = []
    result.on("failed", errors.append)
    error = ValidationTransportError("/judge/validate", status=500)

    assert result.fail(error) is result

    assert result.status() is ResultStatus.PENDING
    assert result.error is error
    assert errors == [error]


def test_fail_after_resolution_is_a_no_op() -> None:
    result = ValidationResult([])

    assert result.fail(ValidationTransportError("/x")) is None
    assert result.error is None


def test_failed_result_cannot_be_resolved_or_failed_again() -> None:
    result = ValidationResult()
    result.fail(ValidationTransportError("/x"))

    assert result.resolve([]) is None
    assert result.fail(ValidationTransportError("/y")) is None
    assert result.status() is ResultStatus.PENDING
    assert result.error.url == "/x"
