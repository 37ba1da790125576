import logging

import pytest

from judge_core.adapters.memory import InMemoryElement
from judge_core.primitives.exceptions import (
    UnknownValidatorError,
    ValidatorRegistrationError,
)
from judge_core.queue import validate
from judge_core.result import ValidationResult
from judge_core.validators import (
    LengthOptions,
    ValidatorRegistry,
    build_default_registry,
    get_validator_registry,
    register_validator,
    set_validator_registry,
)
from judge_core.wire import ValidatorSpec

BUILT_INS = [
    "presence",
    "length",
    "exclusion",
    "inclusion",
    "numericality",
    "format",
    "acceptance",
    "confirmation",
    "uniqueness",
]


def odd_length(context, options, messages):
    return ValidationResult([] if len(context.value) % 2 else [messages["odd_length"]])


def test_default_registry_holds_every_built_in() -> None:
    assert build_default_registry().kinds == BUILT_INS


def test_registration_is_logged_and_looked_up(caplog) -> None:
    caplog.set_level(logging.DEBUG)
    registry = ValidatorRegistry()

    definition = registry.register("odd_length", odd_length)

    assert registry.get("odd_length") is definition
    assert registry.has("odd_length")
    assert "Registered validator kind odd_length" in caplog.text


def test_re_registering_the_same_function_is_allowed() -> None:
    registry = ValidatorRegistry()
    registry.register("odd_length", odd_length)

    registry.register("odd_length", odd_length)

    assert registry.kinds == ["odd_length"]


def test_conflicting_registration_raises_unless_replacing() -> None:
    registry = build_default_registry()

    with pytest.raises(ValidatorRegistrationError, match="Duplicate validator kind"):
        registry.register("presence", odd_length)

    registry.register("presence", odd_length, replace=True)
    assert registry.get("presence").check is odd_length


def test_non_callable_check_is_rejected() -> None:
    with pytest.raises(ValidatorRegistrationError, match="not callable"):
        ValidatorRegistry().register("broken", "nope")  # type: ignore[arg-type]


def test_unknown_kind_lists_suggestions() -> None:
    registry = build_default_registry()

    with pytest.raises(UnknownValidatorError) as exc_info:
        registry.get("lenght")

    assert exc_info.value.suggestions == ["length"]
    assert "Did you mean: length?" in str(exc_info.value)


def test_unregister_and_clear() -> None:
    registry = build_default_registry()

    registry.unregister("uniqueness")
    registry.unregister("never-registered")
    assert not registry.has("uniqueness")

    registry.clear()
    assert registry.kinds == []


def test_prepare_validates_options_with_the_kind_model() -> None:
    registry = build_default_registry()
    spec = ValidatorSpec(kind="length", options={"is": "4", "allow_blank": True})

    definition, options = registry.prepare(spec)

    assert definition.options_model is LengthOptions
    assert options.is_ == 4
    assert options.model_extra == {"allow_blank": True}


def test_prepare_passes_plain_options_for_kinds_without_model() -> None:
    registry = build_default_registry()

    _definition, options = registry.prepare(
        ValidatorSpec(kind="presence", options={"allow_blank": False})
    )

    assert options == {"allow_blank": False}


def test_copy_is_independent() -> None:
    registry = build_default_registry()
    clone = registry.copy()

    clone.register("odd_length", odd_length)

    assert not registry.has("odd_length")


# --- Process-wide registry ---


def test_process_wide_registry_is_built_once() -> None:
    first = get_validator_registry()

    assert get_validator_registry() is first
    assert first.kinds == BUILT_INS


def test_register_validator_decorator_extends_process_wide_registry() -> None:
    @register_validator("odd_length")
    def check(context, options, messages):
        return odd_length(context, options, messages)

    element = InMemoryElement("user[code]", "ab").validate_with(
        [{"kind": "odd_length", "messages": {"odd_length": "must have odd length"}}]
    )

    queue = validate(element)

    assert get_validator_registry().get("odd_length").check is check
    assert queue.get_messages() == ["must have odd length"]


def test_set_validator_registry_swaps_the_default() -> None:
    custom = ValidatorRegistry()
    set_validator_registry(custom)

    assert get_validator_registry() is custom

    set_validator_registry(None)
    assert get_validator_registry() is not custom
