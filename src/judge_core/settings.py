"""JudgeSettings — immutable runtime configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JudgeSettings(BaseModel):
    """Configuration shared by queues, validators and transports.

    Usage::

        settings = JudgeSettings(engine_path="/validations", request_timeout=3.0)
        queue = validate(element, settings=settings, transport=transport)
    """

    model_config = ConfigDict(frozen=True)

    engine_path: str = "/judge"
    """Mount point of the server-side validation endpoint."""

    validators_attribute: str = "data-validate"
    """Element attribute holding the serialised validator list."""

    allow_blank_option: str = "allow_blank"
    """Option that skips a rule when the element value is blank."""

    request_timeout: float | None = Field(default=10.0, gt=0)
    """Seconds before a network round trip is abandoned. ``None`` waits forever."""

    requested_with: str = "XMLHttpRequest"
    """Value of the ``X-Requested-With`` header marking programmatic requests."""


DEFAULT_SETTINGS = JudgeSettings()
