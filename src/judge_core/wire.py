"""Validator wire format.

The server describes each rule of a field as ``{kind, options, messages}``
(plus ``original_value`` for ``uniqueness``). The list is serialised into an
element attribute and decoded here when a queue is built.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .primitives.exceptions import MalformedSpecError

# Server-side options that never influence the client-side check.
REJECTED_OPTIONS = frozenset(
    {"if", "on", "unless", "tokenizer", "scope", "case_sensitive", "judge"}
)


class ValidatorSpec(BaseModel):
    """One rule declared for one field."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)
    messages: dict[str, str] = Field(default_factory=dict)
    original_value: Any = None

    @classmethod
    def from_rule(
        cls,
        kind: str,
        options: Mapping[str, Any] | None = None,
        messages: Mapping[str, str] | None = None,
        original_value: Any = None,
    ) -> ValidatorSpec:
        """Build a spec from a server-side rule, dropping server-only options."""
        kept = {k: v for k, v in (options or {}).items() if k not in REJECTED_OPTIONS}
        return cls(
            kind=kind,
            options=kept,
            messages=dict(messages or {}),
            original_value=original_value if kind == "uniqueness" else None,
        )

    def to_wire(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "kind": self.kind,
            "options": dict(self.options),
            "messages": dict(self.messages),
        }
        if self.kind == "uniqueness":
            params["original_value"] = self.original_value
        return params


_specs_adapter: TypeAdapter[list[ValidatorSpec]] = TypeAdapter(list[ValidatorSpec])


def parse_validator_specs(raw: str | bytes | list[Any] | None) -> list[ValidatorSpec]:
    """Decode the serialised validator list of an element.

    ``None`` (no attribute) yields no validators. Anything else that is not a
    list of well-formed specs raises
    :class:`~judge_core.primitives.exceptions.MalformedSpecError`.
    """
    if raw is None:
        return []
    try:
        if isinstance(raw, (str, bytes)):
            return _specs_adapter.validate_json(raw)
        return _specs_adapter.validate_python(raw)
    except PydanticValidationError as exc:
        reasons = [
            f"{'.'.join(str(p) for p in error.get('loc', ()))}: {error.get('msg')}"
            for error in exc.errors()
        ]
        raise MalformedSpecError("; ".join(reasons), raw) from exc


def encode_validators(specs: list[ValidatorSpec]) -> str:
    """Serialise *specs* into the text stored on the element."""
    return json.dumps([spec.to_wire() for spec in specs], separators=(",", ":"))
