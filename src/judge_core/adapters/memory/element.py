"""In-memory host elements — testing and headless implementations of IElement."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ...settings import DEFAULT_SETTINGS
from ...wire import ValidatorSpec, encode_validators

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typing_extensions import Self


@dataclass
class InMemoryElement:
    """A form control held in memory.

    Usage::

        element = InMemoryElement("user[email]", "a@b.c", element_id="user_email")
        element.validate_with([{"kind": "presence", "messages": {"blank": "..."}}])
    """

    name: str
    value: str = ""
    element_id: str | None = None
    checked: bool | None = None
    attributes: dict[str, str] = field(default_factory=dict)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def validate_with(
        self,
        specs: Iterable[ValidatorSpec | Mapping[str, Any]],
        attribute: str = DEFAULT_SETTINGS.validators_attribute,
    ) -> Self:
        """Serialise *specs* onto the element, as the server would render them."""
        models = [
            spec if isinstance(spec, ValidatorSpec) else ValidatorSpec.model_validate(spec)
            for spec in specs
        ]
        self.attributes[attribute] = encode_validators(models)
        return self


class InMemoryDocument:
    """Id index of in-memory elements (companion lookup)."""

    def __init__(self, *elements: InMemoryElement) -> None:
        self._elements: dict[str, InMemoryElement] = {}
        for element in elements:
            self.add(element)

    def add(self, element: InMemoryElement) -> InMemoryElement:
        if element.element_id is None:
            raise ValueError(f"Element '{element.name}' has no id")
        self._elements[element.element_id] = element
        return element

    def remove(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    def get_element_by_id(self, element_id: str) -> InMemoryElement | None:
        return self._elements.get(element_id)
