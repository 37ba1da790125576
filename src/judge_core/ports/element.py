"""Host-environment element protocols.

Value extraction is owned by the host (a DOM, a form library, a test double).
The core only reads through these protocols.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IElement(Protocol):
    """An input control whose value is being validated."""

    @property
    def name(self) -> str:
        """Composite field name, e.g. ``user[email]``."""
        ...

    @property
    def value(self) -> str:
        """Current textual value."""
        ...

    @property
    def element_id(self) -> str | None:
        """Identifier used to locate companion controls."""
        ...

    @property
    def checked(self) -> bool | None:
        """Checked state for checkbox-like controls, ``None`` otherwise."""
        ...

    def get_attribute(self, name: str) -> str | None:
        """Return a raw attribute value or ``None``."""
        ...


@runtime_checkable
class IDocument(Protocol):
    """Lookup of sibling controls by identifier."""

    def get_element_by_id(self, element_id: str) -> IElement | None:
        """Return the element with *element_id* or ``None``."""
        ...
