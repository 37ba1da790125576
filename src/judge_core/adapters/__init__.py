"""Concrete collaborators: in-memory host/transport and an HTTP transport."""

from .http import HttpxTransport
from .memory import InMemoryDocument, InMemoryElement, InMemoryTransport

__all__ = [
    "HttpxTransport",
    "InMemoryDocument",
    "InMemoryElement",
    "InMemoryTransport",
]
