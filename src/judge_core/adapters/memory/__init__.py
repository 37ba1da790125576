from .element import InMemoryDocument, InMemoryElement
from .transport import InMemoryTransport, RecordedRequest

__all__ = [
    "InMemoryDocument",
    "InMemoryElement",
    "InMemoryTransport",
    "RecordedRequest",
]
