from .element import IDocument, IElement
from .transport import IValidationTransport, TransportResponse

__all__ = [
    "IDocument",
    "IElement",
    "IValidationTransport",
    "TransportResponse",
]
