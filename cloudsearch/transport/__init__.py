from ._models import AsyncTransport, Transport, TransportResponse
from .httpx_transport import HTTPXTransport

__all__ = [
    "AsyncTransport",
    "HTTPXTransport",
    "Transport",
    "TransportResponse",
]
