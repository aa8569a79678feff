# daraza_core/transport/__init__.py
import os
from daraza_core.transport.transport_base import BaseTransport, TransportError, TransportResponse
from daraza_core.transport.transport_http import HTTPTransport


def transport_factory(mode: str = None) -> BaseTransport:
    """
    mode:
      - "http" → live requests transport (default)
    """
    mode = (mode or os.getenv("DARAZA_TRANSPORT", "http")).lower()

    if mode == "http":
        return HTTPTransport()

    raise ValueError(f"Unknown transport mode: {mode}")


__all__ = [
    "BaseTransport",
    "HTTPTransport",
    "TransportError",
    "TransportResponse",
    "transport_factory",
]
