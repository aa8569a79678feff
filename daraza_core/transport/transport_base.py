from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import json

Headers = Dict[str, str]


class TransportError(Exception):
    """Network-level failure: DNS, connect, TLS, timeout."""
    pass


@dataclass
class TransportResponse:
    status_code: int
    body: bytes = b""
    headers: Headers = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class BaseTransport:
    """
    Contract for issuing a single HTTP request to the provider.

    Implementations return a TransportResponse for any HTTP status and raise
    TransportError only when no response was received. They never retry.
    """
    name: str = "base"

    def request(
        self,
        method: str,
        url: str,
        headers: Headers,
        json_body: Optional[dict] = None,
        timeout: float = 45,
    ) -> TransportResponse:
        raise NotImplementedError

    def close(self) -> None:
        return

    # ---------------------------
    # Helpers
    # ---------------------------
    @staticmethod
    def to_bytes(payload: bytes | dict | None) -> bytes:
        if payload is None:
            return b""
        if isinstance(payload, bytes):
            return payload
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
