# daraza_core/transport/transport_http.py
from typing import Optional
import requests
from daraza_core.logger import get_logger
from daraza_core.transport.transport_base import BaseTransport, Headers, TransportError, TransportResponse

log = get_logger("daraza.Transport.HTTP")


class HTTPTransport(BaseTransport):
    """
    requests-backed transport for the Daraza API.

    TLS verification is always on and cannot be disabled per call.
    requests speaks HTTP/1.1 only, which is what the provider expects.
    """
    name = "http"

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def request(self, method, url, headers: Headers, json_body=None, timeout=45) -> TransportResponse:
        log.debug(f"[HTTP {method}] → {url}")
        try:
            res = self.session.request(
                method,
                url,
                headers=headers,
                data=self.to_bytes(json_body) if json_body is not None else None,
                timeout=timeout,
                verify=True,
            )
        except requests.RequestException as e:
            log.error(f"[HTTP {method}] {url} failed: {e}")
            raise TransportError(str(e)) from e

        log.debug(f"[HTTP {method}] {res.status_code} {res.reason}")
        return TransportResponse(
            status_code=res.status_code,
            body=res.content,
            headers=dict(res.headers),
        )

    def close(self) -> None:
        self.session.close()
