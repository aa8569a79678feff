"""
daraza_core.client
------------------
Authenticated client for the four Daraza endpoints: wallet balance, wallet
transfer, request-to-pay and remittance.

Every operation validates its inputs before any I/O and always returns a
dict: the provider body unchanged on success, or
{"status": "error", "message": ..., "details"?: ..., "error": <kind>}.
Nothing is retried; retry policy belongs to the caller.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Union
import json

from daraza_core.config import DEFAULT_BASE_URL, DarazaConfig, __version__
from daraza_core.errors import ErrorKind, MissingAPIKeyError
from daraza_core.key_manager import APIKeyManager
from daraza_core.logger import configure_logging, get_logger
from daraza_core.models import Number, PaymentRequest, error_result, is_error, json_number, to_decimal, validate_percentage
from daraza_core.transport import BaseTransport, TransportError, TransportResponse, transport_factory

log = get_logger("daraza.API")

ENDPOINTS = {
    "remit": "/remit/",
    "request_to_pay": "/request_to_pay/",
    "balance": "/app_wallet/balance/",
    "transfer": "/app_wallet/transfer/",
}

WALLET_TIMEOUT = 45
# The provider holds the connection open until the payer confirms on the handset
PAYMENT_TIMEOUT = 180


class DarazaClient:
    def __init__(
        self,
        key_manager: APIKeyManager,
        transport: Optional[BaseTransport] = None,
        config: Optional[DarazaConfig] = None,
    ):
        if config:
            configure_logging(config)

        self._api_key = key_manager.get()
        if not self._api_key:
            raise MissingAPIKeyError()

        if key_manager.needs_rotation():
            log.warning("Daraza API key needs rotation")

        # Only a transport built here is closed by close()
        self._owns_transport = transport is None
        self.transport = transport or transport_factory(config.transport if config else None)
        self.base_url = (config.base_url if config else DEFAULT_BASE_URL).rstrip("/")
        self.user_agent = config.user_agent if config else f"Daraza-Python-Client/{__version__}"

    @classmethod
    def create(
        cls,
        key_manager: APIKeyManager,
        transport: Optional[BaseTransport] = None,
        config: Optional[DarazaConfig] = None,
    ) -> Optional["DarazaClient"]:
        """Like the constructor, but returns None when no API key is configured."""
        try:
            return cls(key_manager, transport=transport, config=config)
        except MissingAPIKeyError as e:
            log.error(f"Daraza API Error (init): {e.message}")
            return None

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "DarazaClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def get_wallet_balance(self) -> Dict[str, Any]:
        return self._send("GET", "balance", timeout=WALLET_TIMEOUT)

    def transfer_balance(self, percentage: Number) -> Dict[str, Any]:
        kind = validate_percentage(percentage)
        if kind:
            return error_result(kind)

        payload = {"percentage": json_number(to_decimal(percentage))}
        return self._send("POST", "transfer", payload=payload, timeout=WALLET_TIMEOUT)

    def request_to_pay(self, amount: Number, phone: str, note: str) -> Dict[str, Any]:
        return self._payment("request_to_pay", PaymentRequest(amount, phone, note))

    def remit_payment(self, amount: Number, phone: str, note: str) -> Dict[str, Any]:
        return self._payment("remit", PaymentRequest(amount, phone, note))

    def _payment(self, context: str, req: PaymentRequest) -> Dict[str, Any]:
        kind = req.validate()
        if kind:
            return error_result(kind)
        return self._send("POST", context, payload=req.to_payload(), timeout=PAYMENT_TIMEOUT)

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------
    def _headers(self, with_body: bool) -> Dict[str, str]:
        headers = {
            "Authorization": f"Api-Key {self._api_key}",
            "User-Agent": self.user_agent,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _send(self, method: str, context: str, payload: Optional[dict] = None, timeout: float = WALLET_TIMEOUT) -> Dict[str, Any]:
        url = f"{self.base_url}{ENDPOINTS[context]}"
        try:
            response = self.transport.request(
                method,
                url,
                headers=self._headers(with_body=payload is not None),
                json_body=payload,
                timeout=timeout,
            )
        except TransportError as e:
            return self.process_response(e, context)
        return self.process_response(response, context)

    def process_response(self, response: Union[TransportResponse, TransportError], context: str) -> Dict[str, Any]:
        if isinstance(response, TransportError):
            message = str(response) or None
            self._log_error(f"API Request Error: {message}", context)
            return error_result(ErrorKind.TRANSPORT_ERROR, message)

        if not response.ok:
            self._log_error(f"API returned status code: {response.status_code}", context)
            return error_result(
                ErrorKind.HTTP_STATUS_ERROR,
                f"API request failed with status code: {response.status_code}",
            )

        try:
            body = json.loads(response.body)
        except (ValueError, UnicodeDecodeError):
            body = None
        if not isinstance(body, dict):
            self._log_error("Invalid JSON response from the API.", context)
            return error_result(ErrorKind.INVALID_JSON)

        if is_error(body):
            message = body.get("message") or None
            details = body.get("details")
            details = str(details) if details else None
            if details:
                self._log_error(f"API Error Details: {details}", context)
                message = f"{message} - {details}" if message else details
            self._log_error(f"API Error: {message}", context)
            return error_result(ErrorKind.PROVIDER_ERROR, message, details)

        log.info(f"Daraza API Info: API Response Success: {context}")
        return body

    @staticmethod
    def _log_error(message: str, context: str) -> None:
        log.error(f"Daraza API Error ({context}): {message}")
