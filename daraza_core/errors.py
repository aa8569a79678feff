from __future__ import annotations
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    MISSING_API_KEY = "missing_api_key"
    INVALID_KEY_FORMAT = "invalid_key_format"
    ENCRYPTION_FAILED = "encryption_failed"
    DECRYPTION_FAILED = "decryption_failed"
    PERSIST_FAILED = "persist_failed"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_PHONE = "invalid_phone"
    INVALID_NOTE = "invalid_note"
    INVALID_PERCENTAGE = "invalid_percentage"
    TRANSPORT_ERROR = "transport_error"
    HTTP_STATUS_ERROR = "http_status_error"
    INVALID_JSON = "invalid_json"
    PROVIDER_ERROR = "provider_error"


DEFAULT_MESSAGES = {
    ErrorKind.MISSING_API_KEY: "API key is not configured or invalid.",
    ErrorKind.INVALID_KEY_FORMAT: "Invalid API key format.",
    ErrorKind.ENCRYPTION_FAILED: "Failed to encrypt API key.",
    ErrorKind.DECRYPTION_FAILED: "Failed to decrypt API key.",
    ErrorKind.PERSIST_FAILED: "Failed to save API key.",
    ErrorKind.INVALID_AMOUNT: "Invalid amount. Must be between 1 and 1,000,000.",
    ErrorKind.INVALID_PHONE: "Invalid phone number format.",
    ErrorKind.INVALID_NOTE: "Invalid note. Must be between 1 and 255 characters.",
    ErrorKind.INVALID_PERCENTAGE: "Invalid percentage. Must be between 1 and 100.",
    ErrorKind.TRANSPORT_ERROR: "API request could not be completed.",
    ErrorKind.HTTP_STATUS_ERROR: "API request failed with status code: ",
    ErrorKind.INVALID_JSON: "Invalid JSON response.",
    ErrorKind.PROVIDER_ERROR: "Payment request failed.",
}


class DarazaError(Exception):
    """Base error for the credential manager and client construction."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)


class MissingAPIKeyError(DarazaError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(ErrorKind.MISSING_API_KEY, message)
