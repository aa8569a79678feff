"""
Daraza Core Package
===================
Payment core for the Daraza mobile-money API.

Provides:
- Encrypted API key storage with rotation tracking (APIKeyManager)
- Validating client for balance, transfer, request-to-pay and remittance (DarazaClient)
- Pluggable settings storage (SQLite default) and HTTP transport
"""

from daraza_core.config import DarazaConfig, __version__
from daraza_core.errors import DarazaError, ErrorKind, MissingAPIKeyError
from daraza_core.key_manager import APIKeyManager
from daraza_core.client import DarazaClient
from daraza_core.models import PaymentRequest, is_success
from daraza_core.rate_limit import RateLimiter

__all__ = [
    "APIKeyManager",
    "DarazaClient",
    "DarazaConfig",
    "DarazaError",
    "ErrorKind",
    "MissingAPIKeyError",
    "PaymentRequest",
    "RateLimiter",
    "is_success",
    "__version__",
]
