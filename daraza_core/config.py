"""
daraza_core.config
------------------
Environment-driven settings. The two salts play the role of the host's
site-wide secrets and must both be present.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging, os

from daraza_core.logger import resolve_level

__version__ = "1.2.0"

DEFAULT_BASE_URL = "https://daraza.net/api"


@dataclass
class DarazaConfig:
    auth_salt: str
    secure_auth_salt: str
    base_url: str = DEFAULT_BASE_URL
    storage_provider: str = "sqlite"
    transport: str = "http"
    db_path: str = "db/daraza_settings.db"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    client_version: str = __version__

    @property
    def user_agent(self) -> str:
        return f"Daraza-Python-Client/{self.client_version}"

    @classmethod
    def from_env(cls) -> "DarazaConfig":
        auth_salt = os.getenv("DARAZA_AUTH_SALT")
        if not auth_salt:
            raise RuntimeError("DARAZA_AUTH_SALT is not set.")
        secure_auth_salt = os.getenv("DARAZA_SECURE_AUTH_SALT")
        if not secure_auth_salt:
            raise RuntimeError("DARAZA_SECURE_AUTH_SALT is not set.")

        return cls(
            auth_salt=auth_salt,
            secure_auth_salt=secure_auth_salt,
            base_url=os.getenv("DARAZA_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            storage_provider=os.getenv("DARAZA_STORAGE_PROVIDER", "sqlite").lower(),
            transport=os.getenv("DARAZA_TRANSPORT", "http").lower(),
            db_path=os.getenv("DARAZA_DB_PATH", "db/daraza_settings.db"),
            log_level=logging.getLevelName(resolve_level(os.getenv("DARAZA_LOG_LEVEL"))),
            log_file=os.getenv("DARAZA_LOG_FILE") or None,
        )
