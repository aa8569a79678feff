"""
daraza_core.key_manager
-----------------------
Encrypted storage, validation and rotation tracking for the Daraza API key.

The manager holds the settings store it persists into and is meant to be
constructed once per process and shared with every DarazaClient.
Plaintext keys never reach the store or the logs.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional
import re

from daraza_core.config import DarazaConfig
from daraza_core.crypto import decrypt_blob, derive_encryption_key, derive_iv, encrypt_blob
from daraza_core.errors import DarazaError, ErrorKind
from daraza_core.logger import configure_logging, get_logger
from daraza_core.storage.models import (
    EncryptedKeyRecord,
    KEY_EXPIRY_OPTION,
    KEY_OPTION_NAME,
    KEY_VERSION_OPTION,
)
from daraza_core.storage.provider import SettingsStore
from daraza_core.utils import DAY_IN_SECONDS, days_until, now_epoch

log = get_logger("daraza.KeyManager")

KEY_ROTATION_DAYS = 90
ROTATION_WARNING_DAYS = 7
KEY_LENGTH_MIN = 32
KEY_LENGTH_MAX = 128
KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]{%d,%d}$" % (KEY_LENGTH_MIN, KEY_LENGTH_MAX))


class APIKeyManager:
    def __init__(
        self,
        store: SettingsStore,
        config: DarazaConfig,
        now: Callable[[], float] = now_epoch,
    ):
        self.store = store
        self._config = config
        configure_logging(config)
        self._key = self.derive_encryption_key()
        self._now = now

    # ------------------------------------------------------------------
    # Format + cipher
    # ------------------------------------------------------------------
    def derive_encryption_key(self) -> bytes:
        return derive_encryption_key(self._config.auth_salt)

    def derive_iv(self) -> bytes:
        """Deterministic IV older installs encrypted with; decrypt() still reads those blobs."""
        return derive_iv(self._config.secure_auth_salt)

    @staticmethod
    def validate_format(api_key: Optional[str]) -> bool:
        if not api_key or not isinstance(api_key, str):
            return False
        if len(api_key) < KEY_LENGTH_MIN or len(api_key) > KEY_LENGTH_MAX:
            return False
        return KEY_PATTERN.fullmatch(api_key) is not None

    def encrypt(self, api_key: Optional[str]) -> Optional[str]:
        if not self.validate_format(api_key):
            return None
        return encrypt_blob(self._key, api_key)

    def decrypt(self, blob: Optional[str]) -> Optional[str]:
        if not blob:
            return None
        return decrypt_blob(self._key, blob)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save(self, api_key: str) -> EncryptedKeyRecord:
        """
        Encrypt and persist a new key, bumping the version and resetting the
        expiry to now + 90 days.

        Raises DarazaError with kind INVALID_KEY_FORMAT, ENCRYPTION_FAILED or
        PERSIST_FAILED.
        """
        if not self.validate_format(api_key):
            raise DarazaError(ErrorKind.INVALID_KEY_FORMAT)

        encrypted = self.encrypt(api_key)
        if encrypted is None:
            raise DarazaError(ErrorKind.ENCRYPTION_FAILED)

        version = int(self.store.get(KEY_VERSION_OPTION, 0) or 0) + 1
        expiry = int(self._now()) + KEY_ROTATION_DAYS * DAY_IN_SECONDS

        # Blob is written last; a failed save leaves the previous key readable
        for name, value in (
            (KEY_VERSION_OPTION, version),
            (KEY_EXPIRY_OPTION, expiry),
            (KEY_OPTION_NAME, encrypted),
        ):
            if not self.store.set(name, value):
                log.error(f"Daraza API key save failed writing {name}")
                raise DarazaError(ErrorKind.PERSIST_FAILED)

        log.info(f"Daraza API key updated (version={version})")
        return EncryptedKeyRecord(ciphertext=encrypted, version=version, expiry=expiry)

    def get(self) -> Optional[str]:
        encrypted = self.store.get(KEY_OPTION_NAME)
        if not encrypted:
            return None
        return self.decrypt(encrypted)

    def record(self) -> EncryptedKeyRecord:
        return EncryptedKeyRecord(
            ciphertext=self.store.get(KEY_OPTION_NAME),
            version=int(self.store.get(KEY_VERSION_OPTION, 0) or 0),
            expiry=self.store.get(KEY_EXPIRY_OPTION),
        )

    def delete(self) -> bool:
        self.store.delete(KEY_OPTION_NAME)
        self.store.delete(KEY_VERSION_OPTION)
        self.store.delete(KEY_EXPIRY_OPTION)

        log.info("Daraza API key deleted")
        return True

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------
    def needs_rotation(self) -> bool:
        expiry = self.store.get(KEY_EXPIRY_OPTION)
        if not expiry:
            return True
        return self._now() >= int(expiry) - ROTATION_WARNING_DAYS * DAY_IN_SECONDS

    def days_until_expiry(self) -> int:
        expiry = self.store.get(KEY_EXPIRY_OPTION)
        if not expiry:
            return 0
        return days_until(int(expiry), self._now())

    def metadata(self) -> Dict[str, Any]:
        return {
            "version": int(self.store.get(KEY_VERSION_OPTION, 0) or 0),
            "expiry": int(self.store.get(KEY_EXPIRY_OPTION, 0) or 0),
            "needs_rotation": self.needs_rotation(),
            "days_until_expiry": self.days_until_expiry(),
            "is_configured": bool(self.get()),
        }

    def test_key(self, api_key: Optional[str] = None) -> bool:
        """Format check only; no request is made to the provider."""
        if api_key is None:
            api_key = self.get()
        return self.validate_format(api_key)
