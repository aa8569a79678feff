# daraza_core/storage/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

KEY_OPTION_NAME = "daraza_api_key_encrypted"
KEY_VERSION_OPTION = "daraza_api_key_version"
KEY_EXPIRY_OPTION = "daraza_api_key_expiry"


@dataclass
class EncryptedKeyRecord:
    """
    Storage-level view of the persisted API key.

    ciphertext is the base64 AES-GCM blob; the plaintext key never lands here.
    """
    ciphertext: Optional[str] = None
    version: int = 0
    expiry: Optional[int] = None

    def __repr__(self) -> str:
        state = "set" if self.ciphertext else "unset"
        return f"EncryptedKeyRecord(ciphertext=<{state}>, version={self.version}, expiry={self.expiry})"
