# daraza_core/storage/provider.py
from __future__ import annotations
from typing import Any, Optional


class StorageError(Exception):
    pass


class SettingsStore:
    """
    Named-option key/value store the credential manager and rate limiter
    persist into. Values must be JSON-serializable.

    set() and delete() return False when the backend refused the write.
    """

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        raise NotImplementedError

    def set(self, name: str, value: Any) -> bool:
        raise NotImplementedError

    def delete(self, name: str) -> bool:
        raise NotImplementedError

    def close(self) -> None:
        return
