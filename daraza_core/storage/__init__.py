# daraza_core/storage/__init__.py

from .models import EncryptedKeyRecord
from .provider import SettingsStore, StorageError
from .providers.memory_provider import InMemoryStore
from .providers.sqlite_provider import SQLiteStore
import os


def load_settings_store(config=None) -> SettingsStore:
    """
    Factory resolver for selecting the runtime settings backend.

        - sqlite (default)
        - memory

    config may be a DarazaConfig or None; the environment fills any gaps.
    """
    provider = getattr(config, "storage_provider", None) or os.getenv("DARAZA_STORAGE_PROVIDER", "sqlite")

    if provider == "memory":
        return InMemoryStore()

    if provider == "sqlite":
        db_path = getattr(config, "db_path", None) or os.getenv("DARAZA_DB_PATH", "db/daraza_settings.db")
        return SQLiteStore(db_path)

    raise StorageError(f"Unknown storage provider: {provider}")


__all__ = [
    "EncryptedKeyRecord",
    "SettingsStore",
    "StorageError",
    "InMemoryStore",
    "SQLiteStore",
    "load_settings_store",
]
