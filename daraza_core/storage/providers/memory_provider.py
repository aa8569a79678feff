from typing import Any, Dict, Optional
from daraza_core.storage.provider import SettingsStore


class InMemoryStore(SettingsStore):
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.options: Dict[str, Any] = dict(initial or {})

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        return self.options.get(name, default)

    def set(self, name: str, value: Any) -> bool:
        self.options[name] = value
        return True

    def delete(self, name: str) -> bool:
        return self.options.pop(name, None) is not None
