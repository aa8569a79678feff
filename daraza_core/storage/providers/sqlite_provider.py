from __future__ import annotations
from typing import Any, Optional
import json, sqlite3, os
from daraza_core.logger import get_logger
from daraza_core.storage.provider import SettingsStore

log = get_logger("daraza.Storage.SQLite")


class SQLiteStore(SettingsStore):
    def __init__(self, path="db/daraza_settings.db"):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.db = sqlite3.connect(path, check_same_thread=False)

        self._init()

    def _init(self) -> None:
        c = self.db.cursor()
        c.execute("""CREATE TABLE IF NOT EXISTS options(
            name TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )""")
        self.db.commit()

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        cur = self.db.execute("SELECT value FROM options WHERE name=?", (name,))
        row = cur.fetchone()
        if not row:
            return default
        return json.loads(row[0])

    def set(self, name: str, value: Any) -> bool:
        try:
            self.db.execute(
                "INSERT INTO options(name,value) VALUES(?,?) "
                "ON CONFLICT(name) DO UPDATE SET value=excluded.value",
                (name, json.dumps(value, separators=(",", ":"))),
            )
            self.db.commit()
        except (sqlite3.Error, TypeError, ValueError) as e:
            log.error(f"[SQLITE SET] failed for option {name}: {e}")
            return False
        return True

    def delete(self, name: str) -> bool:
        try:
            cur = self.db.execute("DELETE FROM options WHERE name=?", (name,))
            self.db.commit()
        except sqlite3.Error as e:
            log.error(f"[SQLITE DELETE] failed for option {name}: {e}")
            return False
        return cur.rowcount > 0

    def close(self):
        self.db.close()
