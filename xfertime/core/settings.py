"""Application settings for Xfer Time using SQLite.

Only interface preferences live here. Calculator inputs are never stored.
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".xfertime"


class Settings:
    """Persistent settings storage backed by SQLite."""

    DEFAULTS = {
        "theme": "dark",
        "window_geometry": "",
    }

    def __init__(self, db_path: Optional[str] = None):
        if db_path is None:
            CONFIG_DIR.mkdir(parents=True, exist_ok=True)
            db_path = str(CONFIG_DIR / "settings.db")

        self._db_path = db_path
        self._conn = sqlite3.connect(db_path)
        self._init_db()

    def _init_db(self):
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        self._conn.commit()

    def get(self, key: str, default: Any = None) -> Any:
        cursor = self._conn.execute("SELECT value FROM settings WHERE key = ?", (key,))
        row = cursor.fetchone()
        if row is None:
            if default is not None:
                return default
            return self.DEFAULTS.get(key)
        try:
            return json.loads(row[0])
        except (json.JSONDecodeError, TypeError):
            logger.warning(f"Setting {key!r} is not valid JSON, returning raw value")
            return row[0]

    def set(self, key: str, value: Any):
        serialized = json.dumps(value)
        self._conn.execute(
            "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
            (key, serialized)
        )
        self._conn.commit()

    def get_all(self) -> dict:
        result = dict(self.DEFAULTS)
        cursor = self._conn.execute("SELECT key, value FROM settings")
        for key, value in cursor.fetchall():
            try:
                result[key] = json.loads(value)
            except (json.JSONDecodeError, TypeError):
                result[key] = value
        return result

    def close(self):
        self._conn.close()
