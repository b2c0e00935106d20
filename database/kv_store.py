'''
    File Name: kv_store.py
    Version: 3.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''

import sqlite3
from contextlib import closing
from pathlib import Path
import logging
from typing import Optional

import config

logger = logging.getLogger(__name__)


class KeyValueStore:
    """String blobs stored by key in a single SQLite table."""

    def __init__(self, db_path: Path = None):
        # prefer explicit path, otherwise config value
        if db_path is not None:
            self.db_path = Path(db_path)
        else:
            self.db_path = Path(config.DATABASE_PATH)

    def _connect(self):
        """Return a new sqlite3 connection to the configured DB path."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(str(self.db_path))

    def ensure_database(self) -> None:
        """
        Ensure the configured SQLite database file exists and initialize schema.
        Safe to call multiple times.
        """
        logger.debug("Ensuring database exists at %s", self.db_path)
        existed = self.db_path.exists()
        try:
            with closing(self._connect()) as conn:
                cur = conn.cursor()
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    );
                    """
                )
                conn.commit()
            if not existed:
                logger.info("Created and initialized database at %s", self.db_path)
        except Exception:
            logger.exception("Failed to create/initialize database at %s", self.db_path)
            raise

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under `key`, or None if absent or unreadable."""
        if not self.db_path.exists():
            return None
        try:
            with closing(self._connect()) as conn:
                cur = conn.cursor()
                cur.execute("SELECT value FROM kv WHERE key = ?", (key,))
                row = cur.fetchone()
            return row[0] if row else None
        except Exception:
            logger.exception("Failed reading key %s", key)
            return None

    def set(self, key: str, value: str) -> bool:
        """Overwrite the value stored under `key`. Returns True on success."""
        try:
            self.ensure_database()
            with closing(self._connect()) as conn:
                cur = conn.cursor()
                cur.execute(
                    "INSERT INTO kv (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
                conn.commit()
            return True
        except Exception:
            logger.exception("Failed writing key %s", key)
            return False
