from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from config import DB_PATH
from errors import EmptyQuoteError, PersistenceFailure
from quotes import Quote

logger = logging.getLogger(__name__)


class QuoteStore:
    """Local corpus of quotes that have been typed, used when the API is down."""

    def __init__(self, path: Path = DB_PATH) -> None:
        self.path = Path(path)

    def _connect(self) -> sqlite3.Connection:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.path)
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS quotes(
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                text TEXT NOT NULL,
                author TEXT NOT NULL,
                added_at DATETIME DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        return conn

    def add(self, quote: Quote) -> None:
        try:
            conn = self._connect()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceFailure(f"could not open {self.path}: {e}") from e
        try:
            with conn:
                conn.execute(
                    "INSERT INTO quotes(text, author) "
                    "SELECT ?, ? WHERE NOT EXISTS (SELECT 1 FROM quotes WHERE text = ?)",
                    (quote.text, quote.author, quote.text),
                )
        except sqlite3.Error as e:
            raise PersistenceFailure(f"could not store quote: {e}") from e
        finally:
            conn.close()

    def random_quote(self) -> Quote | None:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT text, author FROM quotes "
                "WHERE trim(text, ' ' || char(9) || char(10) || char(11) || char(12) || char(13)) != '' "
                "ORDER BY RANDOM() LIMIT 1"
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        try:
            return Quote.from_raw(row[0], row[1])
        except EmptyQuoteError:
            logger.warning("Skipping blank quote row in %s", self.path)
            return None

    def count(self) -> int:
        conn = self._connect()
        try:
            return conn.execute("SELECT COUNT(*) FROM quotes").fetchone()[0]
        finally:
            conn.close()
