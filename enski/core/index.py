"""Prefix-token index lookup over the dictionary dataset."""

import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from ..models.entry import Entry
from .errors import DataUnavailable
from .normalizer import TextNormalizer

DEFAULT_CANDIDATE_LIMIT = 101

_normalizer = TextNormalizer()


class DatasetProvider(ABC):
    """Read-only source of dictionary entries.

    Implementations must return prefix matches in a deterministic,
    descending-relevance order, capped at ``limit`` rows.
    """

    @abstractmethod
    def lookup_prefix(self, token: str, limit: int = DEFAULT_CANDIDATE_LIMIT) -> List[Entry]:
        """Return entries matching a prefix query expression."""
        pass

    @abstractmethod
    def random_entry(self) -> Optional[Entry]:
        """Return one entry chosen uniformly at random, or None if empty."""
        pass


class DictionaryIndex(DatasetProvider):
    """SQLite FTS5 backed dictionary.

    Expects a ``dictionary`` table keyed by ``id`` and a ``dictionary_fts``
    FTS5 table whose rowid is the entry ``id``.
    """

    REQUIRED_TABLES = ("dictionary", "dictionary_fts")

    LOOKUP_SQL = """
        SELECT d.id, d.word, d.definition, d.ipa_uk, d.ipa_us
        FROM (
            SELECT rowid AS entry_id, rank AS relevance
            FROM dictionary_fts
            WHERE dictionary_fts MATCH ?
        ) AS f
        JOIN dictionary AS d ON d.id = f.entry_id
        ORDER BY f.relevance, d.id
        LIMIT ?
    """

    RANDOM_SQL = """
        SELECT id, word, definition, ipa_uk, ipa_us
        FROM dictionary
        ORDER BY RANDOM()
        LIMIT 1
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        """
        Wrap an open connection.

        Args:
            connection: SQLite connection with ``row_factory = sqlite3.Row``
        """
        self._conn = connection

    @classmethod
    def open(cls, path: Union[str, Path]) -> "DictionaryIndex":
        """
        Open a dictionary database read-only and verify its schema.

        Args:
            path: Path to the SQLite database file

        Returns:
            A ready DictionaryIndex

        Raises:
            DataUnavailable: if the file is missing, unreadable or malformed
        """
        db_path = Path(path)
        if not db_path.is_file():
            raise DataUnavailable(f"dictionary database not found at {db_path}")

        try:
            conn = sqlite3.connect(
                f"{db_path.resolve().as_uri()}?mode=ro",
                uri=True,
                check_same_thread=False,
            )
        except sqlite3.Error as e:
            raise DataUnavailable(f"cannot open {db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        index = cls(conn)
        try:
            index.verify()
        except DataUnavailable:
            conn.close()
            raise
        return index

    def verify(self) -> None:
        """Check that the tables exist and the FTS index answers queries."""
        try:
            rows = self._conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            ).fetchall()
            present = {row["name"] for row in rows}
            missing = [name for name in self.REQUIRED_TABLES if name not in present]
            if missing:
                raise DataUnavailable(f"dictionary database is missing tables: {', '.join(missing)}")

            self._conn.execute("SELECT rowid FROM dictionary_fts LIMIT 1").fetchall()
        except sqlite3.Error as e:
            raise DataUnavailable(f"dictionary index is unusable: {e}") from e

    def lookup_prefix(self, token: str, limit: int = DEFAULT_CANDIDATE_LIMIT) -> List[Entry]:
        """
        Run an FTS5 match and return entries by descending relevance.

        Args:
            token: FTS5 query expression, e.g. ``"app"*``
            limit: Maximum number of rows

        Returns:
            Entries ordered by bm25 rank, ties by id
        """
        try:
            rows = self._conn.execute(self.LOOKUP_SQL, (token, limit)).fetchall()
        except sqlite3.Error as e:
            raise DataUnavailable(f"dictionary lookup failed: {e}") from e
        return [_row_to_entry(row) for row in rows]

    def random_entry(self) -> Optional[Entry]:
        """Return a uniformly random entry, or None for an empty dataset."""
        try:
            row = self._conn.execute(self.RANDOM_SQL).fetchone()
        except sqlite3.Error as e:
            raise DataUnavailable(f"random entry lookup failed: {e}") from e
        return _row_to_entry(row) if row is not None else None

    def count(self) -> int:
        """Number of entries in the dataset."""
        try:
            return self._conn.execute("SELECT COUNT(*) FROM dictionary").fetchone()[0]
        except sqlite3.Error as e:
            raise DataUnavailable(f"dictionary count failed: {e}") from e

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()


def build_prefix_query(query: str) -> Optional[str]:
    """
    Turn a raw query into an FTS5 prefix expression.

    Every token is quoted and the last one gets the ``*`` wildcard, so
    ``"ice cr"`` becomes ``"ice" "cr"*``.

    Args:
        query: Raw user query

    Returns:
        FTS5 match expression, or None if the query has no word tokens
    """
    tokens = _normalizer.tokenize(query)
    if not tokens:
        return None

    quoted = ['"{}"'.format(token) for token in tokens]
    quoted[-1] += "*"
    return " ".join(quoted)


def lookup_candidates(
    provider: DatasetProvider,
    query: str,
    limit: int = DEFAULT_CANDIDATE_LIMIT
) -> List[Entry]:
    """
    Index Query Engine: prefix lookup for a raw query.

    Args:
        provider: Dataset to query
        query: Raw user query
        limit: Candidate cap

    Returns:
        Candidate entries in the provider's relevance order
    """
    expression = build_prefix_query(query)
    if expression is None:
        return []
    return provider.lookup_prefix(expression, limit)


def _row_to_entry(row: sqlite3.Row) -> Entry:
    return Entry(
        id=row["id"],
        word=row["word"] or "",
        definition=row["definition"] or "",
        ipa_uk=row["ipa_uk"] or "",
        ipa_us=row["ipa_us"] or "",
    )
