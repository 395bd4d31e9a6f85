"""Shared fixtures: throwaway SQLite FTS5 dictionaries."""

import sqlite3

import pytest

from enski.core.index import DictionaryIndex
from enski.models.entry import Entry


SCHEMA = """
CREATE TABLE dictionary (
    id INTEGER PRIMARY KEY,
    word TEXT NOT NULL,
    definition TEXT,
    ipa_uk TEXT,
    ipa_us TEXT
);
CREATE VIRTUAL TABLE dictionary_fts USING fts5(
    word, definition, content='dictionary', content_rowid='id'
);
"""


def build_dictionary_db(path, entries):
    """Write entries to a new dictionary database at path."""
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA)
        conn.executemany(
            "INSERT INTO dictionary (id, word, definition, ipa_uk, ipa_us) VALUES (?, ?, ?, ?, ?)",
            [(e.id, e.word, e.definition, e.ipa_uk, e.ipa_us) for e in entries],
        )
        conn.execute("INSERT INTO dictionary_fts (dictionary_fts) VALUES ('rebuild')")
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def sample_entries():
    """A small English dictionary."""
    return [
        Entry(id=1, word="apple", definition="the round fruit of a tree", ipa_uk="ˈæp.əl", ipa_us="ˈæp.əl"),
        Entry(id=2, word="apply", definition="to make a formal request", ipa_uk="əˈplaɪ", ipa_us="əˈplaɪ"),
        Entry(id=3, word="able", definition="having the power or skill", ipa_uk="ˈeɪ.bəl", ipa_us="ˈeɪ.bəl"),
        Entry(id=4, word="application", definition="a formal request to an authority"),
        Entry(id=5, word="orchard", definition="a piece of land planted with apple trees"),
        Entry(id=6, word="ableism", definition="unfair treatment of disabled people"),
        Entry(id=7, word="café", definition="a small restaurant serving drinks"),
        Entry(id=8, word="ice cream", definition="a sweet frozen dessert"),
    ]


@pytest.fixture
def dictionary_db(tmp_path, sample_entries):
    """Path to a database holding the sample entries."""
    return build_dictionary_db(tmp_path / "dict.db", sample_entries)


@pytest.fixture
def dictionary_index(dictionary_db):
    """An open index over the sample entries."""
    index = DictionaryIndex.open(dictionary_db)
    yield index
    index.close()


@pytest.fixture
def large_dictionary_db(tmp_path):
    """Path to a database with more prefix matches than the candidate cap."""
    entries = [
        Entry(id=i, word=f"word{i}", definition=f"definition number {i}")
        for i in range(1, 151)
    ]
    return build_dictionary_db(tmp_path / "large.db", entries)


@pytest.fixture
def make_dictionary_db(tmp_path):
    """Factory building a named database from a list of entries."""
    def _make(name, entries):
        return build_dictionary_db(tmp_path / name, entries)
    return _make
