"""Tests for key_value_store module."""

import pytest

from qr_keeper.exceptions import StoreReadCorruptError, StoreWriteError
from qr_keeper.services.key_value_store import InMemoryKeyValueStore, SqliteKeyValueStore


@pytest.fixture
def sqlite_store(tmp_path):
    """Create a SqliteKeyValueStore with a temporary database."""
    store = SqliteKeyValueStore(tmp_path / "test_store.db")
    store.initialize()
    return store


# ---------------------------------------------------------------------------
# TestSqliteInitialize
# ---------------------------------------------------------------------------


class TestSqliteInitialize:
    """Tests for SqliteKeyValueStore.initialize."""

    def test_creates_database_file(self, tmp_path):
        """Should create the database file and parent directories."""
        db_path = tmp_path / "subdir" / "store.db"
        SqliteKeyValueStore(db_path).initialize()
        assert db_path.exists()

    def test_initialize_is_idempotent(self, tmp_path):
        """Should not fail or lose data if called multiple times."""
        store = SqliteKeyValueStore(tmp_path / "store.db")
        store.initialize()
        store.set("k", "v")
        store.initialize()
        assert store.get("k") == "v"


# ---------------------------------------------------------------------------
# TestSqliteGetSet
# ---------------------------------------------------------------------------


class TestSqliteGetSet:
    """Tests for SqliteKeyValueStore.get and set."""

    def test_missing_key_returns_none(self, sqlite_store):
        assert sqlite_store.get("qrHistory") is None

    def test_set_then_get(self, sqlite_store):
        sqlite_store.set("scanCount", "3")
        assert sqlite_store.get("scanCount") == "3"

    def test_set_replaces_value(self, sqlite_store):
        sqlite_store.set("scanCount", "3")
        sqlite_store.set("scanCount", "4")
        assert sqlite_store.get("scanCount") == "4"

    def test_empty_string_is_stored(self, sqlite_store):
        """An empty value is distinct from an absent key."""
        sqlite_store.set("k", "")
        assert sqlite_store.get("k") == ""

    def test_keys_are_independent(self, sqlite_store):
        sqlite_store.set("a", "1")
        sqlite_store.set("b", "2")
        assert sqlite_store.get("a") == "1"
        assert sqlite_store.get("b") == "2"

    def test_values_survive_new_instance(self, tmp_path):
        """A fresh instance on the same file should see earlier writes."""
        db_path = tmp_path / "store.db"
        first = SqliteKeyValueStore(db_path)
        first.initialize()
        first.set("qrHistory", '[{"value": "\\"quoted\\""}]')

        second = SqliteKeyValueStore(db_path)
        second.initialize()
        assert second.get("qrHistory") == '[{"value": "\\"quoted\\""}]'

    def test_unwritable_path_raises_store_write_error(self, tmp_path):
        """A directory in place of the database file cannot be written."""
        store = SqliteKeyValueStore(tmp_path)
        with pytest.raises(StoreWriteError):
            store.set("k", "v")

    def test_unreadable_path_raises_store_read_error(self, tmp_path):
        store = SqliteKeyValueStore(tmp_path)
        with pytest.raises(StoreReadCorruptError):
            store.get("k")

    def test_unencodable_value_raises_store_write_error(self, sqlite_store):
        """A lone surrogate cannot be stored as UTF-8 text."""
        with pytest.raises(StoreWriteError):
            sqlite_store.set("k", "bad \ud800 text")
        assert sqlite_store.get("k") is None


# ---------------------------------------------------------------------------
# TestSqliteLazyInitialize
# ---------------------------------------------------------------------------


class TestSqliteLazyInitialize:
    """Tests for using a store without calling initialize first."""

    def test_get_creates_table(self, tmp_path):
        store = SqliteKeyValueStore(tmp_path / "fresh" / "store.db")
        assert store.get("qrHistory") is None

    def test_set_creates_table(self, tmp_path):
        db_path = tmp_path / "fresh" / "store.db"
        SqliteKeyValueStore(db_path).set("scanCount", "1")
        assert SqliteKeyValueStore(db_path).get("scanCount") == "1"


class TestInMemoryKeyValueStore:
    """Tests for InMemoryKeyValueStore."""

    def test_initial_values(self):
        store = InMemoryKeyValueStore({"scanCount": "2"})
        assert store.get("scanCount") == "2"

    def test_initial_values_are_copied(self):
        initial = {"k": "v"}
        store = InMemoryKeyValueStore(initial)
        store.set("k", "changed")
        assert initial["k"] == "v"

    def test_set_then_get(self):
        store = InMemoryKeyValueStore()
        assert store.get("k") is None
        store.set("k", "v")
        assert store.get("k") == "v"
