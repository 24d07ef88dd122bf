"""
Unit tests for memory and file token stores.
"""

import stat

import pytest
from portal_auth.adapters import FileTokenStore, MemoryTokenStore


class TestMemoryTokenStore:

    def test_empty(self):
        store = MemoryTokenStore()
        assert store.load() is None
        assert store.clear() is False

    def test_save_replaces(self):
        store = MemoryTokenStore("first", {"role": "user"})
        store.save("second")

        assert store.load() == {"token": "second", "user": None}

    def test_clear(self):
        store = MemoryTokenStore("tok")
        assert store.clear() is True
        assert store.load() is None


class TestFileTokenStore:

    def test_round_trip(self, tmp_path):
        store = FileTokenStore(tmp_path / "nested" / "session.json")
        store.save("tok", {"role": "admin"})

        assert store.load() == {"token": "tok", "user": {"role": "admin"}}
        # A fresh instance (next process start) sees the same record
        assert FileTokenStore(store.path).load()["token"] == "tok"

    def test_owner_only_permissions(self, tmp_path):
        store = FileTokenStore(tmp_path / "session.json")
        store.save("tok")

        mode = stat.S_IMODE(store.path.stat().st_mode)
        assert mode == 0o600

    def test_missing_file(self, tmp_path):
        store = FileTokenStore(tmp_path / "session.json")

        assert store.load() is None
        assert store.clear() is False

    def test_corrupt_file_ignored(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")

        assert FileTokenStore(path).load() is None

    def test_record_without_token_ignored(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text('{"user": {"role": "user"}}')

        assert FileTokenStore(path).load() is None

    def test_clear(self, tmp_path):
        store = FileTokenStore(tmp_path / "session.json")
        store.save("tok")

        assert store.clear() is True
        assert not store.path.exists()
