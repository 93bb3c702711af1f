"""Tests for the key/value storage backends."""

from __future__ import annotations

from pathlib import Path

import pytest

from nature_near.errors import PersistenceFailure
from nature_near.storage import FileStorage, MemoryStorage


class TestMemoryStorage:
    """Session-scoped storage."""

    def test_missing_key(self) -> None:
        assert MemoryStorage().get("nope") is None

    def test_set_get_remove(self) -> None:
        storage = MemoryStorage()
        storage.set("k", "v")
        assert storage.get("k") == "v"
        storage.remove("k")
        assert storage.get("k") is None

    def test_remove_missing_is_noop(self) -> None:
        MemoryStorage().remove("never-set")


class TestFileStorage:
    """Durable storage, one file per key."""

    def test_missing_key(self, tmp_path: Path) -> None:
        assert FileStorage(tmp_path).get("naturenear-recent-searches") is None

    def test_writes_one_file_per_key(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        storage.set("community-searches", "[]")
        assert (tmp_path / "community-searches.json").read_text() == "[]"
        assert storage.get("community-searches") == "[]"

    def test_creates_base_dir(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "deep" / "data")
        storage.set("k", "v")
        assert storage.get("k") == "v"

    def test_overwrite(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        storage.set("k", "one")
        storage.set("k", "two")
        assert storage.get("k") == "two"
        assert not (tmp_path / "k.tmp").exists()

    def test_remove(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        storage.set("k", "v")
        storage.remove("k")
        assert storage.get("k") is None
        storage.remove("k")

    def test_unicode_round_trip(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        storage.set("k", "Mōʻiliʻili 🌺")
        assert storage.get("k") == "Mōʻiliʻili 🌺"

    @pytest.mark.parametrize("key", ["../escape", "a/b", ".hidden", ""])
    def test_rejects_unsafe_keys(self, tmp_path: Path, key: str) -> None:
        with pytest.raises(ValueError):
            FileStorage(tmp_path).set(key, "v")

    def test_write_failure_raises_persistence_failure(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(PersistenceFailure):
            FileStorage(blocker).set("k", "v")
