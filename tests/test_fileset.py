"""Tests for the watched file registry."""

from pathlib import Path

from atomsmith.watch import WatchedFileSet


class TestWatchedFileSet:
    def test_starts_empty(self):
        assert WatchedFileSet().snapshot() == []

    def test_add_is_idempotent_and_ordered(self, tmp_path: Path):
        files = WatchedFileSet()
        files.add(tmp_path / "b.html")
        files.add(tmp_path / "a.html")
        files.add(tmp_path / "b.html")
        assert files.snapshot() == [tmp_path / "b.html", tmp_path / "a.html"]

    def test_remove_absent_is_noop(self, tmp_path: Path):
        files = WatchedFileSet()
        files.remove(tmp_path / "ghost.html")
        assert len(files) == 0

    def test_remove_then_add_moves_to_end(self, tmp_path: Path):
        files = WatchedFileSet()
        files.add(tmp_path / "a")
        files.add(tmp_path / "b")
        files.remove(tmp_path / "a")
        files.add(tmp_path / "a")
        assert files.snapshot() == [tmp_path / "b", tmp_path / "a"]

    def test_paths_are_normalised(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        files = WatchedFileSet()
        files.add("x.js")
        assert tmp_path / "x.js" in files
        files.remove(tmp_path / "sub" / ".." / "x.js")
        assert "x.js" not in files

    def test_snapshot_is_a_copy(self, tmp_path: Path):
        files = WatchedFileSet()
        files.add(tmp_path / "a")
        snap = files.snapshot()
        files.add(tmp_path / "b")
        assert snap == [tmp_path / "a"]

    def test_remove_tree(self, tmp_path: Path):
        files = WatchedFileSet()
        files.add(tmp_path / "keep.html")
        files.add(tmp_path / "dir" / "a.html")
        files.add(tmp_path / "dir" / "sub" / "b.html")
        files.add(tmp_path / "dirty.html")
        assert files.remove_tree(tmp_path / "dir") == 2
        assert files.snapshot() == [tmp_path / "keep.html", tmp_path / "dirty.html"]
