"""Tests for glob-based exclusion."""

from pathlib import Path

from atomsmith.scanner import is_excluded


class TestIsExcluded:
    def test_no_patterns_never_excludes(self, tmp_path: Path):
        assert not is_excluded(tmp_path / "a.js", [])

    def test_basename_pattern_matches_at_any_depth(self, tmp_path: Path):
        assert is_excluded(tmp_path / "vendor" / "deep" / "lib.min.js", ["*.min.js"])
        assert not is_excluded(tmp_path / "lib.js", ["*.min.js"])

    def test_any_pattern_is_enough(self, tmp_path: Path):
        assert is_excluded(tmp_path / "draft.html", ["*.css", "draft.*"])

    def test_question_mark_wildcard(self, tmp_path: Path):
        assert is_excluded(tmp_path / "a1.html", ["a?.html"])
        assert not is_excluded(tmp_path / "a12.html", ["a?.html"])

    def test_slash_pattern_matches_full_path(self, tmp_path: Path):
        path = tmp_path / "vendor" / "lib.js"
        assert is_excluded(path, ["*/vendor/*"])
        assert not is_excluded(tmp_path / "src" / "lib.js", ["*/vendor/*"])

    def test_relative_path_is_normalised(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert is_excluded("sub/../page.html", [f"{tmp_path.as_posix()}/page.html"])

    def test_malformed_pattern_does_not_raise(self, tmp_path: Path):
        assert not is_excluded(tmp_path / "a.html", ["[unclosed"])
        assert is_excluded(tmp_path / "[unclosed", ["[unclosed"])

    def test_idempotent(self, tmp_path: Path):
        path = tmp_path / "x.min.js"
        patterns = ["*.min.js"]
        assert is_excluded(path, patterns) == is_excluded(path, patterns)
