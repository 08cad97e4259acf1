"""Shared test fixtures for atomsmith."""

from pathlib import Path

import pytest

from atomsmith.rules import DEFAULT_RULES, StylesheetGenerator, TokenExtractor
from atomsmith.scanner import CorpusScanner


@pytest.fixture
def extractor():
    return TokenExtractor(DEFAULT_RULES)


@pytest.fixture
def generator():
    return StylesheetGenerator(DEFAULT_RULES)


@pytest.fixture
def scanner(extractor):
    return CorpusScanner(extractor)


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """A small site: two top-level pages, a nested partial, a minified bundle."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text('<div class="D(b) Bgc(#0af)">hi</div>')
    (root / "about.html").write_text('<p class="C(red) D(b)">about</p>')
    (root / "partials").mkdir()
    (root / "partials" / "nav.html").write_text('<nav class="Fl(start) Cf"></nav>')
    (root / "bundle.min.js").write_text('el.className = "Op(0)";')
    return root


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch):
    """Run with an empty HOME and cwd so no user or project config leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path
