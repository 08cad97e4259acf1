"""Corpus scanning with exclusions and order-stable token aggregation."""

from atomsmith.scanner.exclusion import is_excluded
from atomsmith.scanner.scanner import CorpusScanner, iter_corpus_files

__all__ = [
    "CorpusScanner",
    "is_excluded",
    "iter_corpus_files",
]
