"""Token extraction from raw file content."""

from __future__ import annotations

from collections.abc import Iterable

from atomsmith.rules.grammar import ClassNameGrammar
from atomsmith.rules.models import Rule
from atomsmith.tokens import TokenSet


class TokenExtractor:
    """Finds class names known to the rule catalog in arbitrary text."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._grammar = ClassNameGrammar(rules)

    def extract(self, content: str) -> TokenSet:
        return TokenSet(parsed.raw for parsed in self._grammar.finditer(content))

    __call__ = extract
