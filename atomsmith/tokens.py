"""Insertion-ordered token set used for scan aggregation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class TokenSet:
    """A set of class-name tokens that remembers first-occurrence order.

    Union keeps each token at the position where it was first seen, so the
    stylesheet rendered from a TokenSet is stable across runs over the same
    inputs.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: dict[str, None] = dict.fromkeys(tokens)

    def add(self, token: str) -> None:
        self._tokens.setdefault(token, None)

    def update(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.add(token)

    def union(self, *others: Iterable[str]) -> TokenSet:
        merged = TokenSet(self)
        for other in others:
            merged.update(other)
        return merged

    def __or__(self, other: Iterable[str]) -> TokenSet:
        return self.union(other)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenSet):
            return list(self._tokens) == list(other._tokens)
        if isinstance(other, (set, frozenset)):
            return set(self._tokens) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TokenSet({list(self._tokens)!r})"
