"""Class-name grammar shared by the extractor and the generator.

A class name has the shape::

    Matcher[(arg[,arg...])][!][:pseudo][--breakpoint]

``Matcher`` must name a known rule. Pattern rules need an argument list,
helpers may omit it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from atomsmith.rules.models import ParsedClass, Rule

PSEUDO_CLASSES = {
    "a": "active",
    "c": "checked",
    "d": "disabled",
    "f": "focus",
    "fc": "first-child",
    "h": "hover",
    "lc": "last-child",
    "v": "visited",
}


class ClassNameGrammar:
    """Compiles one regex over every rule matcher and parses matches with it."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            self._rules[rule.matcher] = rule
        # Longest first so "Bgc" wins over "Bg" when both exist
        matchers = sorted(self._rules, key=len, reverse=True)
        alternation = "|".join(re.escape(m) for m in matchers) or r"(?!)"
        self._pattern = re.compile(
            rf"(?<![\w$-])(?P<matcher>{alternation})"
            r"(?:\((?P<args>[^()\s\"'`<>;{}]*)\))?"
            r"(?P<important>!)?"
            r"(?::(?P<pseudo>[a-z]+))?"
            r"(?:--(?P<breakpoint>[a-z][a-z0-9]*))?"
            r"(?![\w(-])"
        )

    @property
    def rules(self) -> dict[str, Rule]:
        return dict(self._rules)

    def rule_for(self, parsed: ParsedClass) -> Rule:
        return self._rules[parsed.matcher]

    def parse(self, name: str) -> ParsedClass | None:
        """Parse a whole class name, or return None if it is not one."""
        match = self._pattern.fullmatch(name)
        if match is None:
            return None
        return self._to_parsed(match)

    def finditer(self, text: str) -> Iterator[ParsedClass]:
        """Yield every valid class name in *text*, in order of appearance."""
        for match in self._pattern.finditer(text):
            parsed = self._to_parsed(match)
            if parsed is not None:
                yield parsed

    def _to_parsed(self, match: re.Match[str]) -> ParsedClass | None:
        rule = self._rules[match.group("matcher")]
        raw_args = match.group("args")
        if rule.type == "pattern" and not raw_args:
            return None
        pseudo = match.group("pseudo")
        if pseudo is not None and pseudo not in PSEUDO_CLASSES:
            return None
        return ParsedClass(
            raw=match.group(0),
            matcher=rule.matcher,
            args=raw_args.split(",") if raw_args else None,
            important=match.group("important") is not None,
            pseudo=pseudo,
            breakpoint=match.group("breakpoint"),
        )
