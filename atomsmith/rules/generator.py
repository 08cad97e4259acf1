"""Stylesheet generation from an ordered token set."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from atomsmith.errors import GenerationError
from atomsmith.rules.grammar import PSEUDO_CLASSES, ClassNameGrammar
from atomsmith.rules.models import GeneratorOptions, ParsedClass, Rule, StaticConfig

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


def escape_class(name: str) -> str:
    """Backslash-escape every character that is not valid in a bare class selector."""
    return re.sub(r"([^A-Za-z0-9_-])", r"\\\1", name)


def _swap_direction(text: str, rtl: bool) -> str:
    start, end = ("right", "left") if rtl else ("left", "right")
    return text.replace("__START__", start).replace("__END__", end)


class StylesheetGenerator:
    """Renders CSS for the tokens that resolve against the rule catalog.

    Plain rules come first, in token order, followed by one ``@media`` block
    per breakpoint in the order the breakpoints are configured. Tokens that
    name an unknown breakpoint or carry an unresolvable argument are skipped
    with a warning.
    """

    def __init__(self, rules: Iterable[Rule]) -> None:
        rules = list(rules)
        seen: set[str] = set()
        for rule in rules:
            if rule.matcher in seen:
                raise GenerationError(None, f"duplicate rule matcher {rule.matcher!r}")
            if not rule.styles:
                raise GenerationError(None, f"rule {rule.matcher!r} declares no styles")
            seen.add(rule.matcher)
        self._grammar = ClassNameGrammar(rules)

    def generate(
        self,
        tokens: Iterable[str],
        config: StaticConfig,
        options: GeneratorOptions,
    ) -> str:
        plain: list[str] = []
        media: dict[str, list[str]] = {name: [] for name in config.breakpoints}

        for token in tokens:
            parsed = self._grammar.parse(token)
            if parsed is None:
                logger.warning("Skipping %r: not a known class name", token)
                continue
            if parsed.breakpoint is not None:
                query = config.breakpoints.get(parsed.breakpoint)
                if query is None:
                    logger.warning("Skipping %r: unknown breakpoint %r", token, parsed.breakpoint)
                    continue
                if not query.lstrip().startswith("@media"):
                    raise GenerationError(
                        token, f"breakpoint {parsed.breakpoint!r} is not a media query: {query!r}"
                    )

            rule = self._grammar.rule_for(parsed)
            declarations = self._declarations(parsed, rule, config, options)
            if not declarations:
                continue

            block = _render_block(self._selector(parsed, rule, options), declarations)
            if parsed.breakpoint is not None:
                media[parsed.breakpoint].append(block)
            else:
                plain.append(block)

        chunks = list(plain)
        for name, blocks in media.items():
            if not blocks:
                continue
            body = "".join(_indent(block) for block in blocks)
            chunks.append(f"{config.breakpoints[name]} {{\n{body}}}\n")

        return "".join(chunks)

    def _selector(self, parsed: ParsedClass, rule: Rule, options: GeneratorOptions) -> str:
        selector = "." + escape_class(parsed.raw)
        if parsed.pseudo is not None:
            selector += ":" + PSEUDO_CLASSES[parsed.pseudo]
        selector += rule.selector_suffix

        if rule.type == "helper":
            namespace = options.helpers_namespace or options.namespace
        else:
            namespace = options.namespace
        return f"{namespace} {selector}" if namespace else selector

    def _declarations(
        self,
        parsed: ParsedClass,
        rule: Rule,
        config: StaticConfig,
        options: GeneratorOptions,
    ) -> list[tuple[str, str]]:
        resolved: list[str] = []
        for arg in parsed.args or []:
            value = _resolve_arg(arg, rule, config)
            if value is None:
                logger.warning("Skipping %r: cannot resolve argument %r", parsed.raw, arg)
                return []
            resolved.append(value)

        def _fill(match: re.Match[str]) -> str:
            index = int(match.group(1))
            return resolved[index] if index < len(resolved) else ""

        declarations: list[tuple[str, str]] = []
        for prop, template in rule.styles.items():
            value = " ".join(_PLACEHOLDER.sub(_fill, template).split())
            # Declarations whose arguments were not supplied are dropped
            if not value:
                continue
            value = _swap_direction(value, options.rtl)
            if parsed.important:
                value += " !important"
            declarations.append((_swap_direction(prop, options.rtl), value))

        if not declarations:
            logger.warning("Skipping %r: no declarations after resolving arguments", parsed.raw)
            return []

        if options.ie and rule.legacy:
            key = resolved[0] if resolved else "*"
            extra = rule.legacy.get(key, rule.legacy.get("*", {}))
            declarations.extend(extra.items())

        return declarations


def _resolve_arg(arg: str, rule: Rule, config: StaticConfig) -> str | None:
    if arg in rule.values:
        return rule.values[arg]
    if arg in config.custom:
        return config.custom[arg]
    if rule.allow_param_to_value and arg:
        return arg
    return None


def _render_block(selector: str, declarations: list[tuple[str, str]]) -> str:
    lines = "".join(f"  {prop}: {value};\n" for prop, value in declarations)
    return f"{selector} {{\n{lines}}}\n"


def _indent(block: str) -> str:
    return "".join(f"  {line}\n" for line in block.splitlines())
