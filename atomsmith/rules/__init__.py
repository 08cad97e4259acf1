"""Rule engine: the rule catalog, class-name parsing and CSS generation."""

from atomsmith.rules.defaults import DEFAULT_RULES
from atomsmith.rules.extractor import TokenExtractor
from atomsmith.rules.generator import StylesheetGenerator, escape_class
from atomsmith.rules.grammar import PSEUDO_CLASSES, ClassNameGrammar
from atomsmith.rules.models import GeneratorOptions, ParsedClass, Rule, StaticConfig

__all__ = [
    "DEFAULT_RULES",
    "PSEUDO_CLASSES",
    "ClassNameGrammar",
    "GeneratorOptions",
    "ParsedClass",
    "Rule",
    "StaticConfig",
    "StylesheetGenerator",
    "TokenExtractor",
    "escape_class",
]
