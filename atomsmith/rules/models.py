"""Pydantic models for the rule engine."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class Rule(BaseModel):
    """One atomic class family, e.g. ``Bgc(<value>)`` -> background-color."""

    matcher: str = Field(pattern=r"^[A-Z][A-Za-z]*$")
    name: str = ""
    type: Literal["pattern", "helper"] = "pattern"
    styles: dict[str, str]
    values: dict[str, str] = Field(default_factory=dict)
    allow_param_to_value: bool = True
    selector_suffix: str = ""
    legacy: dict[str, dict[str, str]] = Field(default_factory=dict)


class GeneratorOptions(BaseModel):
    """Per-run switches that change how selectors and declarations render."""

    rtl: bool = False
    namespace: str | None = None
    helpers_namespace: str | None = None
    ie: bool = False


class StaticConfig(BaseModel):
    """Named values and breakpoints the generator resolves arguments against."""

    custom: dict[str, str] = Field(default_factory=dict)
    breakpoints: dict[str, str] = Field(default_factory=dict)


class ParsedClass(BaseModel):
    """A class name split into its grammar parts."""

    raw: str
    matcher: str
    args: list[str] | None = None
    important: bool = False
    pseudo: str | None = None
    breakpoint: str | None = None
