from pydantic import BaseModel, Field
from typing import Literal

from atomsmith.rules.models import GeneratorOptions


class OutputConfig(BaseModel):
    path: str | None = None


class AtomsmithConfig(BaseModel):
    class_names: list[str] = Field(default_factory=list)
    custom: dict[str, str] = Field(default_factory=dict)
    breakpoints: dict[str, str] = Field(default_factory=dict)
    exclude: list[str] = Field(default_factory=list)
    rules_file: str | None = None
    recursive: bool = False
    output: OutputConfig = Field(default_factory=OutputConfig)
    options: GeneratorOptions = Field(default_factory=GeneratorOptions)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
