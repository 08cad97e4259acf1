from .loader import load_config, load_rules
from .models import (
    AtomsmithConfig,
    GeneratorOptions,
    OutputConfig,
)

__all__ = [
    "AtomsmithConfig",
    "GeneratorOptions",
    "OutputConfig",
    "load_config",
    "load_rules",
]
