"""atomsmith: atomic CSS from the class names a corpus uses."""

from atomsmith.errors import (
    AtomsmithError,
    ConfigurationError,
    GenerationError,
    OutputError,
    ScanError,
)
from atomsmith.orchestrator import BuildReport, Orchestrator
from atomsmith.tokens import TokenSet

__version__ = "0.1.0"

__all__ = [
    "AtomsmithError",
    "BuildReport",
    "ConfigurationError",
    "GenerationError",
    "Orchestrator",
    "OutputError",
    "ScanError",
    "TokenSet",
]
