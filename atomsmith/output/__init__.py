"""Output subsystem for generated stylesheets."""

from atomsmith.output.writer import OutputWriter, WriteOutcome

__all__ = [
    "OutputWriter",
    "WriteOutcome",
]
