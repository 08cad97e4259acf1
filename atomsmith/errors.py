"""Error taxonomy for atomsmith builds."""

from __future__ import annotations

from pathlib import Path


class AtomsmithError(Exception):
    """Base class for every error that aborts a build."""


class ConfigurationError(AtomsmithError):
    """Raised when a config or rules file is missing or invalid."""

    def __init__(self, path: str | Path | None, reason: str) -> None:
        self.path = Path(path) if path is not None else None
        self.reason = reason
        where = f" {self.path}" if self.path is not None else ""
        super().__init__(f"Invalid configuration{where}: {reason}")


class ScanError(AtomsmithError):
    """Wraps a failure to stat, list, read, or extract tokens from an input."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot scan {self.path}: {cause}")
        self.__cause__ = cause


class GenerationError(AtomsmithError):
    """Raised when the stylesheet generator cannot render a token."""

    def __init__(self, token: str | None, reason: str) -> None:
        self.token = token
        self.reason = reason
        subject = f" for {token!r}" if token else ""
        super().__init__(f"Stylesheet generation failed{subject}: {reason}")


class OutputError(AtomsmithError):
    """Raised when the generated stylesheet cannot be written."""

    def __init__(self, destination: str | Path, cause: Exception) -> None:
        self.destination = Path(destination)
        super().__init__(f"Cannot write {self.destination}: {cause}")
        self.__cause__ = cause
