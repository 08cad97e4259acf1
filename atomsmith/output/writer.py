"""OutputWriter: delivers the generated stylesheet to a file or a stream."""

from __future__ import annotations

import enum
import glob
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from atomsmith.errors import OutputError

logger = logging.getLogger(__name__)

_TEMP_SUFFIX = ".tmp"


class WriteOutcome(str, enum.Enum):
    WRITTEN = "written"
    UNCHANGED = "unchanged"
    STDOUT = "stdout"


class OutputWriter:
    """Delivers a stylesheet to its destination.

    With a destination file, identical content is left untouched and new
    content replaces the old file atomically, so a failed write never leaves
    a truncated stylesheet behind. Without one, the stylesheet goes to
    *stream* (stdout unless given).
    """

    def __init__(self, destination: str | Path | None = None, stream: TextIO | None = None) -> None:
        self.destination = Path(destination).resolve() if destination is not None else None
        self._stream = stream

    @property
    def temp_pattern(self) -> str | None:
        """Glob matching the temporary files ``write`` creates beside the destination."""
        if self.destination is None:
            return None
        parent = glob.escape(self.destination.parent.as_posix())
        return f"{parent}/.{glob.escape(self.destination.name)}.*{_TEMP_SUFFIX}"

    def write(self, css: str) -> WriteOutcome:
        if self.destination is None:
            stream = self._stream or sys.stdout
            stream.write(css)
            stream.flush()
            return WriteOutcome.STDOUT

        dest = self.destination
        data = css.encode("utf-8")
        try:
            if dest.is_file() and dest.read_bytes() == data:
                logger.info("%s unchanged", dest)
                return WriteOutcome.UNCHANGED

            dest.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=dest.parent, prefix=f".{dest.name}.", suffix=_TEMP_SUFFIX
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp_name, dest)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise OutputError(dest, e) from e

        logger.info("wrote %s (%d bytes)", dest, len(data))
        return WriteOutcome.WRITTEN
