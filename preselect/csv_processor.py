"""Processor that appends kept entries to a CSV file."""

from __future__ import annotations

import os
from types import TracebackType
from typing import Optional, Union

from preselect.processor import Processor, ProcessorConfig

_SPECIAL = (",", '"', "\r", "\n")


def _format_field(value: str) -> str:
    """Quote a field the way a comma-separated writer does when needed."""
    needs_quotes = value != "" and (
        value == "\\."
        or any(ch in value for ch in _SPECIAL)
        or value[0].isspace()
    )
    if not needs_quotes:
        return value
    return '"' + value.replace('"', '""') + '"'


class CSVProcessor(Processor):
    """Stores entries that match a keyword in an appended CSV file."""

    def __init__(
        self, config: ProcessorConfig, file_path: Union[str, os.PathLike]
    ) -> None:
        self.config = config
        self._file = open(file_path, "a", encoding="utf-8", newline="")

    def process(self, entry: str) -> bool:
        """Write ``entry`` if any keyword scores at or above the threshold."""
        for keyword in self.config.keywords:
            if self.config.metric(entry, keyword) >= self.config.threshold:
                self._file.write(_format_field(entry) + "\n")
                self._file.flush()
                return True
        return False

    def close(self) -> None:
        """Flush and close the underlying file."""
        try:
            self._file.flush()
        finally:
            self._file.close()

    def __enter__(self) -> "CSVProcessor":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()