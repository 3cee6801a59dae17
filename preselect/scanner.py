"""Entries, data sources and the scanner that drains them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Entry:
    """A single piece of data from a source, with its origin path."""

    value: str
    path: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))


class DataSource(ABC):
    """Iterator over the sequential entries of a source.

    Exhaustion is signalled with ``StopIteration``; any other failure is
    raised as an exception.
    """

    def __iter__(self) -> Iterator[Entry]:
        return self

    @abstractmethod
    def __next__(self) -> Entry:
        """Return the next entry or raise ``StopIteration``."""


class Scanner:
    """Coordinates similarity checks on data provided by a data source."""

    def __init__(self, source: Iterable[Entry]) -> None:
        self.source = source

    def scan(self, keywords: Iterable[str]) -> None:
        """Read the source to exhaustion; errors from the source propagate."""
        keywords = tuple(keywords)
        for _entry in self.source:
            pass

    def scan_to(self, sink: Callable[[str], object]) -> None:
        """Hand every entry's value to ``sink`` until the source is exhausted."""
        for entry in self.source:
            sink(entry.value)