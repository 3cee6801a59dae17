"""Processor contract: evaluate entries against keywords with a similarity metric."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

SimilarityMetric = Callable[[str, str], float]
"""A function measuring how similar two strings are."""


@dataclass(frozen=True)
class ProcessorConfig:
    """Options for setting up a processor."""

    metric: SimilarityMetric
    keywords: Iterable[str] = field(default=())
    threshold: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", tuple(self.keywords))
        object.__setattr__(self, "threshold", float(self.threshold))


class Processor(ABC):
    """Evaluates entries and stores those that meet a configured threshold.

    Implementations decide how kept entries are stored.
    """

    @abstractmethod
    def process(self, entry: str) -> bool:
        """Evaluate ``entry``; return True if it was kept and stored."""