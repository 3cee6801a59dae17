"""Application wiring: configuration plus directory scanning."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

from preselect.directory import SourceFactory, scan_directory
from preselect.loaders import CSVLoader, Loader
from preselect.processor import Processor


class _NoopProcessor(Processor):
    """Processor that keeps nothing."""

    def process(self, entry: str) -> bool:
        return False


def _default_txt(reader) -> Loader:
    return Loader(reader, None)


def _default_csv(reader) -> CSVLoader:
    return CSVLoader(reader, ",", '"')


@dataclass
class AppConfig:
    """Application configuration options."""

    root: Union[str, os.PathLike] = ""
    ext_map: Mapping[str, SourceFactory] = field(default_factory=dict)
    processor: Optional[Processor] = None


class App:
    """Runs a directory scan using the configured sources and processor."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run(self) -> None:
        """Scan the configured root, filling in defaults where unset."""
        ext_map = dict(self.config.ext_map)
        ext_map.setdefault("txt", _default_txt)
        ext_map.setdefault("csv", _default_csv)

        root = self.config.root or "."
        proc = self.config.processor or _NoopProcessor()

        scan_directory(root, ext_map, proc)