"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Optional

from preselect.app import App, AppConfig
from preselect.directory import SourceFactory
from preselect.loaders import CSVLoader, Loader


@dataclass(frozen=True)
class ExtConfig:
    """Delimiters and quote character configured for one extension."""

    delims: str = ""
    quote: str = ""


def parse_ext_mapping(value: str) -> tuple[str, ExtConfig]:
    """Parse ``ext=delims[:quote]`` into an extension and its settings."""
    name, sep, settings = value.partition("=")
    ext = name.lower()
    if ext.startswith("."):
        ext = ext[1:]
    delims = ""
    quote = ""
    if sep:
        delims, qsep, quote_part = settings.partition(":")
        if qsep and quote_part:
            quote = quote_part[0]
    return ext, ExtConfig(delims, quote)


def format_ext_mappings(mappings: Mapping[str, ExtConfig]) -> str:
    """Render mappings back into the ``ext=delims[:quote]`` form."""
    parts = []
    for ext, conf in mappings.items():
        text = conf.delims
        if conf.quote:
            text += ":" + conf.quote
        parts.append(f"{ext}={text}")
    return ",".join(parts)


def build_ext_map(mappings: Mapping[str, ExtConfig]) -> dict[str, SourceFactory]:
    """Turn extension settings into data source factories."""
    ext_map: dict[str, SourceFactory] = {}
    for ext, conf in mappings.items():
        if ext == "csv":
            delim = conf.delims[0] if conf.delims else ","
            quote = conf.quote or '"'
            ext_map[ext] = partial(CSVLoader, delim=delim, quote=quote)
        else:
            ext_map[ext] = partial(Loader, delimiters=tuple(conf.delims) or None)
    return ext_map


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="preselect")
    parser.add_argument("-dir", "--dir", dest="root", default=".",
                        help="directory to scan")
    parser.add_argument(
        "-ext", "--ext", dest="mappings", action="append", default=[],
        type=parse_ext_mapping,
        help="extension configuration (e.g. -ext txt=,; -ext csv=;:\")",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scanner from the command line; return the exit status."""
    args = _parser().parse_args(argv)
    mappings = dict(args.mappings)
    config = AppConfig(root=args.root, ext_map=build_ext_map(mappings))
    try:
        App(config).run()
    except Exception as exc:
        print(f"preselect: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())