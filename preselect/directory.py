"""Concurrent directory scanning that feeds entries to a processor."""

from __future__ import annotations

import contextlib
import os
import queue
import stat
import threading
from collections.abc import Callable, Iterator, Mapping
from typing import BinaryIO, Union

from preselect.processor import Processor
from preselect.scanner import DataSource, Scanner

SourceFactory = Callable[[BinaryIO], DataSource]
"""Creates a data source from an open binary file."""

_DONE = object()


def _extension(name: str) -> str:
    """Lower-cased extension of ``name`` without its leading dot."""
    dot = name.rfind(".")
    return name[dot + 1 :].lower() if dot >= 0 else ""


def _walk_dir(path: str) -> Iterator[str]:
    with os.scandir(path) as it:
        children = sorted(it, key=lambda child: child.name)
    for child in children:
        if child.is_dir(follow_symlinks=False):
            yield from _walk_dir(child.path)
        else:
            yield child.path


def _walk_files(root: str) -> Iterator[str]:
    """Yield every non-directory path under ``root`` in lexical order."""
    if not stat.S_ISDIR(os.stat(root).st_mode):
        yield root
        return
    yield from _walk_dir(root)


def _run_scanner(
    scanner: Scanner, file: BinaryIO, sink: Callable[[str], object]
) -> None:
    # A failing source only ends its own scan; other files carry on.
    try:
        with contextlib.suppress(Exception):
            scanner.scan_to(sink)
    finally:
        file.close()


def scan_directory(
    root: Union[str, os.PathLike],
    ext_map: Mapping[str, SourceFactory],
    proc: Processor,
) -> None:
    """Scan ``root`` recursively and feed every entry to ``proc``.

    Each file whose extension has a factory in ``ext_map`` is scanned in its
    own thread; all entries go to a single consumer that calls
    ``proc.process``. The first error raised by the processor is re-raised
    once scanning is complete; errors while walking the tree are raised too.
    """
    root = os.fspath(root)
    entries: queue.Queue[object] = queue.Queue()
    errors: list[Exception] = []

    def consume() -> None:
        while True:
            item = entries.get()
            if item is _DONE:
                return
            try:
                proc.process(item)  # type: ignore[arg-type]
            except Exception as exc:
                if not errors:
                    errors.append(exc)

    consumer = threading.Thread(target=consume, daemon=True)
    consumer.start()

    scanners: list[threading.Thread] = []
    try:
        for path in _walk_files(root):
            factory = ext_map.get(_extension(os.path.basename(path)))
            if factory is None:
                continue
            file = open(path, "rb")
            try:
                source = factory(file)
            except BaseException:
                file.close()
                raise
            worker = threading.Thread(
                target=_run_scanner,
                args=(Scanner(source), file, entries.put),
                daemon=True,
            )
            worker.start()
            scanners.append(worker)
    finally:
        for worker in scanners:
            worker.join()
        entries.put(_DONE)
        consumer.join()

    if errors:
        raise errors[0]