"""Data sources that split text streams into entries."""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import IO, Optional, Union

from preselect.scanner import DataSource, Entry

ReaderLike = Union[IO[str], IO[bytes], str, bytes, None]


class _CharStream:
    """Character-at-a-time reader with one character of push-back."""

    _CHUNK = 8192

    def __init__(self, reader: ReaderLike) -> None:
        if reader is None:
            reader = io.StringIO("", newline="")
        elif isinstance(reader, str):
            reader = io.StringIO(reader, newline="")
        elif isinstance(reader, (bytes, bytearray)):
            reader = io.BytesIO(bytes(reader))
        if isinstance(reader.read(0), bytes):
            reader = io.TextIOWrapper(
                reader, encoding="utf-8", errors="replace", newline=""
            )
        self._stream = reader
        self._buffer = ""
        self._index = 0
        self._pushed: Optional[str] = None

    def read(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._pushed is not None:
            ch, self._pushed = self._pushed, None
            return ch
        if self._index >= len(self._buffer):
            self._buffer = self._stream.read(self._CHUNK)
            self._index = 0
            if not self._buffer:
                return ""
        ch = self._buffer[self._index]
        self._index += 1
        return ch

    def unread(self, ch: str) -> None:
        self._pushed = ch


class CSVLoader(DataSource):
    """Yields CSV cells one by one, with path (row, column)."""

    def __init__(
        self,
        reader: ReaderLike = None,
        delim: Optional[str] = ",",
        quote: Optional[str] = '"',
    ) -> None:
        self._chars = _CharStream(reader)
        self._delim = delim or ","
        self._quote = quote or '"'
        self._row = 1
        self._col = 0
        self._in_quote = False
        self._token: Optional[list[str]] = None
        self._eof = False

    def __iter__(self) -> "CSVLoader":
        return self

    def _emit(self) -> Entry:
        self._col += 1
        entry = Entry("".join(self._token or ()), (str(self._row), str(self._col)))
        self._token = None
        return entry

    def _end_row(self) -> Entry:
        entry = self._emit()
        self._row += 1
        self._col = 0
        return entry

    def _append(self, ch: str) -> None:
        if self._token is None:
            self._token = []
        self._token.append(ch)

    def __next__(self) -> Entry:
        while True:
            if self._eof:
                if self._token is not None:
                    return self._emit()
                raise StopIteration

            ch = self._chars.read()
            if not ch:
                self._eof = True
                continue

            if self._in_quote:
                if ch == self._quote:
                    following = self._chars.read()
                    if following:
                        if following == self._quote:
                            self._append(self._quote)
                            continue
                        self._chars.unread(following)
                    else:
                        self._eof = True
                    self._in_quote = False
                    continue
                self._append(ch)
                continue

            if ch == self._quote:
                self._in_quote = True
            elif ch == self._delim:
                return self._emit()
            elif ch == "\n":
                return self._end_row()
            elif ch == "\r":
                following = self._chars.read()
                if following:
                    if following != "\n":
                        self._chars.unread(following)
                else:
                    self._eof = True
                return self._end_row()
            else:
                self._append(ch)


class Loader(DataSource):
    """Yields delimiter-separated tokens.

    Each entry's path is (token number, byte offset of the token, line number).
    """

    def __init__(
        self, reader: ReaderLike = None, delimiters: Optional[Iterable[str]] = None
    ) -> None:
        self._chars = _CharStream(reader)
        delims = frozenset(delimiters or ())
        self._delimiters = delims or frozenset({" ", "\n"})
        self._token: list[str] = []
        self._in_token = False
        self._token_start = 0
        self._position = 0
        self._token_number = 0
        self._line = 1
        self._eof = False

    def __iter__(self) -> "Loader":
        return self

    def _emit(self) -> Entry:
        self._token_number += 1
        entry = Entry(
            "".join(self._token),
            (str(self._token_number), str(self._token_start), str(self._line)),
        )
        self._token = []
        self._in_token = False
        return entry

    def __next__(self) -> Entry:
        while True:
            if self._eof:
                if self._in_token:
                    return self._emit()
                raise StopIteration

            ch = self._chars.read()
            if not ch:
                self._eof = True
                continue

            current = self._position
            self._position += len(ch.encode("utf-8", "surrogatepass"))

            if ch in self._delimiters:
                entry = self._emit() if self._in_token else None
                if ch == "\n":
                    self._line += 1
                if entry is not None:
                    return entry
                continue

            if not self._in_token:
                self._in_token = True
                self._token_start = current
            self._token.append(ch)