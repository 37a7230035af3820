from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from hexdumper.utils.logger import get_logger

log = get_logger(__name__)

STDIN = "-"
_CHUNK = 64 * 1024

Source = Union[str, Path]


class SourceError(OSError):
    """An input source could not be opened or read."""

    def __init__(self, name: str, reason: str):
        super().__init__(reason)
        self.name = name
        self.reason = reason

    def __str__(self) -> str:
        return f"file error '{self.name}': {self.reason}."


def source_name(source: Source) -> str:
    return "<stdin>" if str(source) == STDIN else str(source)


def _skip(stream: BinaryIO, skip: int) -> None:
    if stream.seekable():
        try:
            stream.seek(skip, 1)
            return
        except (OverflowError, ValueError):
            # offset too large for the platform seek; reading runs into EOF first
            log.debug("seek by %d not possible, discarding instead", skip)
    left = skip
    while left > 0:
        got = stream.read(min(left, _CHUNK))
        if not got:
            break
        left -= len(got)


def read_window(stream: BinaryIO, skip: int = 0, length: Optional[int] = None) -> bytes:
    """Skip ``skip`` bytes of ``stream`` then read at most ``length`` bytes.

    ``length=None`` reads to the end. Short sources are not an error.
    """
    if skip < 0 or (length is not None and length < 0):
        raise ValueError("skip and length must be non-negative")
    if skip:
        _skip(stream, skip)
    if length is None:
        return stream.read()
    # bounded reads: length is only a cap, and read() may return short on pipes
    parts = []
    left = length
    while left > 0:
        got = stream.read(min(left, _CHUNK))
        if not got:
            break
        parts.append(got)
        left -= len(got)
    return b"".join(parts)


def load_window(source: Source, skip: int = 0, length: Optional[int] = None) -> bytes:
    name = source_name(source)
    try:
        if str(source) == STDIN:
            data = read_window(sys.stdin.buffer, skip, length)
        else:
            with open(source, "rb") as f:
                data = read_window(f, skip, length)
    except OSError as e:
        raise SourceError(name, e.strerror or str(e)) from e

    log.debug("%s: skip=%d length=%s read=%d", name, skip, length, len(data))
    if length is not None and len(data) < length:
        log.info("%s: only %d of %d requested bytes available", name, len(data), length)
    return data
