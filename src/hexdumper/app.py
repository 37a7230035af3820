from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from hexdumper.core.formatter import header, hexdump, rule
from hexdumper.core.loader import STDIN, Source, load_window, source_name
from hexdumper.utils.logger import get_logger, setup_logging

log = get_logger(__name__)


def dump_source(
    source: Source,
    skip: int,
    length: Optional[int],
    plain: bool,
    out: TextIO,
) -> None:
    data = load_window(source, skip, length)
    # offsets are reported relative to the untrimmed source
    text = hexdump(data, base=skip)

    if plain:
        out.write(text)
        return

    out.write(f"Hex dump for '{source_name(source)}':\n")
    out.write(header())
    out.write(text)
    out.write(rule())


def run_app(
    sources: Sequence[Source],
    skip: int,
    length: Optional[int],
    plain: bool,
    log_level: str,
    quiet: bool,
    out: Optional[TextIO] = None,
) -> None:
    setup_logging(level=log_level, quiet=quiet)
    if out is None:
        out = sys.stdout

    if not sources:
        sources = [STDIN]

    log.debug("dumping %d source(s) skip=%d length=%s", len(sources), skip, length)

    # each source is windowed independently and dumped in order; the first
    # failing source aborts the run
    for src in sources:
        dump_source(src, skip, length, plain, out)
        out.flush()
