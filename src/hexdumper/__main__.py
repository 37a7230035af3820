from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from hexdumper.app import run_app
from hexdumper.core.loader import SourceError


def _decimal(s: str) -> int:
    # plain decimal only: no sign, no 0x prefix, no underscores
    if not (s.isascii() and s.isdigit()):
        raise argparse.ArgumentTypeError(f"{s}: not a number")
    return int(s)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hexdump", description="Classic hex dump of files or standard input")
    p.add_argument("files", nargs="*", metavar="file", help="Input files ('-' or none reads standard input)")
    p.add_argument("-n", dest="length", type=_decimal, default=None, metavar="length",
                   help="Dump at most this many bytes of each input")
    p.add_argument("-s", dest="offset", type=_decimal, default=0, metavar="offset",
                   help="Skip this many bytes of each input before dumping")
    p.add_argument("--plain", action="store_true", help="Print only dump lines, without the per-file header")

    # Logging
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--quiet", action="store_true", help="Terse log messages")
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        run_app(
            sources=args.files,
            skip=args.offset,
            length=args.length,
            plain=args.plain,
            log_level=args.log_level,
            quiet=args.quiet,
        )
    except SourceError as e:
        print(f"hexdump: {e}", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        # reader went away (e.g. piped into head); keep the exit flush quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n-- interrupted --", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
