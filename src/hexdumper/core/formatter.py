from __future__ import annotations

from typing import Iterable, Iterator, Union

LINE_WIDTH = 16
GROUP_WIDTH = 8
PLACEHOLDER = "."

ByteLike = Union[bytes, bytearray, memoryview, Iterable[int]]

# byte value -> ascii column character
_ASCII = tuple(chr(b) if 0x20 <= b <= 0x7E else PLACEHOLDER for b in range(256))
_BLANK = "  "


def _as_bytes(data: ByteLike) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return data
    return bytes(data)


def format_line(chunk: bytes, offset: int) -> str:
    """Render one dump line: offset, two 8-byte hex groups, ascii column.

    Missing slots of a short chunk are blanked so the hex columns keep their
    width; the ascii column is exactly as long as the chunk.
    """
    slots = [f"{b:02X}" for b in chunk]
    slots += [_BLANK] * (LINE_WIDTH - len(slots))
    hexpart = " ".join(slots[:GROUP_WIDTH]) + "  " + " ".join(slots[GROUP_WIDTH:])
    asciipart = "".join(_ASCII[b] for b in chunk)
    return f"{offset:08X}:  {hexpart}  |{asciipart}|\n"


def iter_lines(data: ByteLike, base: int = 0) -> Iterator[str]:
    if base < 0:
        raise ValueError(f"base offset must be non-negative, got {base}")
    data = _as_bytes(data)
    for i in range(0, len(data), LINE_WIDTH):
        yield format_line(data[i : i + LINE_WIDTH], base + i)


def hexdump(data: ByteLike, base: int = 0) -> str:
    """Format ``data`` as a hex dump whose first byte sits at offset ``base``.

    Every line ends with a newline; empty input gives an empty string.
    """
    return "".join(iter_lines(data, base))


def datadump(obj) -> str:
    # raw memory of anything exposing the buffer protocol (array, ctypes, ...)
    with memoryview(obj) as view:
        return hexdump(view.tobytes(), 0)


def rule() -> str:
    hex_width = 2 + LINE_WIDTH * 3 + 2
    return "-" * 8 + ":" + "-" * hex_width + "+" + "-" * LINE_WIDTH + "+\n"


def header() -> str:
    cols = [f"+{i:X}" for i in range(LINE_WIDTH)]
    hexpart = " ".join(cols[:GROUP_WIDTH]) + "  " + " ".join(cols[GROUP_WIDTH:])
    title = "ASCII_DUMP".center(LINE_WIDTH, "_")
    return f"_OFFSET_:  {hexpart}  |{title}|\n" + rule()
