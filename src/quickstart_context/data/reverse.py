"""Read a file's lines from the end towards the start.

Blocks are read backwards from EOF so only the tail that is actually
consumed ever gets loaded. Lines come out as raw bytes; decoding is left
to the caller so one bad line does not poison the rest of the scan.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator

DEFAULT_CHUNK_SIZE = 64 * 1024


def _strip_terminator(line: bytes) -> bytes:
    if line.endswith(b"\r"):
        return line[:-1]
    return line


def iter_lines_reversed(fileobj: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield lines of a seekable binary file, last line first.

    A newline at the very end of the file does not produce an empty line.
    Empty lines elsewhere are yielded as ``b""``.

    Args:
        fileobj: File opened in binary mode.
        chunk_size: Number of bytes read per backwards step.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    position = fileobj.seek(0, io.SEEK_END)
    remainder = b""
    at_eof = True

    while position > 0:
        step = min(chunk_size, position)
        position -= step
        fileobj.seek(position)
        block = fileobj.read(step) + remainder

        lines = block.split(b"\n")
        # The first piece may continue in the previous block
        remainder = lines.pop(0)

        if at_eof:
            at_eof = False
            if lines and lines[-1] == b"":
                lines.pop()

        for line in reversed(lines):
            yield _strip_terminator(line)

    if remainder or not at_eof:
        yield _strip_terminator(remainder)
