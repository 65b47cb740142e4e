"""A writer that bzip2-compresses what is written to it."""

from __future__ import annotations

import bz2
import shutil
import sys
from types import TracebackType
from typing import BinaryIO

BLOCK_SIZE = 9


class Writer:
    """Compress data written to it and pass the result to an underlying stream.

    Closing flushes the compressed stream but does not close the
    underlying stream. Writing to or closing a closed writer raises
    ValueError.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        """Whether the writer has been closed."""
        return self._compressor is None

    def write(self, data: bytes) -> int:
        """Compress data and return the number of uncompressed bytes taken."""
        if self._compressor is None:
            raise ValueError("closed")
        compressed = self._compressor.compress(data)
        if compressed:
            self._out.write(compressed)
        return len(data)

    def close(self) -> None:
        """Flush the compressed data and end the stream."""
        if self._compressor is None:
            raise ValueError("closed")
        compressor, self._compressor = self._compressor, None
        self._out.write(compressor.flush())

    def __enter__(self) -> Writer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.closed:
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Compress stdin to stdout."""
    w = Writer(sys.stdout.buffer)
    try:
        shutil.copyfileobj(sys.stdin.buffer, w)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        w.close()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0