"""Bit-level input and output streams."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import IO, Iterator

END_OF_BITS = -1
"""Value returned by :meth:`BitReader.read_bit` once every bit has been read."""


class BitReader:
    """Reads bits, most significant first, from a sequence of bytes."""

    def __init__(self, data: bytes | bytearray | str) -> None:
        if isinstance(data, str):
            data = data.encode("latin-1")
        self._data: bytes | None = bytes(data)
        self._pos = 0

    @classmethod
    def open(cls, path: str | Path) -> "BitReader":
        """Create a reader over the whole contents of the file at ``path``."""
        return cls(Path(path).read_bytes())

    def _require_open(self) -> bytes:
        if self._data is None:
            raise ValueError("read from a closed bit stream")
        return self._data

    def read_bit(self) -> int:
        """Return the next bit as 0 or 1, or ``END_OF_BITS`` when none remain."""
        data = self._require_open()
        if self._pos >= len(data) * 8:
            return END_OF_BITS
        byte = data[self._pos >> 3]
        shift = 7 - (self._pos & 7)
        self._pos += 1
        return (byte >> shift) & 1

    def good(self) -> bool:
        """True while there are bits left to read."""
        return self._data is not None and self._pos < len(self._data) * 8

    def close(self) -> None:
        """Release the underlying data; further reads raise ``ValueError``."""
        self._data = None

    def __iter__(self) -> Iterator[int]:
        while (bit := self.read_bit()) != END_OF_BITS:
            yield bit

    def __enter__(self) -> "BitReader":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class BitWriter:
    """Writes individual bits, packed into bytes most significant bit first.

    In debug mode the bits are written as the characters ``0`` and ``1``
    instead of being packed, which is readable but cannot be decoded.
    """

    def __init__(self, sink: IO, debug: bool = False) -> None:
        self._sink: IO | None = sink
        self.debug = debug
        self._owns_sink = False
        self._keeps_value = False
        self._current = 0
        self._count = 0

    @classmethod
    def to_file(cls, path: str | Path, debug: bool = False) -> "BitWriter":
        """Create a writer that owns and writes to the file at ``path``."""
        writer = cls(open(path, "wb"), debug)
        writer._owns_sink = True
        return writer

    @classmethod
    def to_console(cls) -> "BitWriter":
        """Create a writer to standard output; console output is always debug."""
        return cls(sys.stdout, debug=True)

    @classmethod
    def in_memory(cls, debug: bool = False) -> "BitWriter":
        """Create a writer whose output is kept and returned by :meth:`getvalue`."""
        writer = cls(io.BytesIO(), debug)
        writer._keeps_value = True
        return writer

    def _require_open(self) -> IO:
        if self._sink is None:
            raise ValueError("write to a closed bit stream")
        return self._sink

    def _emit(self, chunk: bytes | str) -> None:
        sink = self._require_open()
        if isinstance(sink, io.TextIOBase):
            sink.write(chunk if isinstance(chunk, str) else chunk.decode("latin-1"))
        else:
            sink.write(chunk.encode("latin-1") if isinstance(chunk, str) else chunk)

    def _flush_partial(self) -> None:
        if self._count:
            self._emit(bytes([(self._current << (8 - self._count)) & 0xFF]))
            self._current = 0
            self._count = 0

    def write_bits(self, value: str) -> None:
        """Write each ``'1'`` and ``'0'`` in ``value`` as one bit; other characters are ignored."""
        self._require_open()
        if self.debug:
            self._emit(value)
            return
        for ch in value:
            if ch not in "01":
                continue
            self._current = (self._current << 1) | (ch == "1")
            self._count += 1
            if self._count == 8:
                self._emit(bytes([self._current]))
                self._current = 0
                self._count = 0

    def write(self, byte: int) -> None:
        """Write a whole byte, first padding any partly filled byte with zeros."""
        self._require_open()
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        self._flush_partial()
        self._emit(bytes([byte]))

    def close(self) -> None:
        """Write any partial byte padded with zeros and close the stream."""
        if self._sink is None:
            return
        self._flush_partial()
        sink = self._sink
        if hasattr(sink, "flush"):
            sink.flush()
        if self._keeps_value:
            return
        if self._owns_sink:
            sink.close()
        self._sink = None

    def getvalue(self) -> bytes:
        """Return everything written so far by an in-memory writer, else ``b""``."""
        if self._keeps_value and self._sink is not None:
            return self._sink.getvalue()
        return b""

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()