"""Big-endian writer over a fixed-size, writable byte buffer."""

from __future__ import annotations

from typing import Optional

__all__ = ["ByteWriter"]


class ByteWriter:
    """Writes big-endian integers and raw bytes into a caller's buffer."""

    def __init__(self, buffer) -> None:
        self._view: Optional[memoryview] = None
        self._pos = 0
        self._size = 0
        self.attach(buffer)

    def _put(self, data: bytes) -> int:
        end = self._pos + len(data)
        if self._view is None or self._pos < 0 or end > self._size:
            raise IndexError(
                f"write of {len(data)} bytes at offset {self._pos} "
                f"overflows buffer of {self._size} bytes"
            )
        self._view[self._pos:end] = data
        self._pos = end
        return len(data)

    def write_int32(self, value: int) -> int:
        """Write the low 32 bits of ``value``; returns 4."""
        return self._put((value & 0xFFFFFFFF).to_bytes(4, "big"))

    def write_int16(self, value: int) -> int:
        """Write the low 16 bits of ``value``; returns 2."""
        return self._put((value & 0xFFFF).to_bytes(2, "big"))

    def write_long(self, value: int) -> int:
        """Write ``value`` as a 32-bit integer; returns 4."""
        return self.write_int32(value)

    def write_uint64(self, value: int) -> int:
        """Write the low 64 bits of ``value``; returns 8."""
        return self._put((value & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big"))

    def write_byte(self, value: int) -> int:
        """Write the low 8 bits of ``value``; returns 1."""
        return self._put(bytes([value & 0xFF]))

    def write_bytes(self, data: bytes) -> int:
        """Copy ``data`` into the buffer; returns its length."""
        return self._put(bytes(data))

    def skip(self, count: int) -> int:
        """Move the write position by ``count`` without writing."""
        self._pos += count
        return count

    def is_end(self) -> bool:
        return self._pos >= self._size

    def bytes_written(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return self._size - self._pos

    def attach(self, buffer) -> None:
        """Start writing at the beginning of a new buffer."""
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("buffer must be writable")
        self._view = view.cast("B")
        self._pos = 0
        self._size = len(self._view)

    def detach(self) -> None:
        """Drop the buffer; further writes fail until a new one is attached."""
        if self._view is not None:
            self._view.release()
        self._view = None
        self._pos = 0
        self._size = 0