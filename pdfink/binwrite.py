"""Byte-level writing helpers: a seekable byte buffer and big-endian writers."""

from __future__ import annotations

from typing import BinaryIO


class Buff:
    """A growable byte buffer that writes at a movable position.

    Writing past the end pads the buffer with zero bytes; writing inside
    the buffer overwrites the existing bytes.
    """

    def __init__(self) -> None:
        self._data = bytearray()
        self.position = 0

    def write(self, data: bytes) -> int:
        """Write ``data`` at the current position and advance past it."""
        end = self.position + len(data)
        if len(self._data) < end:
            self._data.extend(bytes(end - len(self._data)))
        self._data[self.position:end] = data
        self.position = end
        return len(data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)


def write_uint32(stream: BinaryIO, value: int) -> None:
    """Write the low 32 bits of ``value`` as a big-endian unsigned integer."""
    stream.write((value & 0xFFFFFFFF).to_bytes(4, "big"))


def write_uint16(stream: BinaryIO, value: int) -> None:
    """Write the low 16 bits of ``value`` as a big-endian unsigned integer."""
    stream.write((value & 0xFFFF).to_bytes(2, "big"))


def write_tag(stream: BinaryIO, tag: str) -> None:
    """Write ``tag`` encoded as UTF-8."""
    stream.write(tag.encode("utf-8"))


def write_bytes(stream: BinaryIO, data: bytes, offset: int, count: int) -> None:
    """Write ``count`` bytes of ``data`` starting at ``offset``."""
    if offset < 0 or count < 0 or offset + count > len(data):
        raise ValueError(
            f"slice [{offset}:{offset + count}] out of range for {len(data)} bytes"
        )
    stream.write(data[offset:offset + count])