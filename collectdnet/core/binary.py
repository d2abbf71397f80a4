from __future__ import annotations

from collectdnet.core.errors import InvalidPacketError


UINT64_SIZE = 8


def read_uint64(data: bytes) -> int:
    if len(data) != UINT64_SIZE:
        raise InvalidPacketError(f"integer part must be {UINT64_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, byteorder="big", signed=False)


def read_string(data: bytes) -> str:
    if not data or data[-1] != 0:
        raise InvalidPacketError("string part is not null-terminated")
    return bytes(data[:-1]).decode("utf-8", errors="surrogateescape")


class ByteCursor:
    """
    Read-and-advance cursor over an immutable byte buffer.

    Every read is checked against the remaining length before slicing, so a
    bogus length field can never read past the end of the buffer.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self.offset

    @property
    def at_end(self) -> bool:
        return self.remaining <= 0

    def read(self, size: int) -> bytes:
        if size < 0 or size > self.remaining:
            raise InvalidPacketError(
                f"short read at offset {self.offset}: want {size} bytes, have {self.remaining}"
            )
        chunk = self._data[self.offset: self.offset + size]
        self.offset += size
        return chunk

    def read_u16(self) -> int:
        return int.from_bytes(self.read(2), byteorder="big")
