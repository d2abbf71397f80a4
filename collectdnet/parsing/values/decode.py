"""
Decoder for the payload of a collectd "values" part.

Layout::

    [count: u16 BE] [type tag: u8] * count [value: 8 bytes] * count

Tags and values are two separate runs in the same order. Gauges are
little-endian doubles (the only little-endian field of the protocol); counters
and derives are big-endian signed 64-bit integers.
"""
from __future__ import annotations

import struct

from collectdnet.core.errors import InvalidPacketError, UnsupportedValueTypeError
from collectdnet.domain.kinds import ValueKind
from collectdnet.domain.metrics import Value

COUNT_SIZE = 2
SLOT_SIZE = 8

_GAUGE = struct.Struct("<d")
_INTEGER = struct.Struct(">q")


def decode_values(payload: bytes) -> list[Value]:
    """
    Decode a values part payload into typed values.

    Args:
        payload: The part payload, without the 4-byte part header.

    Returns:
        The decoded values in wire order.

    Raises:
        InvalidPacketError: If the payload length does not match the count.
        UnsupportedValueTypeError: If an ``absolute`` value is present.
        UnknownValueTypeError: If a type tag is not a known kind.
    """
    if len(payload) < COUNT_SIZE:
        raise InvalidPacketError(f"values part too short: {len(payload)} bytes")

    count = int.from_bytes(payload[:COUNT_SIZE], byteorder="big")
    expected = COUNT_SIZE + count * (1 + SLOT_SIZE)
    if len(payload) != expected:
        raise InvalidPacketError(f"values length mismatch: want {expected} bytes, got {len(payload)}")

    tags = payload[COUNT_SIZE: COUNT_SIZE + count]
    slots_start = COUNT_SIZE + count

    values: list[Value] = []
    for i, tag in enumerate(tags):
        kind = ValueKind.from_code(tag)
        offset = slots_start + i * SLOT_SIZE
        if kind is ValueKind.GAUGE:
            (number,) = _GAUGE.unpack_from(payload, offset)
        elif kind is ValueKind.ABSOLUTE:
            raise UnsupportedValueTypeError("absolute values are not supported")
        else:
            (number,) = _INTEGER.unpack_from(payload, offset)
        values.append(Value(kind=kind, value=number))
    return values
