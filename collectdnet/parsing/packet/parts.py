"""
Part type codes of the collectd binary network protocol.

Values match ``src/network.h`` of collectd.
"""
from __future__ import annotations

from enum import IntEnum


class PartType(IntEnum):
    HOST = 0x0000
    TIME = 0x0001
    PLUGIN = 0x0002
    PLUGIN_INSTANCE = 0x0003
    TYPE = 0x0004
    TYPE_INSTANCE = 0x0005
    VALUES = 0x0006
    INTERVAL = 0x0007
    TIME_HR = 0x0008
    INTERVAL_HR = 0x0009
    # Notifications, not decoded.
    MESSAGE = 0x0100
    SEVERITY = 0x0101
    # Security envelopes, not decoded.
    SIGNATURE = 0x0200
    ENCRYPTION = 0x0210


# 2-byte type + 2-byte length; the length includes the header.
HEADER_SIZE = 4
MIN_PART_LENGTH = HEADER_SIZE + 1

# Identity parts -> MetricIdentity attribute they set.
IDENTITY_FIELDS: dict[int, str] = {
    PartType.HOST: "host",
    PartType.PLUGIN: "plugin",
    PartType.PLUGIN_INSTANCE: "plugin_instance",
    PartType.TYPE: "type",
    PartType.TYPE_INSTANCE: "type_instance",
}


def part_name(code: int) -> str:
    """
    Return a readable name for a part type code.

    Unknown codes are rendered as hex strings (e.g. ``"0x0300"``).
    """
    try:
        return PartType(code).name.lower()
    except ValueError:
        return f"0x{code:04x}"
