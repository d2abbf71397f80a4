"""
Decoder for the collectd binary network protocol.

This sub-package walks the part stream of a datagram, keeps track of the
current metric identity and timing, and emits one ``MetricSample`` per value
list. Notification, signature and encryption parts are skipped.
"""
from collectdnet.parsing.packet.decode import (
    DecodeState,
    PacketResult,
    decode_packet,
    decode_samples,
)
from collectdnet.parsing.packet.parts import (
    HEADER_SIZE,
    MIN_PART_LENGTH,
    PartType,
    part_name,
)

__all__ = [
    "DecodeState",
    "HEADER_SIZE",
    "MIN_PART_LENGTH",
    "PacketResult",
    "PartType",
    "decode_packet",
    "decode_samples",
    "part_name",
]
