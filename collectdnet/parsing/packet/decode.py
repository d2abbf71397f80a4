"""
Decoder for collectd binary network packets.

A packet is a sequence of parts::

    [type: u16 BE] [length: u16 BE] [payload: length - 4 bytes]

Identity and time parts update a running state; every "values" part emits a
``MetricSample`` built from that state. The state is never reset, so several
value lists can share one identity.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Iterable, Optional

from collectdnet.core.binary import ByteCursor, read_string, read_uint64
from collectdnet.core.cdtime import (
    EPOCH,
    hr_to_datetime,
    hr_to_timedelta,
    seconds_to_datetime,
    seconds_to_timedelta,
)
from collectdnet.core.errors import CollectdError, InvalidPacketError
from collectdnet.domain.metrics import MetricIdentity, MetricSample, Value
from collectdnet.parsing.packet.parts import (
    HEADER_SIZE,
    IDENTITY_FIELDS,
    MIN_PART_LENGTH,
    PartType,
    part_name,
)
from collectdnet.parsing.values import decode_values

logger = logging.getLogger(__name__)


@dataclass
class DecodeState:
    """Identity and timing in effect at the current position of a packet."""
    identity: MetricIdentity = field(default_factory=MetricIdentity)
    interval: timedelta = timedelta(0)
    timestamp: datetime = EPOCH

    def snapshot(self, values: Iterable[Value]) -> MetricSample:
        return MetricSample(
            identity=self.identity,
            interval=self.interval,
            timestamp=self.timestamp,
            values=tuple(values),
        )


@dataclass
class PacketResult:
    """
    The outcome of decoding one packet.

    Attributes:
        samples: Every sample decoded before the first error, in packet order.
        error: The error that stopped decoding, or ``None``.
        offset: Byte offset of the part that failed, or ``None``.
    """
    samples: list[MetricSample] = field(default_factory=list)
    error: Optional[CollectdError] = None
    offset: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "PacketResult":
        if self.error is not None:
            raise self.error
        return self


def decode_packet(data: bytes) -> PacketResult:
    """
    Decode a whole packet, stopping at the first malformed part.

    Decoding never resynchronizes after an error. The samples produced up to
    that point are returned together with the error.

    Args:
        data: The raw datagram contents.

    Returns:
        A ``PacketResult`` with the decoded samples and any error.
    """
    cursor = ByteCursor(data)
    state = DecodeState()
    result = PacketResult()

    while not cursor.at_end:
        start = cursor.offset
        try:
            sample = _decode_part(cursor, state)
        except CollectdError as exc:
            result.error = exc
            result.offset = start
            logger.info(
                "packet_decode_failed",
                extra={"details": {"offset": start, "error": str(exc), "samples": len(result.samples)}},
            )
            break
        if sample is not None:
            result.samples.append(sample)

    return result


def decode_samples(data: bytes) -> list[MetricSample]:
    """
    Decode a whole packet, raising on any malformed part.

    Raises:
        CollectdError: The first error met while decoding.
    """
    return decode_packet(data).raise_for_error().samples


def _decode_part(cursor: ByteCursor, state: DecodeState) -> Optional[MetricSample]:
    if cursor.remaining < HEADER_SIZE:
        raise InvalidPacketError(f"truncated part header: {cursor.remaining} bytes left")
    part_type = cursor.read_u16()
    length = cursor.read_u16()

    if length < MIN_PART_LENGTH or length - HEADER_SIZE > cursor.remaining:
        raise InvalidPacketError(f"invalid part length {length}")
    payload = cursor.read(length - HEADER_SIZE)

    if part_type in IDENTITY_FIELDS:
        state.identity = replace(state.identity, **{IDENTITY_FIELDS[part_type]: read_string(payload)})
    elif part_type == PartType.INTERVAL:
        state.interval = seconds_to_timedelta(read_uint64(payload))
    elif part_type == PartType.INTERVAL_HR:
        state.interval = hr_to_timedelta(read_uint64(payload))
    elif part_type == PartType.TIME:
        state.timestamp = seconds_to_datetime(read_uint64(payload))
    elif part_type == PartType.TIME_HR:
        state.timestamp = hr_to_datetime(read_uint64(payload))
    elif part_type == PartType.VALUES:
        return state.snapshot(decode_values(payload))
    else:
        logger.info(
            "unknown_part_skipped",
            extra={
                "details": {
                    "part_type": part_type,
                    "name": part_name(part_type),
                    "length": length,
                    "offset": cursor.offset - length,
                }
            },
        )
    return None
