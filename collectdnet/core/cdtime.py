"""
Conversions for collectd time values.

collectd's high-resolution time is a 64-bit unsigned fixed-point number in
units of 2^-30 seconds. The upper 34 bits hold whole seconds and the lower 30
bits the fraction. Python's datetime types stop at microseconds, so fractions
are rounded to the nearest microsecond.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from collectdnet.core.errors import InvalidPacketError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

FRACTION_BITS = 30
_FRACTION_MASK = (1 << FRACTION_BITS) - 1


def hr_to_timedelta(value: int) -> timedelta:
    seconds = value >> FRACTION_BITS
    micros = ((value & _FRACTION_MASK) * 1_000_000 + (1 << (FRACTION_BITS - 1))) >> FRACTION_BITS
    try:
        return timedelta(seconds=seconds, microseconds=micros)
    except OverflowError as exc:
        raise InvalidPacketError(f"high-resolution time {value:#x} out of range") from exc


def hr_to_datetime(value: int) -> datetime:
    return _after_epoch(hr_to_timedelta(value))


def seconds_to_timedelta(value: int) -> timedelta:
    try:
        return timedelta(seconds=value)
    except OverflowError as exc:
        raise InvalidPacketError(f"time of {value} seconds out of range") from exc


def seconds_to_datetime(value: int) -> datetime:
    return _after_epoch(seconds_to_timedelta(value))


def _after_epoch(delta: timedelta) -> datetime:
    try:
        return EPOCH + delta
    except OverflowError as exc:
        raise InvalidPacketError(f"timestamp {delta} after epoch out of range") from exc
