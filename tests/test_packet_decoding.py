"""Tests for collectd binary packet decoding."""
import logging
import struct
from datetime import timedelta

import pytest

from collectdnet.core.cdtime import EPOCH
from collectdnet.core.errors import InvalidPacketError, UnsupportedValueTypeError
from collectdnet.domain.metrics import MetricIdentity, Value
from collectdnet.inspector_app.logging import RingBufferHandler
from collectdnet.parsing.packet import PacketResult, PartType, decode_packet, decode_samples, part_name


def _part(part_type: int, payload: bytes) -> bytes:
    """Helper: frame a payload with its type and header-inclusive length."""
    return struct.pack(">HH", part_type, 4 + len(payload)) + payload


def _string_part(part_type: int, value: str) -> bytes:
    return _part(part_type, value.encode("utf-8") + b"\x00")


def _int_part(part_type: int, value: int) -> bytes:
    return _part(part_type, struct.pack(">Q", value))


def _values_part(values: list[Value]) -> bytes:
    tags = bytes(int(v.kind) for v in values)
    slots = b"".join(
        struct.pack("<d", v.value) if v.kind == 1 else struct.pack(">q", v.value)
        for v in values
    )
    return _part(PartType.VALUES, struct.pack(">H", len(values)) + tags + slots)


def _build_packet(
    host: str = "h",
    plugin: str = "cpu",
    plugin_instance: str = "",
    type_: str = "load",
    type_instance: str = "",
    interval: int = 10,
    time: int = 1000,
    values: tuple[Value, ...] = (Value.gauge(3.14),),
) -> bytes:
    """Helper: a reference encoding of one value list."""
    packet = _string_part(PartType.HOST, host) + _int_part(PartType.TIME, time)
    packet += _int_part(PartType.INTERVAL, interval)
    packet += _string_part(PartType.PLUGIN, plugin)
    if plugin_instance:
        packet += _string_part(PartType.PLUGIN_INSTANCE, plugin_instance)
    packet += _string_part(PartType.TYPE, type_)
    if type_instance:
        packet += _string_part(PartType.TYPE_INSTANCE, type_instance)
    return packet + _values_part(list(values))


@pytest.fixture
def decode_events():
    handler = RingBufferHandler()
    logger = logging.getLogger("collectdnet.parsing.packet.decode")
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous)


def test_decode_single_value_list():
    result = decode_packet(_build_packet())
    assert result.ok
    assert result.offset is None
    (sample,) = result.samples
    assert sample.identity == MetricIdentity(host="h", plugin="cpu", type="load")
    assert sample.interval == timedelta(seconds=10)
    assert sample.timestamp == EPOCH + timedelta(seconds=1000)
    assert [v.value for v in sample.values] == [3.14]
    assert sample.name == "h/cpu/load"


@pytest.mark.parametrize(
    "fields",
    [
        {"host": "web-01", "plugin": "interface", "plugin_instance": "eth0", "type_": "if_octets",
         "values": (Value.derive(1200), Value.derive(-3))},
        {"plugin": "df", "type_": "df_complex", "type_instance": "free", "values": (Value.gauge(1.5e9),)},
        {"host": "", "plugin": "memory", "type_": "memory", "time": 0, "interval": 0,
         "values": (Value.counter(0), Value.gauge(-0.25))},
    ],
)
def test_decode_reproduces_encoded_fields(fields):
    sample, = decode_samples(_build_packet(**fields))
    assert sample.identity.host == fields.get("host", "h")
    assert sample.identity.plugin == fields["plugin"]
    assert sample.identity.plugin_instance == fields.get("plugin_instance", "")
    assert sample.identity.type == fields["type_"]
    assert sample.identity.type_instance == fields.get("type_instance", "")
    assert sample.interval == timedelta(seconds=fields.get("interval", 10))
    assert sample.timestamp == EPOCH + timedelta(seconds=fields.get("time", 1000))
    assert sample.values == fields["values"]


def test_high_resolution_time_and_interval():
    packet = (
        _string_part(PartType.HOST, "h")
        + _int_part(PartType.TIME_HR, (1000 << 30) + (1 << 29))
        + _int_part(PartType.INTERVAL_HR, 10 << 30)
        + _values_part([Value.gauge(1.0)])
    )
    sample, = decode_samples(packet)
    assert sample.timestamp == EPOCH + timedelta(seconds=1000, microseconds=500000)
    assert sample.interval == timedelta(seconds=10)


def test_defaults_without_time_parts():
    sample, = decode_samples(_values_part([Value.gauge(1.0)]))
    assert sample.identity == MetricIdentity()
    assert sample.interval == timedelta(0)
    assert sample.timestamp == EPOCH


def test_consecutive_value_lists_share_state():
    packet = _build_packet() + _values_part([Value.gauge(2.0)])
    first, second = decode_samples(packet)
    assert first.identity == second.identity
    assert first.interval == second.interval
    assert first.timestamp == second.timestamp
    assert second.values == (Value.gauge(2.0),)


def test_identity_is_overwritten_not_reset():
    packet = (
        _build_packet(plugin="cpu", type_instance="user")
        + _string_part(PartType.TYPE_INSTANCE, "system")
        + _values_part([Value.gauge(2.0)])
    )
    first, second = decode_samples(packet)
    assert first.identity.type_instance == "user"
    assert second.identity.type_instance == "system"
    assert second.identity.plugin == "cpu"
    assert second.identity.host == "h"


def test_state_is_local_to_each_call():
    decode_samples(_build_packet(host="first"))
    sample, = decode_samples(_values_part([Value.gauge(1.0)]))
    assert sample.identity.host == ""


def test_empty_packet():
    result = decode_packet(b"")
    assert result.ok
    assert result.samples == []


def test_declared_length_past_end_keeps_earlier_samples():
    good = _build_packet()
    bad = struct.pack(">HH", PartType.HOST, 64) + b"abc\x00"
    result = decode_packet(good + bad)
    assert isinstance(result.error, InvalidPacketError)
    assert len(result.samples) == 1
    assert result.offset == len(good)


@pytest.mark.parametrize("length", [0, 4])
def test_part_length_below_minimum(length):
    result = decode_packet(struct.pack(">HH", PartType.HOST, length) + b"h\x00")
    assert isinstance(result.error, InvalidPacketError)
    assert result.samples == []


def test_truncated_part_header():
    result = decode_packet(_build_packet() + b"\x00\x00")
    assert isinstance(result.error, InvalidPacketError)
    assert len(result.samples) == 1


def test_unterminated_string_part():
    result = decode_packet(_part(PartType.HOST, b"host"))
    assert isinstance(result.error, InvalidPacketError)


def test_time_part_with_wrong_size():
    result = decode_packet(_part(PartType.TIME, b"\x00\x00\x03\xe8"))
    assert isinstance(result.error, InvalidPacketError)


def test_value_list_error_stops_decoding():
    absolute = _part(PartType.VALUES, b"\x00\x01\x03" + b"\x00" * 8)
    packet = _build_packet() + absolute + _values_part([Value.gauge(1.0)])
    result = decode_packet(packet)
    assert isinstance(result.error, UnsupportedValueTypeError)
    assert len(result.samples) == 1


def test_unknown_parts_are_skipped(decode_events):
    packet = (
        _string_part(PartType.MESSAGE, "disk full")
        + _int_part(PartType.SEVERITY, 1)
        + _part(0x0300, b"\x01\x02")
        + _build_packet()
    )
    result = decode_packet(packet)
    assert result.ok
    assert len(result.samples) == 1

    skipped = [e for e in decode_events.get_events() if e["event"] == "unknown_part_skipped"]
    assert [e["details"]["name"] for e in skipped] == ["message", "severity", "0x0300"]
    assert skipped[0]["details"]["offset"] == 0


def test_decode_failure_is_logged(decode_events):
    decode_packet(struct.pack(">HH", PartType.HOST, 99))
    events = decode_events.get_events()
    assert events[-1]["event"] == "packet_decode_failed"
    assert events[-1]["details"]["offset"] == 0


def test_decode_samples_raises():
    with pytest.raises(InvalidPacketError):
        decode_samples(_build_packet() + b"\x00")


def test_raise_for_error_returns_result():
    result = PacketResult()
    assert result.raise_for_error() is result


def test_part_name():
    assert part_name(PartType.TYPE_INSTANCE) == "type_instance"
    assert part_name(0x0210) == "encryption"
    assert part_name(0xBEEF) == "0xbeef"


def test_identity_format_name():
    identity = MetricIdentity(host="h", plugin="cpu", plugin_instance="0", type="cpu", type_instance="idle")
    assert identity.format_name() == "h/cpu-0/cpu-idle"
    assert str(identity) == "h/cpu-0/cpu-idle"


def test_sample_as_dict():
    sample, = decode_samples(_build_packet())
    data = sample.as_dict()
    assert data["host"] == "h"
    assert data["interval"] == 10.0
    assert data["values"] == [{"kind": "gauge", "value": 3.14}]
