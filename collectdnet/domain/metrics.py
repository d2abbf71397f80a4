"""
Decoded metric records.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Union

from collectdnet.core.cdtime import EPOCH
from collectdnet.domain.kinds import ValueKind

Number = Union[float, int]


@dataclass(frozen=True)
class MetricIdentity:
    """
    The naming tuple of a collectd metric.

    Attributes:
        host: The host the metric was collected on.
        plugin: The reading plugin, e.g. ``"cpu"``.
        plugin_instance: Optional plugin instance, e.g. ``"0"``.
        type: The types.db type name, e.g. ``"load"``.
        type_instance: Optional type instance, e.g. ``"idle"``.
    """
    host: str = ""
    plugin: str = ""
    plugin_instance: str = ""
    type: str = ""
    type_instance: str = ""

    def format_name(self) -> str:
        """
        Render the identity as ``host/plugin[-instance]/type[-instance]``.
        """
        name = f"{self.host}/{self.plugin}"
        if self.plugin_instance:
            name += f"-{self.plugin_instance}"
        name += f"/{self.type}"
        if self.type_instance:
            name += f"-{self.type_instance}"
        return name

    def __str__(self) -> str:
        return self.format_name()


@dataclass(frozen=True)
class Value:
    """
    A single typed value.

    Gauges hold a ``float``; counters and derives hold an ``int``.
    """
    kind: ValueKind
    value: Number

    @classmethod
    def gauge(cls, value: float) -> "Value":
        return cls(kind=ValueKind.GAUGE, value=float(value))

    @classmethod
    def counter(cls, value: int) -> "Value":
        return cls(kind=ValueKind.COUNTER, value=int(value))

    @classmethod
    def derive(cls, value: int) -> "Value":
        return cls(kind=ValueKind.DERIVE, value=int(value))


@dataclass(frozen=True)
class MetricSample:
    """
    One value list decoded from a packet, together with the identity and
    timing that were in effect when it was read.
    """
    identity: MetricIdentity = field(default_factory=MetricIdentity)
    interval: timedelta = timedelta(0)
    timestamp: datetime = EPOCH
    values: tuple[Value, ...] = ()

    @property
    def name(self) -> str:
        return self.identity.format_name()

    def as_dict(self) -> dict[str, Any]:
        return {
            "host": self.identity.host,
            "plugin": self.identity.plugin,
            "plugin_instance": self.identity.plugin_instance,
            "type": self.identity.type,
            "type_instance": self.identity.type_instance,
            "interval": self.interval.total_seconds(),
            "timestamp": self.timestamp.isoformat(),
            "values": [{"kind": v.kind.keyword, "value": v.value} for v in self.values],
        }


__all__ = ["MetricIdentity", "MetricSample", "Number", "Value"]
