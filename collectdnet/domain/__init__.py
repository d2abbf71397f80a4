"""
This package defines the domain models of the collectdnet library: the data
source kinds shared by the wire format and types.db, and the metric records
produced by the packet decoder.
"""
from collectdnet.domain.kinds import ValueKind
from collectdnet.domain.metrics import MetricIdentity, MetricSample, Value

__all__ = ["MetricIdentity", "MetricSample", "Value", "ValueKind"]
