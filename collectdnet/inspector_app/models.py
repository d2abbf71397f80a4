from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field

from collectdnet.domain.metrics import MetricSample
from collectdnet.parsing.typesdb import TypesDB


class ValueModel(BaseModel):
    kind: str
    value: Union[int, float]
    name: Optional[str] = None


class SampleModel(BaseModel):
    name: str
    host: str = ""
    plugin: str = ""
    plugin_instance: str = ""
    type: str = ""
    type_instance: str = ""
    interval: float = Field(0.0, description="Interval in seconds")
    timestamp: datetime
    values: list[ValueModel] = Field(default_factory=list)


def sample_model(sample: MetricSample, types: Optional[TypesDB] = None) -> SampleModel:
    """
    Build the output model for a decoded sample.

    When ``types`` defines the sample's type with as many data sources as the
    sample has values, each value is labelled with its data source name.
    """
    sources = (types or {}).get(sample.identity.type)
    if sources is not None and len(sources) != len(sample.values):
        sources = None

    values = [
        ValueModel(
            kind=value.kind.keyword,
            value=value.value,
            name=sources[i].name if sources else None,
        )
        for i, value in enumerate(sample.values)
    ]
    identity = sample.identity
    return SampleModel(
        name=sample.name,
        host=identity.host,
        plugin=identity.plugin,
        plugin_instance=identity.plugin_instance,
        type=identity.type,
        type_instance=identity.type_instance,
        interval=sample.interval.total_seconds(),
        timestamp=sample.timestamp,
        values=values,
    )
