from collectdnet.core.errors import (
    CollectdError,
    InvalidPacketError,
    MalformedSchemaLineError,
    SchemaLineError,
    UnknownDataSourceKindError,
    UnknownValueTypeError,
    UnsupportedValueTypeError,
)
from collectdnet.domain import MetricIdentity, MetricSample, Value, ValueKind
from collectdnet.parsing.packet import PacketResult, decode_packet, decode_samples
from collectdnet.parsing.typesdb import DataSource, TypesDB, load_types_db_file, parse_data_set, parse_types_db
from collectdnet.parsing.values import decode_values
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "CollectdError",
    "DataSource",
    "InvalidPacketError",
    "MalformedSchemaLineError",
    "MetricIdentity",
    "MetricSample",
    "PacketResult",
    "SchemaLineError",
    "TypesDB",
    "UnknownDataSourceKindError",
    "UnknownValueTypeError",
    "UnsupportedValueTypeError",
    "Value",
    "ValueKind",
    "decode_packet",
    "decode_samples",
    "decode_values",
    "load_types_db_file",
    "parse_data_set",
    "parse_types_db",
]

try:
    __version__ = version("collectdnet")
except PackageNotFoundError:
    __version__ = "0.0.0"
