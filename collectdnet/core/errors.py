"""
Exceptions raised while decoding collectd network packets and types.db files.
"""
from __future__ import annotations

from typing import Optional


class CollectdError(ValueError):
    """Base class for all decoding errors raised by collectdnet."""
    pass


class InvalidPacketError(CollectdError):
    """Raised on malformed framing, truncated parts or bad primitive payloads."""
    pass


class UnsupportedValueTypeError(CollectdError):
    """Raised when a value list contains a recognized but unsupported kind."""
    pass


class UnknownValueTypeError(CollectdError):
    """Raised when a value list contains an unrecognized type tag."""
    pass


class SchemaLineError(CollectdError):
    """
    Raised when a single types.db line cannot be parsed.

    Attributes:
        message: The error description without line information.
        line: The 1-based line number, once known.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.message = message
        self.line = line
        super().__init__(f"line {line}: {message}" if line is not None else message)

    def at_line(self, line: int) -> "SchemaLineError":
        return type(self)(self.message, line=line)


class MalformedSchemaLineError(SchemaLineError):
    """Raised when a types.db line or data source has the wrong field count."""
    pass


class UnknownDataSourceKindError(SchemaLineError):
    """Raised when a data source kind keyword is not recognized."""
    pass


__all__ = [
    "CollectdError",
    "InvalidPacketError",
    "MalformedSchemaLineError",
    "SchemaLineError",
    "UnknownDataSourceKindError",
    "UnknownValueTypeError",
    "UnsupportedValueTypeError",
]
