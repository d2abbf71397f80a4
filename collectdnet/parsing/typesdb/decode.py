"""
Parser for collectd ``types.db`` files.

Each non-comment line defines one data set::

    name  ds_name:KIND:min:max[, ds_name:KIND:min:max ...]

See https://collectd.org/documentation/manpages/types.db.5.shtml
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from collectdnet.core.errors import MalformedSchemaLineError, SchemaLineError
from collectdnet.domain.kinds import ValueKind


@dataclass(frozen=True)
class DataSource:
    """
    One data source of a types.db data set.

    Attributes:
        name: The data source name, e.g. ``"value"``.
        kind: The data source kind.
        min: The lower bound as written in the file (e.g. ``"0"`` or ``"U"``).
        max: The upper bound as written in the file.
    """
    name: str
    kind: ValueKind
    min: str
    max: str


TypesDB = dict[str, list[DataSource]]

_FIELD_SEPARATORS = re.compile(r"[\t ,]+")


def parse_data_set(line: str) -> tuple[str, list[DataSource]]:
    """
    Parse a single types.db line.

    Args:
        line: One line of a types.db file.

    Returns:
        The data set name and its data sources in file order.

    Raises:
        MalformedSchemaLineError: If the line has no data sources, or a data
            source does not have exactly four ``:``-separated fields.
        UnknownDataSourceKindError: If a data source kind is not recognized.
    """
    fields = [f for f in _FIELD_SEPARATORS.split(line) if f]
    if len(fields) < 2:
        raise MalformedSchemaLineError(f"minimum of 2 fields required {line!r}")

    sources: list[DataSource] = []
    for field in fields[1:]:
        parts = field.split(":")
        if len(parts) != 4:
            raise MalformedSchemaLineError(f"exactly 4 fields required {field!r}")
        name, keyword, minimum, maximum = parts
        sources.append(DataSource(name=name, kind=ValueKind.from_keyword(keyword), min=minimum, max=maximum))
    return fields[0], sources


def parse_types_db(content: Union[str, bytes]) -> TypesDB:
    """
    Parse the contents of a types.db file.

    Empty lines and lines starting with ``#`` are skipped. A data set defined
    twice keeps its last definition.

    Args:
        content: The file contents.

    Returns:
        A mapping of data set name to its data sources.

    Raises:
        SchemaLineError: The first bad line, with ``line`` set to its 1-based
            line number. Nothing is returned for a partially valid file.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="surrogateescape")

    types: TypesDB = {}
    for lineno, line in enumerate(content.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line or line.startswith("#"):
            continue
        try:
            name, sources = parse_data_set(line)
        except SchemaLineError as exc:
            raise exc.at_line(lineno) from exc
        types[name] = sources
    return types


def load_types_db_file(path: Union[str, os.PathLike]) -> TypesDB:
    """Read and parse a types.db file from disk."""
    return parse_types_db(Path(path).read_bytes())
