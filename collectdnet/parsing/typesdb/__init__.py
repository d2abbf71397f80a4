"""
Parser for collectd ``types.db`` schema files.

A types.db file maps each metric type name to the ordered list of data
sources its value lists carry.
"""
from collectdnet.parsing.typesdb.decode import (
    DataSource,
    TypesDB,
    load_types_db_file,
    parse_data_set,
    parse_types_db,
)

__all__ = [
    "DataSource",
    "TypesDB",
    "load_types_db_file",
    "parse_data_set",
    "parse_types_db",
]
