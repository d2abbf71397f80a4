"""
This package contains all modules related to decoding data produced by a
collectd daemon.

Sub-packages handle specific data formats:

- ``packet``: Binary network protocol part stream decoding.
- ``values``: Value list payloads inside "values" parts.
- ``typesdb``: ``types.db`` schema file parsing.
"""
