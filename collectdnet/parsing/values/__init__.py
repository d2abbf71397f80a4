"""
Decoder for collectd value lists, the numeric payload of a "values" part.
"""
from collectdnet.parsing.values.decode import decode_values

__all__ = ["decode_values"]
