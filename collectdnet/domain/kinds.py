"""
Data source kinds shared by the binary protocol and types.db files.

The binary protocol identifies a kind by a single byte, types.db files by a
keyword. ``ValueKind`` is the one table both directions are derived from.
"""
from __future__ import annotations

from enum import IntEnum

from collectdnet.core.errors import UnknownDataSourceKindError, UnknownValueTypeError


class ValueKind(IntEnum):
    """collectd data source kinds, valued by their wire code."""
    COUNTER = 0
    GAUGE = 1
    DERIVE = 2
    ABSOLUTE = 3

    @property
    def keyword(self) -> str:
        """The lower-case keyword used in types.db files."""
        return self.name.lower()

    @classmethod
    def from_keyword(cls, keyword: str) -> "ValueKind":
        """
        Look up a kind by its types.db keyword, ignoring case.

        Raises:
            UnknownDataSourceKindError: If the keyword is not one of
                ``absolute``, ``counter``, ``derive`` or ``gauge``.
        """
        kind = _BY_KEYWORD.get(keyword.lower())
        if kind is None:
            raise UnknownDataSourceKindError(f"invalid data source type {keyword.lower()!r}")
        return kind

    @classmethod
    def from_code(cls, code: int) -> "ValueKind":
        """
        Look up a kind by its wire code.

        Raises:
            UnknownValueTypeError: If the code is not a known kind.
        """
        try:
            return cls(code)
        except ValueError:
            raise UnknownValueTypeError(f"invalid data source type code {code}") from None


_BY_KEYWORD: dict[str, ValueKind] = {kind.keyword: kind for kind in ValueKind}


__all__ = ["ValueKind"]
