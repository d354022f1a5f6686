"""
Dialect strategy registry.
"""

from __future__ import annotations

from .base import Dialect, ServerDialect, split_access_data
from .mssql import MSSQLDialect
from .postgres import PostgresDialect
from .sqlite import MEMORY_PATH, SQLiteDialect

_DIALECTS: tuple[Dialect, ...] = (SQLiteDialect(), MSSQLDialect(), PostgresDialect())

_REGISTRY: dict[str, Dialect] = {}
for _dialect in _DIALECTS:
    _REGISTRY[_dialect.name] = _dialect
    for _alias in _dialect.aliases:
        _REGISTRY[_alias] = _dialect


def get_dialect(token: str) -> Dialect | None:
    """
    Resolve a dialect by its name or one of its aliases (case-sensitive).
    """
    return _REGISTRY.get(token)


def supported_dialects() -> tuple[str, ...]:
    """Every accepted dialect token, aliases included."""
    return tuple(sorted(_REGISTRY))


__all__ = [
    "Dialect",
    "ServerDialect",
    "SQLiteDialect",
    "MSSQLDialect",
    "PostgresDialect",
    "MEMORY_PATH",
    "get_dialect",
    "split_access_data",
    "supported_dialects",
]
