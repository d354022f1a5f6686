"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .base import ServerDialect

if TYPE_CHECKING:
    from ..config import DBConfig


class PostgresDialect(ServerDialect):
    """
    PostgreSQL dialect rendering libpq keyword/value connection strings.
    """

    name: Final[str] = "postgres"
    aliases: Final[tuple[str, ...]] = ()

    def render(self, config: "DBConfig") -> str:
        return (
            f"host={config.host} port={config.port} user={config.user} "
            f"password={config.password} dbname={config.dbname} sslmode=disable"
        )
