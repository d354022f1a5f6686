"""
Microsoft SQL Server dialect implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .base import ServerDialect

if TYPE_CHECKING:
    from ..config import DBConfig


class MSSQLDialect(ServerDialect):
    """
    SQL Server dialect rendering ``sqlserver://`` URLs.
    """

    name: Final[str] = "mssql"
    aliases: Final[tuple[str, ...]] = ()

    def render(self, config: "DBConfig") -> str:
        return (
            f"sqlserver://{config.user}:{config.password}"
            f"@{config.host}:{config.port}?database={config.dbname}"
        )
