"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from ..config import DBConfig

MEMORY_PATH: Final[str] = ":memory:"


class SQLiteDialect:
    """
    SQLite dialect addressed by a filesystem path or the in-memory sentinel.
    """

    name: Final[str] = "sqlite"
    aliases: Final[tuple[str, ...]] = ("sqlite3",)

    def parse_body(self, body: str) -> dict[str, Any]:
        return {"path": body}

    def render(self, config: "DBConfig") -> str:
        return config.path

    def descriptor(self, config: "DBConfig") -> str:
        return f"{self.name}://{config.path}"
