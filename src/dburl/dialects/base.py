"""
Dialect strategy interfaces describing URL parsing and rendering behaviors.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Protocol

from ..errors import CannotBeParsed

if TYPE_CHECKING:
    from ..config import DBConfig


_ACCESS_DATA_DELIMITERS = re.compile("[:@/]")

ACCESS_DATA_FIELDS = ("user", "password", "host", "port", "dbname")


class Dialect(Protocol):
    """
    Strategy interface consumed by the parser and the renderer.
    """

    @property
    def name(self) -> str: ...

    @property
    def aliases(self) -> tuple[str, ...]: ...

    def parse_body(self, body: str) -> dict[str, Any]: ...

    def render(self, config: "DBConfig") -> str: ...

    def descriptor(self, config: "DBConfig") -> str: ...


def split_access_data(body: str) -> dict[str, str]:
    """
    Split ``user:password@host:port/dbname`` into its five fields.

    Any of ``:``, ``@`` and ``/`` act as a delimiter and empty fields between
    adjacent delimiters are dropped, so a password containing a delimiter
    yields the wrong field count and is rejected.
    """
    fields = [token for token in _ACCESS_DATA_DELIMITERS.split(body) if token]
    if len(fields) != len(ACCESS_DATA_FIELDS):
        raise CannotBeParsed(
            f"Access data must contain {len(ACCESS_DATA_FIELDS)} fields "
            f"(user, password, host, port, dbname), got {len(fields)}"
        )
    return dict(zip(ACCESS_DATA_FIELDS, fields))


def parse_port(value: str) -> int:
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdigit()):
        raise CannotBeParsed(f"Port must be numeric, got {value!r}")
    return int(value)


class ServerDialect:
    """
    Shared parsing for engines addressed by credentials, host and port.
    """

    name: str = ""
    aliases: tuple[str, ...] = ()

    def parse_body(self, body: str) -> dict[str, Any]:
        fields: dict[str, Any] = split_access_data(body)
        fields["port"] = parse_port(fields["port"])
        return fields

    def descriptor(self, config: "DBConfig") -> str:
        return (
            f"{self.name}://{config.user}:{config.password}"
            f"@{config.host}:{config.port}/{config.dbname}"
        )
