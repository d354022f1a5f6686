"""
dburl public package initialization.

Parse a ``DATABASE_URL`` style string into a :class:`DBConfig` and render it
as the connection string a driver for its dialect expects.
"""

from .config import (
    DEFAULT_ENV,
    MSSQL,
    POSTGRES,
    SQLITE,
    DBConfig,
    from_env,
    parse,
    render,
)  # noqa: F401
from .errors import (
    CannotBeParsed,
    DatabaseURLError,
    EngineNotSupported,
    InvalidSyntax,
    NotFound,
)  # noqa: F401
from .utils import configure_logging, get_logger  # noqa: F401

__all__ = [
    "DBConfig",
    "DEFAULT_ENV",
    "SQLITE",
    "MSSQL",
    "POSTGRES",
    "parse",
    "render",
    "from_env",
    "DatabaseURLError",
    "NotFound",
    "InvalidSyntax",
    "EngineNotSupported",
    "CannotBeParsed",
    "configure_logging",
    "get_logger",
]
