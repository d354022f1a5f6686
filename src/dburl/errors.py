"""
Error hierarchy raised while loading and parsing database URLs.
"""

from __future__ import annotations


class DatabaseURLError(ValueError):
    """Base error for database URL failures."""


class NotFound(DatabaseURLError):
    """Raised when the environment variable holding the URL is not set."""

    def __init__(self, env: str) -> None:
        self.env = env
        super().__init__(f"Environment variable {env} is not set")


class EngineNotSupported(DatabaseURLError):
    """Raised when the URL names an incorrect or unsupported engine."""

    def __init__(self, dialect: str) -> None:
        self.dialect = dialect
        super().__init__(f"Database engine {dialect!r} is incorrect or unsupported")


class CannotBeParsed(DatabaseURLError):
    """Raised when the access data of a URL cannot be split into its fields."""


class InvalidSyntax(CannotBeParsed):
    """Raised when the URL is missing the ``dialect://`` prefix."""
