"""Redaction helpers for database URLs written to logs."""

from __future__ import annotations

REDACTED_VALUE = "***"


def redact_password(password: str) -> str:
    """Mask a non-empty password; an empty one stays empty."""
    return REDACTED_VALUE if password else password
