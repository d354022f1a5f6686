"""Security helpers for dburl."""

from .redaction import REDACTED_VALUE, redact_password

__all__ = ["REDACTED_VALUE", "redact_password"]
