"""
grantmatch error classes.

Matching itself never raises: unknown or malformed policy shapes deny.
These errors cover the inputs that cannot be matched at all.
"""

from __future__ import annotations

from typing import Any


class GrantMatchError(Exception):
    """Base class for grantmatch errors."""


class MalformedRecordError(GrantMatchError):
    """Raised when a requirement has no extractable tag or field mapping."""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)

