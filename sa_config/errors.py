"""
Exception classes for the sa.cfg accessor.

These never reach callers of ``get_config()``; the accessor turns them into
process termination at its boundary.
"""

from __future__ import annotations


class SaConfigError(Exception):
    """Base exception for sa.cfg errors."""

    pass


class ConfigUnavailable(SaConfigError):
    """Raised when the configuration file cannot be opened, read or decoded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigParseError(ConfigUnavailable):
    """Raised for a line that is neither blank, comment, section nor key=value."""

    def __init__(
        self, message: str, lineno: int, line: str, path: str | None = None
    ) -> None:
        super().__init__(f"line {lineno}: {message}", path)
        self.lineno = lineno
        self.line = line
