"""Flat INI parsing for sa.cfg.

The format is scanned raw: sections are skipped rather than used as
namespaces, values stay strings, and no escape or interpolation processing
takes place.
"""

from __future__ import annotations

import logging
import re

from .constants import COMMENT_PREFIXES, KEY_VALUE_SEPARATOR
from .errors import ConfigParseError

logger = logging.getLogger(__name__)

_BOM = "\ufeff"

# Only CR, LF and CRLF end a line; other Unicode separators stay in values.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _is_section_header(stripped: str) -> bool:
    if not stripped.startswith("["):
        return False
    # "[general] ; main" carries a trailing comment
    head = stripped.split(";", 1)[0].rstrip()
    return head.endswith("]")


def _unquote(value: str) -> str:
    """Drop one enclosing pair of double quotes."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_flat_config(text: str, path: str | None = None) -> dict[str, str]:
    """
    Parse sa.cfg text into a flat mapping of raw strings.

    Args:
        text: Full file contents.
        path: Source path, only used in error messages.

    Returns:
        Dict of key -> value. Later duplicates replace earlier ones.

    Raises:
        ConfigParseError: A line is not blank, a comment, a section header
            or a ``key = value`` assignment with a non-empty key.
    """
    entries: dict[str, str] = {}
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    for lineno, line in enumerate(_LINE_BREAK.split(text), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIXES):
            continue

        if _is_section_header(stripped):
            logger.debug("Ignoring section header %s at line %d", stripped, lineno)
            continue

        key, sep, value = stripped.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            raise ConfigParseError("expected 'key = value'", lineno, line, path)

        key = key.strip()
        if not key:
            raise ConfigParseError("empty key", lineno, line, path)

        if key in entries:
            logger.debug("Key %r redefined at line %d; last value wins", key, lineno)
        entries[key] = _unquote(value.strip())

    return entries
