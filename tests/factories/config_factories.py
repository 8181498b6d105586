"""
Config Factories

Provides factory functions for creating sa.cfg text and temporary files.
Use these to test parsing, caching, and failure handling.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping


def make_sa_config_text(
    entries: Mapping[str, str] | None = None,
    *,
    section: str | None = "general",
    comment: str | None = "gromox system admin settings",
    spaced: bool = True,
) -> str:
    """
    Create sa.cfg text for testing.

    Args:
        entries: Key/value pairs written in order
        section: Section header placed before the entries (None for no header)
        comment: ``;`` comment placed at the top (None for no comment)
        spaced: Write ``key = value`` instead of ``key=value``

    Returns:
        File contents ending in a newline.

    Examples:
        # Typical file
        text = make_sa_config_text({"mysql_host": "localhost"})

        # Bare assignments only
        text = make_sa_config_text({"a": "1"}, section=None, comment=None)
    """
    if entries is None:
        entries = {
            "mysql_host": "localhost",
            "mysql_port": "3306",
            "mysql_dbname": "grommunio",
        }

    separator = " = " if spaced else "="
    lines: list[str] = []
    if comment is not None:
        lines.append(f"; {comment}")
    if section is not None:
        lines.append(f"[{section}]")
    lines.extend(f"{key}{separator}{value}" for key, value in entries.items())
    return "\n".join(lines) + "\n"


@contextlib.contextmanager
def temp_sa_config_file(
    entries: Mapping[str, str] | None = None,
    content: str | None = None,
) -> Generator[str, None, None]:
    """
    Create a temporary sa.cfg file for testing.

    Args:
        entries: Key/value pairs rendered through make_sa_config_text
        content: Raw file contents (overrides entries)

    Yields:
        Path to the temporary file.
    """
    fd, path = tempfile.mkstemp(suffix=".cfg")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content if content is not None else make_sa_config_text(entries))
        yield path
    finally:
        with contextlib.suppress(OSError):
            Path(path).unlink()
