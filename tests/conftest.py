import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for CI environments where
# Python might not automatically include it.
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sa_config import config_loader
from tests.factories import raise_fatal


@pytest.fixture
def write_sa_config(tmp_path):
    """Write text to a fresh sa.cfg under tmp_path and return its path."""

    def _write(text: str, name: str = "sa.cfg") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def read_counter(monkeypatch):
    """Count calls to the module-level file read used by every accessor."""
    calls: list[str] = []
    original = config_loader.read_config_file

    def counting_read(path: str) -> str:
        calls.append(path)
        return original(path)

    monkeypatch.setattr(config_loader, "read_config_file", counting_read)
    return calls


@pytest.fixture
def process_accessor(monkeypatch):
    """Swap the process-wide accessor for one reading a given path."""

    def _install(path: str) -> config_loader.ConfigAccessor:
        accessor = config_loader.ConfigAccessor(path, on_fatal=raise_fatal)
        monkeypatch.setattr(config_loader, "_accessor", accessor)
        return accessor

    return _install
