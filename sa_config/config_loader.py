# sa_config/config_loader.py

import logging
import os
import sys
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, NoReturn

from .constants import EXIT_CONFIG_UNAVAILABLE, FATAL_DIAGNOSTIC, SA_CONFIG_PATH
from .errors import ConfigUnavailable
from .parser import parse_flat_config

logger = logging.getLogger(__name__)

ConfigMapping = Mapping[str, str]


def read_config_file(path: str) -> str:
    """Return the full text of ``path``; the handle is closed on every exit path.

    Raises:
        ConfigUnavailable: The file is missing, unreadable or not UTF-8.
    """
    try:
        with Path(path).open(encoding="utf-8") as file:
            return file.read()
    except FileNotFoundError as e:
        raise ConfigUnavailable("configuration file not found", path) from e
    except UnicodeDecodeError as e:
        raise ConfigUnavailable("configuration file is not valid UTF-8", path) from e
    except OSError as e:
        raise ConfigUnavailable(
            f"cannot read configuration file: {e.strerror or e}", path
        ) from e


def terminate_process(message: str) -> NoReturn:
    """Write ``message`` to stderr and end the process immediately."""
    sys.stderr.write(message + "\n")
    sys.stderr.flush()
    sys.stdout.flush()
    os._exit(EXIT_CONFIG_UNAVAILABLE)


class ConfigAccessor:
    """
    Load-once accessor for a flat configuration file.

    The first successful ``get_config()`` reads and parses the file; every
    later call returns the same read-only mapping without touching disk.
    Concurrent first callers block on a lock so exactly one load runs.

    A file that cannot be loaded is fatal: ``on_fatal`` is called with the
    diagnostic line and is expected not to return. The default writes the
    line to stderr and exits the process with status 1.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] = SA_CONFIG_PATH,
        *,
        on_fatal: Callable[[str], Any] | None = None,
    ) -> None:
        self._path = str(path)
        self._on_fatal = on_fatal or terminate_process
        self._config: ConfigMapping | None = None
        self._lock = threading.Lock()

    @property
    def path(self) -> str:
        return self._path

    @property
    def diagnostic(self) -> str:
        if self._path == SA_CONFIG_PATH:
            return FATAL_DIAGNOSTIC
        return f"cannot find config file {self._path}"

    def get_config(self) -> ConfigMapping:
        """Return the cached mapping, loading it on first use.

        Never returns on failure: the process is terminated instead.
        """
        config = self._config
        if config is not None:
            return config

        with self._lock:
            if self._config is None:
                try:
                    self._config = self._load()
                except ConfigUnavailable as e:
                    # Cause stays at DEBUG; the diagnostic is the only output.
                    logger.debug("Loading %s failed: %s", self._path, e)
                    self._on_fatal(self.diagnostic)
                    raise SystemExit(EXIT_CONFIG_UNAVAILABLE) from e
            return self._config

    def _load(self) -> ConfigMapping:
        text = read_config_file(self._path)
        entries = parse_flat_config(text, self._path)
        if entries:
            logger.info(
                "Configuration loaded from %s (%d entries)",
                self._path,
                len(entries),
                extra={"config_path": self._path},
            )
        else:
            logger.info(
                "Configuration file %s holds no entries",
                self._path,
                extra={"config_path": self._path},
            )
        return MappingProxyType(entries)

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Retrieves a value from the configuration, loading it if needed.

        Args:
            key (str): The key to retrieve.
            default (str, optional): Returned when the key is absent.

        Returns:
            The raw string value, or ``default``.
        """
        return self.get_config().get(key, default)

    def get_config_status(self) -> dict[str, Any]:
        """Return load state for health reporting without triggering a load."""
        config = self._config
        return {
            "config_status": "ok" if config is not None else "not_loaded",
            "config_path": self._path,
            "config_loaded": config is not None,
            "entry_count": len(config) if config is not None else 0,
        }


_accessor = ConfigAccessor(SA_CONFIG_PATH)


def get_config() -> ConfigMapping:
    """Return the process-wide sa.cfg mapping, loading it on first call."""
    return _accessor.get_config()


def get_config_status() -> dict[str, Any]:
    """Load state of the process-wide accessor."""
    return _accessor.get_config_status()
