"""
gromox sa.cfg accessor.

``get_config()`` loads ``/etc/gromox/sa.cfg`` on first use and returns the
same read-only mapping for the rest of the process lifetime.
"""

from .config_loader import (
    ConfigAccessor,
    ConfigMapping,
    get_config,
    get_config_status,
)
from .constants import SA_CONFIG_PATH
from .errors import ConfigParseError, ConfigUnavailable, SaConfigError

__all__ = [
    "SA_CONFIG_PATH",
    "ConfigAccessor",
    "ConfigMapping",
    "ConfigParseError",
    "ConfigUnavailable",
    "SaConfigError",
    "get_config",
    "get_config_status",
]

__version__ = "1.0.0"
