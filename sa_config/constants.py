"""Shared constants for the sa.cfg accessor."""

# Fixed location of the gromox system-admin configuration file.
SA_CONFIG_PATH = "/etc/gromox/sa.cfg"

# Lines starting with one of these markers carry no entry.
COMMENT_PREFIXES = (";", "#")

KEY_VALUE_SEPARATOR = "="

# Exit status used when the configuration cannot be loaded.
EXIT_CONFIG_UNAVAILABLE = 1

# Single line written to stderr before the process terminates.
FATAL_DIAGNOSTIC = "cannot find config file " + SA_CONFIG_PATH
