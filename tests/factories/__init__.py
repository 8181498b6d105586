"""
Test Factories Module

Factory functions for sa.cfg text, temporary config files and fatal handlers.
"""

from .config_factories import make_sa_config_text, temp_sa_config_file
from .fatal_factories import FatalCalled, raise_fatal

__all__ = [
    "FatalCalled",
    "make_sa_config_text",
    "raise_fatal",
    "temp_sa_config_file",
]
