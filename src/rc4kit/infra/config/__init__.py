"""
Settings file lookup and typed access for the command line.
"""

__all__ = [
    "ConfigAdapter",
    "load_settings",
    "write_sample_settings",
]

from .adapter import ConfigAdapter
from .loader import load_settings, write_sample_settings
