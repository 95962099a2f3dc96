"""
Command line interface.
"""

__all__ = ["main"]

from .main import main
