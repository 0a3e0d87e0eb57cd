"""
Core configuration for Doctorus utilities.
"""

from .config import Config, LOG_LEVELS

__all__ = ["Config", "LOG_LEVELS"]
