"""
Package-wide logger and search/report configuration.
"""

from .logging import logger
from .config import config

__all__ = ["logger", "config"]
