"""
Package logger. Handlers are left to the application.
"""

import logging

logger = logging.getLogger("fri_schedule")
logger.addHandler(logging.NullHandler())
