"""Utility modules for aplex.

Provides:
- logger: get_logger for logging
"""

from aplex.utils.logger import get_logger

__all__ = ["get_logger"]
