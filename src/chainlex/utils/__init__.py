"""Utility modules for chainlex.

Provides:
- logger: get_logger for logging
"""

from chainlex.utils.logger import get_logger

__all__ = ["get_logger"]
