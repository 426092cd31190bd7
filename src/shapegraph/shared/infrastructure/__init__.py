"""
Shared infrastructure components for shapegraph.
"""

from .monitoring.logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
