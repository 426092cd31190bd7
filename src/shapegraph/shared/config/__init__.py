"""
Configuration for shapegraph.
"""

from .settings import Settings, get_settings, XPDL_21_NAMESPACE

__all__ = ["Settings", "get_settings", "XPDL_21_NAMESPACE"]
