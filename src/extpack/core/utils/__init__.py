"""Utility helpers for extpack"""

from extpack.core.utils.logger import get_logger

__all__ = ["get_logger"]
