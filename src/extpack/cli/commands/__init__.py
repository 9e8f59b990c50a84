"""
CLI commands for extpack
"""

from extpack.cli.commands import inspect

__all__ = ["inspect"]
