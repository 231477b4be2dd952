"""
CLI module for axis.

This module provides the command-line interface, including the main entry
point installed as the ``axis`` console script.
"""

from .commands import main

__all__ = ["main"]
