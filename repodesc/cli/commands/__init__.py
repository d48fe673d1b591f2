"""
Click command implementations for repodesc CLI.

Each module corresponds to a repodesc command (e.g., describe.py
implements 'repodesc describe').
"""

from .check import check
from .config import config
from .describe import describe

COMMANDS = [
    check,
    config,
    describe,
]

__all__ = [
    "COMMANDS",
    "check",
    "config",
    "describe",
]
