"""
Interface definitions for repodesc's services.

These define the contracts implementations must follow, so the resolver
can be wired to a real git provider or a test double.
"""

from .logger import ILogger
from .vcs import IVCSProvider

__all__ = [
    "ILogger",
    "IVCSProvider",
]
