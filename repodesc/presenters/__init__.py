"""
Output presenters for repodesc.
"""

from .descriptor import FORMATS, render_descriptor

__all__ = ["FORMATS", "render_descriptor"]
