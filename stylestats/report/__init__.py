"""
Report module for rendering stylesheet statistics.
"""

from .format import Format, escape
from .prettify import prettify, label, format_value

__all__ = [
    "Format",
    "escape",
    "prettify",
    "label",
    "format_value",
]
