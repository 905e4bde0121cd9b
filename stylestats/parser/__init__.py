"""
Parser module for stylesheets and selectors.

Contains the stylesheet parser that flattens CSS into rules, selectors
and declarations, and the selector structure parser.
"""

from .selector import (
    AttributeSelector,
    CompoundSelector,
    SelectorSyntaxError,
    parse_selector,
)
from .stylesheet import ParsedStylesheet, StylesheetParser, parse_stylesheet

__all__ = [
    "AttributeSelector",
    "CompoundSelector",
    "SelectorSyntaxError",
    "parse_selector",
    "ParsedStylesheet",
    "StylesheetParser",
    "parse_stylesheet",
]
