"""
StyleStats - stylesheet statistics in Python.

This package parses stylesheets and reports selector complexity, color and
font diversity, declaration anti-patterns and size metrics.
"""

__version__ = "1.0.0"
__author__ = "StyleStats Team"
