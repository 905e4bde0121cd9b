"""
Web module for stylestats.

Provides a Flask-based web interface for analyzing stylesheets.
"""

from .app import create_app

__all__ = ["create_app"]
