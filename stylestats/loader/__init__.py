"""
Loader module for reading stylesheets.

Contains components for resolving inputs, fetching remote resources and
extracting styles from HTML.
"""

from .extractor import StyleExtractor, ExtractedStyles, is_url
from .fetcher import StylesheetFetcher, FetchedResource, FetchError
from .sources import (
    SourceLoader,
    LoadedSources,
    LoadedStylesheet,
    InputError,
    load_sources,
)

__all__ = [
    "StyleExtractor",
    "ExtractedStyles",
    "is_url",
    "StylesheetFetcher",
    "FetchedResource",
    "FetchError",
    "SourceLoader",
    "LoadedSources",
    "LoadedStylesheet",
    "InputError",
    "load_sources",
]
