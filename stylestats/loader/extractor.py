"""
Style extractor for HTML documents.

Uses BeautifulSoup to find linked stylesheets and inline style elements.
"""

import os
from dataclasses import dataclass, field
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup, FeatureNotFound

from ..utils.log import get_logger


def is_url(value: str) -> bool:
    """Check whether an input names an http(s) resource."""
    return value.startswith(('http://', 'https://'))


@dataclass
class ExtractedStyles:
    """Stylesheets referenced or embedded by an HTML document."""

    # Linked stylesheet locations (URLs or local paths), in document order
    stylesheets: List[str] = field(default_factory=list)

    # Contents of <style> elements, in document order
    style_elements: List[str] = field(default_factory=list)


class StyleExtractor:
    """
    Extracts stylesheet links and ``<style>`` contents from HTML.

    Relative links are resolved against the document location, which may
    be a URL or a local file path.
    """

    def __init__(self):
        """Initialize the style extractor."""
        self.logger = get_logger("extractor")

    def extract(self, html: str, location: str) -> ExtractedStyles:
        """
        Extract styles from HTML content.

        Args:
            html: HTML content to parse
            location: URL or file path of the document

        Returns:
            ExtractedStyles with linked stylesheets and style elements
        """
        styles = ExtractedStyles()

        try:
            soup = BeautifulSoup(html, 'lxml')
        except FeatureNotFound:
            soup = BeautifulSoup(html, 'html.parser')

        for link in soup.find_all('link', href=True):
            rel = [value.lower() for value in (link.get('rel') or [])]
            if 'stylesheet' not in rel:
                continue
            href = link.get('href', '').strip()
            if href:
                styles.stylesheets.append(self.resolve(href, location))

        for style in soup.find_all('style'):
            content = style.string
            if content and content.strip():
                styles.style_elements.append(str(content))

        self.logger.debug(
            f"Extracted from {location}: {len(styles.stylesheets)} stylesheets, "
            f"{len(styles.style_elements)} style elements"
        )
        return styles

    def resolve(self, href: str, location: str) -> str:
        """Resolve a stylesheet link relative to its document."""
        if href.startswith('//'):
            scheme = location.split(':', 1)[0] if is_url(location) else 'https'
            return f"{scheme}:{href}"
        if is_url(href) or is_url(location):
            return urljoin(location, href)
        href = href.split('?', 1)[0].split('#', 1)[0]
        return os.path.normpath(os.path.join(os.path.dirname(location), href))
