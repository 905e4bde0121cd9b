"""
Source loader resolving command line inputs into stylesheet texts.

Inputs can be CSS files, HTML files, directories, glob patterns or
http(s) URLs. HTML documents contribute their linked stylesheets and
``<style>`` elements.
"""

import glob
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import aiohttp

from .extractor import StyleExtractor, is_url
from .fetcher import FetchError, StylesheetFetcher
from ..utils.constants import DEFAULT_CONCURRENCY, DEFAULT_TIMEOUT
from ..utils.log import get_logger


HTML_EXTENSIONS = ('.html', '.htm')
GLOB_CHARACTERS = ('*', '?', '[')


class InputError(ValueError):
    """Raised when an input cannot be found or read."""


@dataclass
class LoadedStylesheet:
    """CSS text together with the name used for source locations."""
    name: str
    text: str


@dataclass
class LoadedSources:
    """Everything read from the inputs, ready to be parsed."""
    stylesheets: List[LoadedStylesheet] = field(default_factory=list)
    paths: List[str] = field(default_factory=list)
    stylesheet_count: int = 0
    style_element_count: int = 0

    @property
    def css_text(self) -> str:
        """All stylesheets merged into one text."""
        return '\n'.join(sheet.text for sheet in self.stylesheets)


def read_text_file(path: str) -> str:
    """Read a text file as UTF-8, falling back to Latin-1."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        with open(path, 'r', encoding='latin-1') as f:
            return f.read()


class SourceLoader:
    """
    Loads stylesheets from files, directories, globs and URLs.

    Missing inputs named by the user are errors; stylesheets linked from
    HTML that cannot be loaded are logged and skipped.
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
        concurrency: int = DEFAULT_CONCURRENCY
    ):
        """
        Initialize the source loader.

        Args:
            user_agent: User agent string for remote requests
            timeout: Request timeout in seconds
            concurrency: Maximum concurrent requests
        """
        self.logger = get_logger("loader")
        self.extractor = StyleExtractor()
        self.fetcher = StylesheetFetcher(
            timeout=timeout,
            concurrency=concurrency,
            user_agent=user_agent
        )

    def expand(self, inputs: Sequence[str]) -> List[str]:
        """
        Expand directories and glob patterns into concrete inputs.

        Raises:
            InputError: If nothing exists for an input
        """
        expanded = []
        for item in inputs:
            if is_url(item):
                expanded.append(item)
            elif os.path.isdir(item):
                found = sorted(glob.glob(os.path.join(item, '**', '*.css'), recursive=True))
                if not found:
                    raise InputError(f"No stylesheets found in directory: {item}")
                expanded.extend(found)
            elif os.path.isfile(item):
                expanded.append(item)
            elif any(char in item for char in GLOB_CHARACTERS):
                found = sorted(path for path in glob.glob(item, recursive=True) if os.path.isfile(path))
                if not found:
                    raise InputError(f"No files match pattern: {item}")
                expanded.extend(found)
            else:
                raise InputError(f"No such file or URL: {item}")
        return expanded

    async def load(self, inputs: Sequence[str]) -> LoadedSources:
        """
        Load every input.

        Args:
            inputs: File paths, directories, glob patterns or URLs

        Returns:
            LoadedSources in input order

        Raises:
            InputError: If no inputs are given or an input cannot be loaded
        """
        if not inputs:
            raise InputError("No input file specified")

        sources = LoadedSources()
        async with self.fetcher.session() as session:
            for item in self.expand(inputs):
                sources.paths.append(item)
                if is_url(item):
                    await self._load_url(session, item, sources)
                else:
                    await self._load_file(session, item, sources)

        self.logger.info(
            f"Loaded {sources.stylesheet_count} stylesheets and "
            f"{sources.style_element_count} style elements from {len(sources.paths)} inputs"
        )
        return sources

    async def _load_url(self, session: aiohttp.ClientSession, url: str, sources: LoadedSources) -> None:
        try:
            resource = await self.fetcher.fetch(session, url)
        except FetchError as e:
            raise InputError(str(e)) from e

        if resource.is_html or url.lower().endswith(HTML_EXTENSIONS):
            await self._add_html(session, resource.text, resource.url, sources)
        else:
            self._add_stylesheet(url, resource.text, sources)

    async def _load_file(self, session: aiohttp.ClientSession, path: str, sources: LoadedSources) -> None:
        try:
            text = read_text_file(path)
        except OSError as e:
            raise InputError(f"Cannot read {path}: {e}") from e

        if path.lower().endswith(HTML_EXTENSIONS):
            await self._add_html(session, text, path, sources)
        else:
            self._add_stylesheet(path, text, sources)

    async def _add_html(
        self,
        session: aiohttp.ClientSession,
        html: str,
        location: str,
        sources: LoadedSources
    ) -> None:
        styles = self.extractor.extract(html, location)

        remote = [href for href in styles.stylesheets if is_url(href)]
        fetched = iter(await self.fetcher.fetch_all(session, remote)) if remote else iter(())

        for href in styles.stylesheets:
            if is_url(href):
                resource = next(fetched)
                if resource is not None:
                    self._add_stylesheet(href, resource.text, sources)
                continue
            try:
                self._add_stylesheet(href, read_text_file(href), sources)
            except OSError as e:
                self.logger.warning(f"Skipping stylesheet {href}: {e}")

        for index, content in enumerate(styles.style_elements, start=1):
            sources.stylesheets.append(LoadedStylesheet(f"{location}#style{index}", content))
            sources.style_element_count += 1

    def _add_stylesheet(self, name: str, text: str, sources: LoadedSources) -> None:
        sources.stylesheets.append(LoadedStylesheet(name, text))
        sources.stylesheet_count += 1


async def load_sources(
    inputs: Sequence[str],
    user_agent: Optional[str] = None
) -> LoadedSources:
    """Shortcut for ``await SourceLoader(user_agent).load(inputs)``."""
    return await SourceLoader(user_agent=user_agent).load(inputs)
