"""
StyleStats: load stylesheets, parse them and report their statistics.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Sequence

from .analyzer.engine import analyze
from .analyzer.models import SourceMap
from .loader.sources import LoadedSources, LoadedStylesheet, SourceLoader
from .options import build_options, load_config
from .parser.stylesheet import ParsedStylesheet, StylesheetParser
from .utils.log import get_logger


class StyleStats:
    """
    Computes statistics for one or more stylesheets.

    All inputs are merged into a single stylesheet before analysis.
    """

    def __init__(
        self,
        inputs: Sequence[str],
        options: Optional[Mapping[str, Any]] = None,
        config_path: Optional[str] = None,
        user_agent: Optional[str] = None
    ):
        """
        Initialize StyleStats.

        Args:
            inputs: CSS/HTML files, directories, glob patterns or URLs
            options: Option overrides (applied after the config file)
            config_path: Optional JSON config file
            user_agent: User agent string for remote inputs

        Raises:
            ConfigError: If the config file cannot be loaded
        """
        self.inputs = list(inputs)
        config = load_config(config_path) if config_path else None
        self.options = build_options(config, options)
        self.loader = SourceLoader(user_agent=user_agent)
        self.parser = StylesheetParser()
        self.logger = get_logger("stats")

    async def parse_async(self) -> Dict[str, Any]:
        """
        Load and analyze the inputs.

        Returns:
            Report dictionary of enabled metrics

        Raises:
            InputError: If an input cannot be loaded
            SelectorSyntaxError: If a selector cannot be parsed
        """
        sources = await self.loader.load(self.inputs)
        return self.analyze_sources(sources)

    def parse(self) -> Dict[str, Any]:
        """Synchronous wrapper around ``parse_async``."""
        return asyncio.run(self.parse_async())

    def analyze_sources(self, sources: LoadedSources) -> Dict[str, Any]:
        """Parse loaded stylesheets and build the report."""
        parsed = ParsedStylesheet()
        for sheet in sources.stylesheets:
            parsed.extend(self.parser.parse(sheet.text, sheet.name))
        self.logger.debug(
            f"Merged {len(sources.stylesheets)} stylesheets into "
            f"{len(parsed.rules)} rules and {len(parsed.declarations)} declarations"
        )

        css_text = sources.css_text
        report: Dict[str, Any] = {}

        if self.options.get('published'):
            report['published'] = datetime.now(timezone.utc).isoformat(timespec='seconds')
        if self.options.get('paths'):
            report['paths'] = list(sources.paths)
        if self.options.get('stylesheets'):
            report['stylesheets'] = sources.stylesheet_count
        if self.options.get('styleElements'):
            report['styleElements'] = sources.style_element_count

        report.update(analyze(
            rules=parsed.rules,
            selectors=parsed.selectors,
            declarations=parsed.declarations,
            stylesheet_text=css_text,
            raw_size=len(css_text.encode('utf-8')),
            options=self.options,
            source_map=SourceMap(),
        ))

        if self.options.get('mediaQueries'):
            report['mediaQueries'] = len(parsed.media_queries)

        return report


def analyze_css(css_text: str, options: Optional[Mapping[str, Any]] = None, name: str = "<stylesheet>") -> Dict[str, Any]:
    """
    Analyze CSS text directly, without loading any input.

    Args:
        css_text: Stylesheet source
        options: Option overrides applied to the defaults
        name: Name used in declaration source tokens

    Returns:
        Report dictionary of enabled metrics
    """
    stats = StyleStats([], options=options)
    sources = LoadedSources(paths=[name], stylesheet_count=1)
    sources.stylesheets.append(LoadedStylesheet(name, css_text))
    return stats.analyze_sources(sources)
