"""
Selector analyzer classifying selectors and measuring chain length.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Sequence

from .models import SelectorChain
from ..parser.selector import parse_selector
from ..utils.log import get_logger


@dataclass
class SelectorAnalysis:
    """Per-kind selector counters plus chain lengths."""
    id_selectors: int = 0
    universal_selectors: int = 0
    attribute_selectors: int = 0
    unqualified_attribute_selectors: int = 0
    javascript_specific_selectors: int = 0
    element_selectors: int = 0
    class_selectors: int = 0
    identifiers: List[SelectorChain] = field(default_factory=list)


class SelectorAnalyzer:
    """
    Classifies selectors and measures how long their chains are.

    Every counter is incremented at most once per selector, however many
    positions of its chain qualify.
    """

    COMBINATOR_SPACING_PATTERN = re.compile(r'\s*([>+~])\s*')
    WHITESPACE_PATTERN = re.compile(r'\s+')
    CHAIN_SPLIT_PATTERN = re.compile(r'[\s>+~]')

    def __init__(self, javascript_pattern: Optional[str] = None):
        """
        Initialize the selector analyzer.

        Args:
            javascript_pattern: Regex marking JavaScript hook selectors;
                None or empty disables the check
        """
        self.logger = get_logger("selectors")
        self.javascript_regex = self._compile(javascript_pattern)

    def _compile(self, pattern) -> Optional[Pattern]:
        if not pattern:
            return None
        if not isinstance(pattern, str):
            self.logger.warning(f"Ignoring invalid javascriptSpecificSelectors pattern {pattern!r}")
            return None
        try:
            return re.compile(pattern)
        except re.error as e:
            self.logger.warning(f"Ignoring invalid javascriptSpecificSelectors pattern {pattern!r}: {e}")
            return None

    def analyze(self, selectors: Sequence[str]) -> SelectorAnalysis:
        """
        Analyze selectors.

        Args:
            selectors: Flattened selector strings

        Returns:
            SelectorAnalysis with counters and chain lengths sorted longest first

        Raises:
            SelectorSyntaxError: If any selector cannot be parsed
        """
        result = SelectorAnalysis()

        for selector in selectors:
            self._classify(selector, result)

            if self.javascript_regex and self.javascript_regex.search(selector.strip()):
                result.javascript_specific_selectors += 1

            result.identifiers.append(SelectorChain(
                selector=selector,
                count=self.chain_length(selector)
            ))

        result.identifiers.sort(key=lambda entry: entry.count, reverse=True)
        return result

    def _classify(self, selector: str, result: SelectorAnalysis) -> None:
        has_id = has_class = has_tag = has_universal = False
        has_attr = has_unqualified_attr = False

        for compound in parse_selector(selector):
            if compound.id:
                has_id = True
            if compound.class_names:
                has_class = True
            if compound.tag_name:
                has_tag = True
                if compound.tag_name == '*':
                    has_universal = True
            if compound.attrs:
                has_attr = True
                if not (compound.tag_name or compound.id or compound.class_names):
                    has_unqualified_attr = True

        result.id_selectors += has_id
        result.class_selectors += has_class
        result.element_selectors += has_tag
        result.universal_selectors += has_universal
        result.attribute_selectors += has_attr
        result.unqualified_attribute_selectors += has_unqualified_attr

    def chain_length(self, selector: str) -> int:
        """Count the segments of a selector separated by combinators."""
        trimmed = self.COMBINATOR_SPACING_PATTERN.sub(r'\1', selector.strip())
        trimmed = self.WHITESPACE_PATTERN.sub(' ', trimmed)
        return len([part for part in self.CHAIN_SPLIT_PATTERN.split(trimmed) if part])


def analyze_selectors(selectors: Sequence[str], javascript_pattern: Optional[str] = None) -> SelectorAnalysis:
    return SelectorAnalyzer(javascript_pattern).analyze(selectors)
