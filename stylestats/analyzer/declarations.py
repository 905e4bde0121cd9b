"""
Declaration analyzer for anti-patterns, fonts and colors.

Scans every declaration once for data URIs, ``!important``, floats,
font families, font sizes and colors, and counts property usage.
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from .colors import ColorNormalizer
from .models import Declaration, PropertyCount, SourceMap
from ..utils.log import get_logger


@dataclass
class DeclarationAnalysis:
    """Result of declaration analysis."""
    data_uri_size: int = 0
    important_keywords: int = 0
    float_properties: int = 0
    unique_font_size: List[str] = field(default_factory=list)
    unique_font_size_dic: Dict[str, int] = field(default_factory=dict)
    unique_font_family: List[str] = field(default_factory=list)
    unique_font_family_dic: Dict[str, int] = field(default_factory=dict)
    unique_color: List[str] = field(default_factory=list)
    unique_color_dic: Dict[str, int] = field(default_factory=dict)
    properties: List[PropertyCount] = field(default_factory=list)
    # raw values of color declarations no color could be read from
    unhandled_colors: Dict[str, int] = field(default_factory=dict)


class DeclarationAnalyzer:
    """
    Analyzes declarations in a single pass.

    Font and color values are recorded in the shared source map so each
    reported value can be traced back to where it was declared.
    """

    DATA_URI_PATTERN = re.compile(r'data:image/[A-Za-z0-9;,+=/]+')
    IMPORTANT_PATTERN = re.compile(r'!important')
    COLOR_PROPERTY_PATTERN = re.compile(r'^(?:color|background|background-color)$|^border')
    FONT_SIZE_NUMBER_PATTERN = re.compile(r'[^0-9.]')

    def __init__(
        self,
        named_colors: Optional[Iterable[str]] = None,
        source_map: Optional[SourceMap] = None
    ):
        """
        Initialize the declaration analyzer.

        Args:
            named_colors: Color keywords to recognize in color values
            source_map: Source map to record font and color origins in
        """
        self.logger = get_logger("declarations")
        self.color_normalizer = ColorNormalizer(named_colors)
        self.source_map = source_map if source_map is not None else SourceMap()

    def analyze(self, declarations: Sequence[Declaration]) -> DeclarationAnalysis:
        """
        Analyze declarations.

        Args:
            declarations: Flattened declarations of the stylesheet

        Returns:
            DeclarationAnalysis with counters, sorted unique values and
            property usage
        """
        result = DeclarationAnalysis()
        data_uris: List[str] = []
        font_sizes: List[str] = []
        font_families: List[str] = []
        colors: List[str] = []
        font_size_dic: Counter = Counter()
        font_family_dic: Counter = Counter()
        color_dic: Counter = Counter()
        unhandled: Counter = Counter()
        properties: Counter = Counter()

        for declaration in declarations:
            prop = declaration.property
            value = declaration.value

            if 'data:image' in value:
                match = self.DATA_URI_PATTERN.search(value)
                if match:
                    data_uris.append(match.group(0))

            if '!important' in value:
                result.important_keywords += 1

            if 'float' in prop:
                result.float_properties += 1

            if 'font-family' in prop:
                family = self._strip_important(value)
                font_family_dic[family] += 1
                font_families.append(family)
                self.source_map.add('font-family', family, declaration.source)

            if 'font-size' in prop:
                size = self._strip_important(value)
                font_size_dic[size] += 1
                font_sizes.append(size)
                self.source_map.add('font-size', size, declaration.source)

            if self.COLOR_PROPERTY_PATTERN.match(prop):
                found = self.color_normalizer.normalize(value)
                if found:
                    for color in found:
                        color_dic[color] += 1
                        colors.append(color)
                        self.source_map.add('color', color, declaration.source)
                else:
                    unhandled[value] += 1

            properties[prop] += 1

        result.data_uri_size = len(''.join(data_uris).encode('utf-8'))
        result.unique_font_family = sorted(set(font_families))
        result.unique_font_size = sorted(_unique(font_sizes), key=self._font_size_key)
        result.unique_color = sorted(set(colors))
        result.unique_font_family_dic = dict(font_family_dic)
        result.unique_font_size_dic = dict(font_size_dic)
        result.unique_color_dic = dict(color_dic)
        result.unhandled_colors = dict(unhandled)
        result.properties = [
            PropertyCount(property=name, count=count)
            for name, count in sorted(properties.items(), key=lambda item: item[1], reverse=True)
        ]

        if unhandled:
            self.logger.debug(
                f"{sum(unhandled.values())} color declarations without a recognizable color: "
                f"{', '.join(sorted(unhandled))}"
            )

        return result

    def _strip_important(self, value: str) -> str:
        return self.IMPORTANT_PATTERN.sub('', value).strip()

    def _font_size_key(self, size: str) -> float:
        try:
            return float(self.FONT_SIZE_NUMBER_PATTERN.sub('', size) or 0)
        except ValueError:
            return 0.0


def _unique(items: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def analyze_declarations(
    declarations: Sequence[Declaration],
    named_colors: Optional[Iterable[str]] = None,
    source_map: Optional[SourceMap] = None
) -> DeclarationAnalysis:
    return DeclarationAnalyzer(named_colors, source_map).analyze(declarations)
