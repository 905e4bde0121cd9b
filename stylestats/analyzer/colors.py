"""
Color normalizer for declaration values.

Extracts color literals (hex, rgb/rgba and named keywords) from a CSS
value and converts them to a canonical uppercase form.
"""

import re
from typing import Iterable, List, Optional

from ..utils.constants import NAMED_COLORS


# Keywords that are reported as "no color" even when matched
IGNORED_COLORS = {"TRANSPARENT", "INHERIT"}


class ColorNormalizer:
    """
    Extracts and canonicizes colors from declaration values.

    Gradients are skipped entirely, rgb()/rgba() becomes ``#RRGGBB``,
    the first ``#`` token is taken verbatim, and otherwise every named
    color keyword found in the value is returned.
    """

    GRADIENT_PATTERN = re.compile(r'gradient')
    RGB_PATTERN = re.compile(
        r'rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,[^)]*)?\)'
    )
    HEX_PATTERN = re.compile(r'#(\w*)')
    SHORT_HEX_PATTERN = re.compile(r'^#([0-9A-F])([0-9A-F])([0-9A-F])$')
    IMPORTANT_PATTERN = re.compile(r'!important')

    def __init__(self, named_colors: Optional[Iterable[str]] = None):
        """
        Initialize the color normalizer.

        Args:
            named_colors: Color keywords to recognize (default: CSS named colors)
        """
        if named_colors is None:
            named_colors = NAMED_COLORS
        names = [re.escape(name) for name in named_colors if name]
        self.named_pattern = None
        if names:
            self.named_pattern = re.compile(
                r'(?:^|(?<=\W))(' + '|'.join(names) + r')\b',
                re.IGNORECASE
            )

    def extract(self, value: str) -> List[str]:
        """Return the raw color candidates found in a value."""
        if self.GRADIENT_PATTERN.search(value):
            return []

        rgb = self.RGB_PATTERN.search(value)
        if rgb:
            return [self._rgb_to_hex(*(int(channel) for channel in rgb.groups()))]

        hex_color = self.HEX_PATTERN.search(value)
        if hex_color:
            return ['#' + hex_color.group(1)]

        if self.named_pattern is not None:
            return [match.group(1) for match in self.named_pattern.finditer(value)]

        return []

    def normalize(self, value: str) -> List[str]:
        """
        Extract and normalize every color in a declaration value.

        Args:
            value: Declaration value, e.g. "#fff !important"

        Returns:
            Normalized colors in order of appearance; empty when the value
            holds no reportable color
        """
        colors = []
        for candidate in self.extract(value):
            color = self._normalize_candidate(candidate)
            if color not in IGNORED_COLORS:
                colors.append(color)
        return colors

    def _normalize_candidate(self, color: str) -> str:
        color = self.IMPORTANT_PATTERN.sub('', color).upper().strip()
        return self.SHORT_HEX_PATTERN.sub(r'#\1\1\2\2\3\3', color)

    @staticmethod
    def _rgb_to_hex(r: int, g: int, b: int) -> str:
        """Convert RGB channels to an uppercase hex color."""
        r = max(0, min(255, r))
        g = max(0, min(255, g))
        b = max(0, min(255, b))
        return f"#{r:02X}{g:02X}{b:02X}"


def normalize_colors(value: str, named_colors: Optional[Iterable[str]] = None) -> List[str]:
    """Shortcut for ``ColorNormalizer(named_colors).normalize(value)``."""
    return ColorNormalizer(named_colors).normalize(value)
