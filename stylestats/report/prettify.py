"""
Human readable labels and values for report rows.
"""

import re
from typing import Any, Dict, List, Tuple


LABELS = {
    "published": "Published",
    "paths": "Paths",
    "stylesheets": "Stylesheets",
    "styleElements": "Style Elements",
    "size": "Size",
    "dataUriSize": "Data URI Size",
    "ratioOfDataUriSize": "Ratio of Data URI Size",
    "gzippedSize": "Gzipped Size",
    "rules": "Rules",
    "selectors": "Selectors",
    "declarations": "Declarations",
    "simplicity": "Simplicity",
    "averageOfIdentifier": "Average of Identifier",
    "mostIdentifier": "Most Identifier",
    "mostIdentifierSelector": "Most Identifier Selector",
    "averageOfCohesion": "Average of Cohesion",
    "lowestCohesion": "Lowest Cohesion",
    "lowestCohesionSelector": "Lowest Cohesion Selector",
    "totalUniqueFontSizes": "Total Unique Font Sizes",
    "uniqueFontSize": "Unique Font Sizes",
    "uniqueFontSizeDic": "Font Size Usage",
    "totalUniqueFontFamilies": "Total Unique Font Families",
    "uniqueFontFamily": "Unique Font Families",
    "uniqueFontFamilyDic": "Font Family Usage",
    "totalUniqueColors": "Total Unique Colors",
    "uniqueColor": "Unique Colors",
    "uniqueColorDic": "Color Usage",
    "idSelectors": "ID Selectors",
    "universalSelectors": "Universal Selectors",
    "unqualifiedAttributeSelectors": "Unqualified Attribute Selectors",
    "attributeSelectors": "Attribute Selectors",
    "elementSelectors": "Element Selectors",
    "classSelectors": "Class Selectors",
    "javascriptSpecificSelectors": "JavaScript Specific Selectors",
    "importantKeywords": "Important Keywords",
    "floatProperties": "Float Properties",
    "propertiesCount": "Properties Count",
    "mediaQueries": "Media Queries",
    "sourceMap": "Source Map",
}

BYTE_METRICS = {"size", "dataUriSize", "gzippedSize"}


def label(key: str) -> str:
    """Return the display label of a metric."""
    if key in LABELS:
        return LABELS[key]
    words = re.sub(r'(?<=[a-z0-9])([A-Z])', r' \1', key)
    return words[:1].upper() + words[1:]


def format_bytes(size: int) -> str:
    """Format a byte count, e.g. 2048 -> '2.0KB'."""
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def format_value(key: str, value: Any) -> str:
    """Render a metric value as display text."""
    if key in BYTE_METRICS:
        return format_bytes(value)
    if key == "ratioOfDataUriSize":
        return f"{value * 100:.1f}%"
    if key == "propertiesCount":
        return '\n'.join(f"{item['property']}: {item['count']}" for item in value) or "N/A"
    if key == "lowestCohesionSelector":
        return ', '.join(value) or "N/A"
    if key == "sourceMap":
        groups = value.get("values", {})
        return '\n'.join(f"{group}: {len(items)} values" for group, items in groups.items()) or "N/A"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float):
        return f"{value:.2f}"
    if isinstance(value, dict):
        return '\n'.join(f"{name}: {count}" for name, count in value.items()) or "N/A"
    if isinstance(value, (list, tuple)):
        return '\n'.join(str(item) for item in value) or "N/A"
    return str(value)


def prettify(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    """
    Turn a report into labelled display rows.

    Args:
        data: Report dictionary

    Returns:
        List of (label, value text) rows in report order
    """
    return [(label(key), format_value(key, value)) for key, value in data.items()]
