"""
Data types shared by the stylesheet analyzers.

Rules and declarations come from the stylesheet parser and are read-only
to the analyzers; the ranked entry types are what the analyzers produce.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Declaration:
    """One ``property: value`` pair inside a rule's block."""
    property: str
    value: str
    source: str = ""  # opaque location token, e.g. "main.css:12:5"


@dataclass
class Rule:
    """One or more selectors sharing a declaration block."""
    selectors: List[str] = field(default_factory=list)
    declarations: List[Declaration] = field(default_factory=list)


@dataclass
class RuleCohesion:
    """Declaration count of a single rule."""
    selector: List[str]
    count: int


@dataclass
class SelectorChain:
    """Chain length of a single selector."""
    selector: str
    count: int


@dataclass
class PropertyCount:
    """Number of declarations using a property."""
    property: str
    count: int


@dataclass
class SourceMap:
    """
    Where each font family, font size and color was declared.

    ``values`` maps a group name ("font-family", "font-size", "color")
    to a mapping of normalized value to the list of source tokens that
    produced it. Sources are recorded once per value, in first-seen order.
    """
    values: Dict[str, Dict[str, List[str]]] = field(default_factory=dict)

    def add(self, group: str, item: str, source: str) -> None:
        sources = self.values.setdefault(group, {}).setdefault(item, [])
        if source not in sources:
            sources.append(source)

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, List[str]]]]:
        """Return a JSON-ready copy with groups and values sorted."""
        return {
            "values": {
                group: {item: list(items[item]) for item in sorted(items)}
                for group, items in sorted(self.values.items())
            }
        }
