"""
Stylesheet parser producing the rule, selector and declaration lists
consumed by the analyzers.

Uses tinycss2 for tokenizing and rule/declaration parsing.
"""

from dataclasses import dataclass, field
from typing import List

import tinycss2

from ..analyzer.models import Declaration, Rule
from ..utils.log import get_logger


# At-rules whose blocks contain ordinary style rules
GROUPING_AT_RULES = {'media', 'supports', 'document', '-moz-document', 'layer', 'container'}


@dataclass
class ParsedStylesheet:
    """Flattened view of a stylesheet."""
    rules: List[Rule] = field(default_factory=list)
    selectors: List[str] = field(default_factory=list)
    declarations: List[Declaration] = field(default_factory=list)
    media_queries: List[str] = field(default_factory=list)

    def extend(self, other: "ParsedStylesheet") -> None:
        """Merge another parsed stylesheet into this one."""
        self.rules.extend(other.rules)
        self.selectors.extend(other.selectors)
        self.declarations.extend(other.declarations)
        self.media_queries.extend(other.media_queries)


class StylesheetParser:
    """
    Parses CSS text into rules, selectors and declarations.

    Style rules nested in grouping at-rules such as ``@media`` are
    flattened into the same lists; ``@media`` preludes are collected as
    media queries. Other at-rules (``@font-face``, ``@keyframes``, ...)
    are skipped.
    """

    def __init__(self):
        """Initialize the stylesheet parser."""
        self.logger = get_logger("parser")

    def parse(self, css_text: str, source_name: str = "<stylesheet>") -> ParsedStylesheet:
        """
        Parse a stylesheet.

        Args:
            css_text: CSS source text
            source_name: Name used in declaration source tokens

        Returns:
            ParsedStylesheet with everything found
        """
        result = ParsedStylesheet()
        nodes = tinycss2.parse_stylesheet(
            css_text,
            skip_comments=True,
            skip_whitespace=True,
        )
        self._handle_nodes(nodes, source_name, result)

        self.logger.debug(
            f"Parsed {source_name}: {len(result.rules)} rules, "
            f"{len(result.selectors)} selectors, "
            f"{len(result.declarations)} declarations"
        )
        return result

    def _handle_nodes(self, nodes, source_name: str, result: ParsedStylesheet) -> None:
        for node in nodes:
            if node.type == 'qualified-rule':
                self._handle_rule(node, source_name, result)
            elif node.type == 'at-rule':
                self._handle_at_rule(node, source_name, result)
            elif node.type == 'error':
                self.logger.debug(
                    f"{source_name}:{node.source_line}:{node.source_column}: {node.message}"
                )

    def _handle_at_rule(self, node, source_name: str, result: ParsedStylesheet) -> None:
        if node.lower_at_keyword not in GROUPING_AT_RULES or node.content is None:
            return

        if node.lower_at_keyword == 'media':
            result.media_queries.append(' '.join(tinycss2.serialize(node.prelude).split()))

        children = tinycss2.parse_rule_list(
            node.content,
            skip_comments=True,
            skip_whitespace=True,
        )
        self._handle_nodes(children, source_name, result)

    def _handle_rule(self, node, source_name: str, result: ParsedStylesheet) -> None:
        selectors = split_selector_list(node.prelude)
        declarations = []

        items = tinycss2.parse_declaration_list(
            node.content,
            skip_comments=True,
            skip_whitespace=True,
        )
        for item in items:
            if item.type != 'declaration':
                continue
            value = tinycss2.serialize(item.value).strip()
            if item.important:
                value = f"{value} !important"
            name = item.name if item.name.startswith('--') else item.lower_name
            declarations.append(Declaration(
                property=name,
                value=value,
                source=f"{source_name}:{item.source_line}:{item.source_column}",
            ))

        result.rules.append(Rule(selectors=selectors, declarations=declarations))
        result.selectors.extend(selectors)
        result.declarations.extend(declarations)


def split_selector_list(prelude) -> List[str]:
    """Split a rule prelude on top-level commas."""
    selectors = []
    current = []
    for token in prelude:
        if token.type == 'literal' and token.value == ',':
            selectors.append(current)
            current = []
        elif token.type != 'comment':
            current.append(token)
    selectors.append(current)

    return [
        text for text in (tinycss2.serialize(group).strip() for group in selectors)
        if text
    ]


def parse_stylesheet(css_text: str, source_name: str = "<stylesheet>") -> ParsedStylesheet:
    """Shortcut for ``StylesheetParser().parse(css_text, source_name)``."""
    return StylesheetParser().parse(css_text, source_name)
