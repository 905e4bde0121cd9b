"""
Rule analyzer ranking rules by declaration count.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from .models import Rule, RuleCohesion


@dataclass
class RuleAnalysis:
    """Result of rule analysis."""
    css_declarations: List[RuleCohesion] = field(default_factory=list)


class RuleAnalyzer:
    """Counts declarations per rule."""

    def analyze(self, rules: Sequence[Rule]) -> RuleAnalysis:
        """
        Rank rules by their number of declarations.

        Rules without declarations are left out. Ties keep their
        stylesheet order.
        """
        result = RuleAnalysis()

        for rule in rules:
            if rule.declarations:
                result.css_declarations.append(RuleCohesion(
                    selector=list(rule.selectors),
                    count=len(rule.declarations)
                ))

        result.css_declarations.sort(key=lambda entry: entry.count, reverse=True)
        return result


def analyze_rules(rules: Sequence[Rule]) -> RuleAnalysis:
    return RuleAnalyzer().analyze(rules)
