"""
Analyzer module for stylesheet statistics.

Contains the color normalizer, the rule, selector and declaration
analyzers, and the engine that assembles their results into a report.
"""

from .models import (
    Declaration,
    Rule,
    RuleCohesion,
    SelectorChain,
    PropertyCount,
    SourceMap,
)
from .colors import ColorNormalizer, normalize_colors
from .rules import RuleAnalyzer, RuleAnalysis, analyze_rules
from .selectors import SelectorAnalyzer, SelectorAnalysis, analyze_selectors
from .declarations import DeclarationAnalyzer, DeclarationAnalysis, analyze_declarations
from .engine import METRICS, Metric, analyze, gzip_size

__all__ = [
    # Data model
    "Declaration",
    "Rule",
    "RuleCohesion",
    "SelectorChain",
    "PropertyCount",
    "SourceMap",
    # Colors
    "ColorNormalizer",
    "normalize_colors",
    # Rules
    "RuleAnalyzer",
    "RuleAnalysis",
    "analyze_rules",
    # Selectors
    "SelectorAnalyzer",
    "SelectorAnalysis",
    "analyze_selectors",
    # Declarations
    "DeclarationAnalyzer",
    "DeclarationAnalysis",
    "analyze_declarations",
    # Engine
    "METRICS",
    "Metric",
    "analyze",
    "gzip_size",
]
