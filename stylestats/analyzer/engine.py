"""
Analysis engine assembling the stylesheet metrics.

Runs the rule, selector and declaration analyzers once each and builds
the report from a declarative table of metrics, emitting only the
metrics enabled by the options.
"""

import gzip
import zlib
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .declarations import DeclarationAnalysis, DeclarationAnalyzer
from .models import Declaration, Rule, SourceMap
from .rules import RuleAnalysis, RuleAnalyzer
from .selectors import SelectorAnalysis, SelectorAnalyzer
from ..utils.log import get_logger


logger = get_logger("engine")

# Returned by a metric's compute function when the metric has no value
OMIT = object()


def gzip_size(text: str) -> int:
    """Return the gzip-compressed size of a text in bytes."""
    return len(gzip.compress(text.encode('utf-8')))


@dataclass
class AnalysisContext:
    """Inputs and analyzer outputs available to metric computations."""
    rules: Sequence[Rule]
    selectors: Sequence[str]
    declarations: Sequence[Declaration]
    stylesheet_text: str
    raw_size: int
    options: Mapping[str, Any]
    source_map: SourceMap
    rule_analysis: RuleAnalysis
    selector_analysis: SelectorAnalysis
    declaration_analysis: DeclarationAnalysis
    compressed_size: Callable[[str], int]


@dataclass(frozen=True)
class Metric:
    """A report entry: emitted when ``name`` and all of ``requires`` are enabled."""
    name: str
    compute: Callable[[AnalysisContext], Any]
    requires: Tuple[str, ...] = ()


def _ratio(numerator, denominator):
    if not denominator:
        return OMIT
    return numerator / denominator


def _limit(name: str, value):
    """
    Turn a count option into a slice bound.

    ``True`` means no bound. Anything that is not a non-negative integer
    (or a string of digits) is logged and yields OMIT.
    """
    if value is True:
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    logger.warning(f"Ignoring invalid {name} option: {value!r}")
    return OMIT


def _named_colors(value) -> List[str]:
    """Validate the namedColors option; absent or invalid means no keywords."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)) and all(isinstance(name, str) for name in value):
        return list(value)
    logger.warning(f"Ignoring invalid namedColors option: {value!r}")
    return []


def _gzipped_size(ctx: AnalysisContext):
    try:
        return ctx.compressed_size(ctx.stylesheet_text)
    except (OSError, ValueError, zlib.error) as e:
        logger.warning(f"Could not compute gzipped size: {e}")
        return OMIT


def _data_uri_ratio(ctx: AnalysisContext):
    if not ctx.declaration_analysis.data_uri_size:
        return OMIT
    return _ratio(ctx.declaration_analysis.data_uri_size, ctx.raw_size)


def _most_identifier_selector(ctx: AnalysisContext):
    count = _limit('mostIdentifierCount', ctx.options['mostIdentifierCount'])
    if count is OMIT:
        return OMIT
    return [entry.selector for entry in ctx.selector_analysis.identifiers[:count]]


def _most_identifier(ctx: AnalysisContext):
    identifiers = ctx.selector_analysis.identifiers
    return identifiers[0].count if identifiers else OMIT


def _average_of_identifier(ctx: AnalysisContext):
    total = sum(entry.count for entry in ctx.selector_analysis.identifiers)
    return _ratio(total, len(ctx.selectors))


def _lowest_cohesion(ctx: AnalysisContext):
    ranked = ctx.rule_analysis.css_declarations
    return ranked[0].count if ranked else OMIT


def _lowest_cohesion_selector(ctx: AnalysisContext):
    ranked = ctx.rule_analysis.css_declarations
    return list(ranked[0].selector) if ranked else OMIT


def _sorted_dict(values: Dict[str, int]) -> Dict[str, int]:
    return {key: values[key] for key in sorted(values)}


def _properties_count(ctx: AnalysisContext):
    count = _limit('propertiesCount', ctx.options['propertiesCount'])
    if count is OMIT:
        return OMIT
    return [asdict(entry) for entry in ctx.declaration_analysis.properties[:count]]


METRICS = (
    Metric('size', lambda ctx: ctx.raw_size),
    Metric('dataUriSize', lambda ctx: ctx.declaration_analysis.data_uri_size),
    Metric('ratioOfDataUriSize', _data_uri_ratio, requires=('dataUriSize',)),
    Metric('gzippedSize', _gzipped_size),
    Metric('rules', lambda ctx: len(ctx.rules)),
    Metric('selectors', lambda ctx: len(ctx.selectors)),
    Metric('declarations', lambda ctx: len(ctx.declarations)),
    Metric(
        'simplicity',
        lambda ctx: _ratio(len(ctx.rules), len(ctx.selectors)),
        requires=('rules', 'selectors'),
    ),
    Metric('averageOfIdentifier', _average_of_identifier),
    # top-N list and head scalar both read the intact ranking
    Metric('mostIdentifierSelector', _most_identifier_selector, requires=('mostIdentifierCount',)),
    Metric('mostIdentifier', _most_identifier),
    Metric(
        'averageOfCohesion',
        lambda ctx: _ratio(len(ctx.declarations), len(ctx.rules)),
    ),
    Metric('lowestCohesion', _lowest_cohesion),
    Metric('lowestCohesionSelector', _lowest_cohesion_selector),
    Metric('totalUniqueFontSizes', lambda ctx: len(ctx.declaration_analysis.unique_font_size)),
    Metric('uniqueFontSize', lambda ctx: list(ctx.declaration_analysis.unique_font_size)),
    Metric('uniqueFontSizeDic', lambda ctx: _sorted_dict(ctx.declaration_analysis.unique_font_size_dic)),
    Metric('totalUniqueFontFamilies', lambda ctx: len(ctx.declaration_analysis.unique_font_family)),
    Metric('uniqueFontFamily', lambda ctx: list(ctx.declaration_analysis.unique_font_family)),
    Metric('uniqueFontFamilyDic', lambda ctx: _sorted_dict(ctx.declaration_analysis.unique_font_family_dic)),
    Metric('totalUniqueColors', lambda ctx: len(ctx.declaration_analysis.unique_color)),
    Metric('uniqueColor', lambda ctx: list(ctx.declaration_analysis.unique_color)),
    Metric('uniqueColorDic', lambda ctx: _sorted_dict(ctx.declaration_analysis.unique_color_dic)),
    Metric('idSelectors', lambda ctx: ctx.selector_analysis.id_selectors),
    Metric('universalSelectors', lambda ctx: ctx.selector_analysis.universal_selectors),
    Metric('unqualifiedAttributeSelectors', lambda ctx: ctx.selector_analysis.unqualified_attribute_selectors),
    Metric('attributeSelectors', lambda ctx: ctx.selector_analysis.attribute_selectors),
    Metric('elementSelectors', lambda ctx: ctx.selector_analysis.element_selectors),
    Metric('classSelectors', lambda ctx: ctx.selector_analysis.class_selectors),
    Metric('javascriptSpecificSelectors', lambda ctx: ctx.selector_analysis.javascript_specific_selectors),
    Metric('importantKeywords', lambda ctx: ctx.declaration_analysis.important_keywords),
    Metric('floatProperties', lambda ctx: ctx.declaration_analysis.float_properties),
    Metric('propertiesCount', _properties_count),
    Metric('sourceMap', lambda ctx: ctx.source_map.to_dict()),
)


def _enabled(options: Mapping[str, Any], name: str) -> bool:
    value = options.get(name)
    return value is not None and value is not False and value != 0 and value != ''


def analyze(
    rules: Sequence[Rule],
    selectors: Sequence[str],
    declarations: Sequence[Declaration],
    stylesheet_text: str,
    raw_size: int,
    options: Mapping[str, Any],
    source_map: Optional[SourceMap] = None,
    compressed_size: Callable[[str], int] = gzip_size
) -> Dict[str, Any]:
    """
    Analyze a parsed stylesheet.

    Args:
        rules: Style rules
        selectors: Selectors of all rules, flattened
        declarations: Declarations of all rules, flattened
        stylesheet_text: Full stylesheet text (used for the gzipped size)
        raw_size: Size of the stylesheet in bytes
        options: Metric name to flag/setting; absent means disabled
        source_map: Source map to record font and color origins in
        compressed_size: Function returning the compressed size of a text

    Returns:
        Dictionary of enabled metric name to value

    Raises:
        SelectorSyntaxError: If a selector cannot be parsed
    """
    if source_map is None:
        source_map = SourceMap()

    javascript_pattern = options.get('javascriptSpecificSelectors')
    named_colors = _named_colors(options.get('namedColors'))

    ctx = AnalysisContext(
        rules=rules,
        selectors=selectors,
        declarations=declarations,
        stylesheet_text=stylesheet_text,
        raw_size=raw_size,
        options=options,
        source_map=source_map,
        rule_analysis=RuleAnalyzer().analyze(rules),
        selector_analysis=SelectorAnalyzer(javascript_pattern).analyze(selectors),
        declaration_analysis=DeclarationAnalyzer(named_colors, source_map).analyze(declarations),
        compressed_size=compressed_size,
    )

    analysis: Dict[str, Any] = {}
    for metric in METRICS:
        if not _enabled(options, metric.name):
            continue
        if not all(_enabled(options, name) for name in metric.requires):
            continue
        value = metric.compute(ctx)
        if value is not OMIT:
            analysis[metric.name] = value

    logger.debug(
        f"Analyzed {len(rules)} rules, {len(selectors)} selectors, "
        f"{len(declarations)} declarations; {len(analysis)} metrics"
    )
    return analysis
