"""Tests for the stylesheet parser."""

from stylestats.parser.stylesheet import ParsedStylesheet, parse_stylesheet


def test_rule_with_selector_list():
    parsed = parse_stylesheet("a, b > c { color: red; margin: 0 }", "test.css")
    assert len(parsed.rules) == 1
    assert parsed.selectors == ["a", "b > c"]
    assert parsed.rules[0].selectors == ["a", "b > c"]
    assert [(d.property, d.value) for d in parsed.declarations] == [
        ("color", "red"),
        ("margin", "0"),
    ]


def test_declaration_sources():
    parsed = parse_stylesheet("a {\n  color: red;\n}", "test.css")
    assert parsed.declarations[0].source.startswith("test.css:2:")


def test_important_is_kept_in_value():
    parsed = parse_stylesheet("a { color: red !important }")
    assert parsed.declarations[0].value == "red !important"


def test_property_names():
    parsed = parse_stylesheet("A { COLOR: Red; --Main-Color: #fff }")
    assert parsed.selectors == ["A"]
    assert [(d.property, d.value) for d in parsed.declarations] == [
        ("color", "Red"),
        ("--Main-Color", "#fff"),
    ]


def test_comments_are_skipped():
    parsed = parse_stylesheet("/* header */ a { /* inner */ color: red; }")
    assert len(parsed.rules) == 1
    assert len(parsed.declarations) == 1


def test_media_rules_are_flattened():
    css = """
    .a { float: left }
    @media (max-width: 600px) {
        .b { float: none }
        .c, .d { color: blue }
    }
    """
    parsed = parse_stylesheet(css)
    assert parsed.selectors == [".a", ".b", ".c", ".d"]
    assert len(parsed.rules) == 3
    assert parsed.media_queries == ["(max-width: 600px)"]


def test_nested_grouping_rules():
    css = "@supports (display: grid) { @media print { .a { color: red } } }"
    parsed = parse_stylesheet(css)
    assert parsed.selectors == [".a"]
    assert parsed.media_queries == ["print"]


def test_other_at_rules_are_skipped():
    css = """
    @import url(base.css);
    @font-face { font-family: Custom; src: url(custom.woff) }
    @keyframes spin { from { color: red } to { color: blue } }
    .a { color: red }
    """
    parsed = parse_stylesheet(css)
    assert parsed.selectors == [".a"]
    assert len(parsed.declarations) == 1


def test_empty_rule():
    parsed = parse_stylesheet("a {}")
    assert len(parsed.rules) == 1
    assert parsed.rules[0].declarations == []


def test_string_values_use_double_quotes():
    parsed = parse_stylesheet("a { font-family: 'Helvetica Neue', Arial }")
    assert parsed.declarations[0].value == '"Helvetica Neue", Arial'


def test_extend():
    merged = ParsedStylesheet()
    merged.extend(parse_stylesheet(".a { color: red }", "a.css"))
    merged.extend(parse_stylesheet("@media print { .b { color: blue } }", "b.css"))
    assert merged.selectors == [".a", ".b"]
    assert [d.source.split(":")[0] for d in merged.declarations] == ["a.css", "b.css"]
    assert merged.media_queries == ["print"]


def test_empty_stylesheet():
    parsed = parse_stylesheet("")
    assert parsed.rules == []
    assert parsed.selectors == []
    assert parsed.declarations == []
