"""Tests for the StyleStats orchestrator."""

import json
from datetime import datetime

import pytest

from stylestats.options import ConfigError
from stylestats.parser.selector import SelectorSyntaxError
from stylestats.stats import StyleStats, analyze_css


class TestAnalyzeCss:
    def test_default_report(self, sample_css):
        report = analyze_css(sample_css)

        assert report["paths"] == ["<stylesheet>"]
        assert report["stylesheets"] == 1
        assert report["styleElements"] == 0
        assert report["rules"] == 5
        assert report["selectors"] == 6
        assert report["declarations"] == 9
        assert report["idSelectors"] == 1
        assert report["universalSelectors"] == 1
        assert report["unqualifiedAttributeSelectors"] == 1
        assert report["javascriptSpecificSelectors"] == 1
        assert report["importantKeywords"] == 1
        assert report["floatProperties"] == 1
        assert report["uniqueFontSize"] == ["12px", "14px"]
        assert report["uniqueFontFamily"] == ["Georgia"]
        assert report["uniqueColor"] == ["#FF0000", "#FFFFFF", "RED"]
        assert report["mostIdentifierSelector"] == ["#header .nav > li a"]
        assert report["mostIdentifier"] == 4
        assert report["lowestCohesion"] == 3
        assert report["mediaQueries"] == 1
        assert "gzippedSize" not in report

    def test_published_timestamp(self):
        report = analyze_css("a { color: red }")
        assert datetime.fromisoformat(report["published"]).tzinfo is not None

    def test_report_order(self, sample_css):
        keys = list(analyze_css(sample_css))
        assert keys[:5] == ["published", "paths", "stylesheets", "styleElements", "size"]
        assert keys[-1] == "mediaQueries"

    def test_options_override_defaults(self, sample_css):
        report = analyze_css(sample_css, options={"published": False, "gzippedSize": True})
        assert "published" not in report
        assert report["gzippedSize"] > 0

    def test_report_is_json_serializable(self, sample_css):
        report = analyze_css(sample_css, options={"sourceMap": True, "uniqueColorDic": True})
        assert json.loads(json.dumps(report)) == report

    def test_malformed_selector(self):
        with pytest.raises(SelectorSyntaxError):
            analyze_css("a > { color: red }")


class TestStyleStats:
    def test_files_are_merged(self, tmp_path):
        first = tmp_path / "a.css"
        second = tmp_path / "b.css"
        first.write_text(".a { color: red }")
        second.write_text(".b { color: blue } .c { margin: 0 }")

        report = StyleStats([str(first), str(second)]).parse()
        assert report["paths"] == [str(first), str(second)]
        assert report["stylesheets"] == 2
        assert report["rules"] == 3
        assert report["size"] == len(".a { color: red }\n.b { color: blue } .c { margin: 0 }")

    def test_config_file(self, tmp_path, css_file):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"published": False, "rules": False, "propertiesCount": 2}))

        report = StyleStats([str(css_file)], config_path=str(config)).parse()
        assert "published" not in report
        assert "rules" not in report
        assert len(report["propertiesCount"]) == 2

    def test_options_win_over_config(self, tmp_path, css_file):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"rules": False}))

        stats = StyleStats([str(css_file)], options={"rules": True}, config_path=str(config))
        assert stats.options["rules"] is True

    def test_bad_config(self, tmp_path, css_file):
        config = tmp_path / "config.json"
        config.write_text("nope")
        with pytest.raises(ConfigError):
            StyleStats([str(css_file)], config_path=str(config))

    def test_html_input(self, tmp_path):
        page = tmp_path / "index.html"
        page.write_text("<style>.a { color: red }</style><style>.b { float: left }</style>")

        report = StyleStats([str(page)]).parse()
        assert report["stylesheets"] == 0
        assert report["styleElements"] == 2
        assert report["rules"] == 2
        assert report["floatProperties"] == 1
