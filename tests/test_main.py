"""Tests for the command line interface."""

import asyncio
import json

import pytest

from stylestats.main import main, parse_arguments, resolve_user_agent
from stylestats.utils.constants import USER_AGENTS
from stylestats.utils.log import setup_logger


def run_cli(*argv):
    return asyncio.run(main(list(argv)))


class TestArguments:
    def test_defaults(self):
        args = parse_arguments(["style.css"])
        assert args.inputs == ["style.css"]
        assert args.type == "table"
        assert not args.simple
        assert not args.gzip
        assert not args.number
        assert args.config is None
        assert args.savefile is None
        assert args.log_file is None

    def test_short_flags(self):
        args = parse_arguments(["a.css", "b.css", "-t", "json", "-s", "-g", "-n", "-u", "ios", "-c", "c.json", "-f", "out.json"])
        assert args.inputs == ["a.css", "b.css"]
        assert args.type == "json"
        assert args.simple and args.gzip and args.number
        assert args.ua == "ios"
        assert args.config == "c.json"
        assert args.savefile == "out.json"

    def test_unknown_type(self):
        with pytest.raises(SystemExit):
            parse_arguments(["a.css", "-t", "xml"])

    def test_inputs_required(self):
        with pytest.raises(SystemExit):
            parse_arguments([])


def test_resolve_user_agent():
    assert resolve_user_agent(None) is None
    assert resolve_user_agent("iOS") == USER_AGENTS["ios"]
    assert resolve_user_agent("android") == USER_AGENTS["android"]
    assert resolve_user_agent("blackberry") is None


# ---------------------------------------------------------------------------
# Running the CLI
# ---------------------------------------------------------------------------


class TestMain:
    def test_json_output(self, css_file, capsys):
        assert run_cli(str(css_file), "-t", "json") == 0
        report = json.loads(capsys.readouterr().out)
        assert report["rules"] == 5
        assert "gzippedSize" not in report

    def test_gzip(self, css_file, capsys):
        assert run_cli(str(css_file), "-t", "json", "--gzip") == 0
        assert json.loads(capsys.readouterr().out)["gzippedSize"] > 0

    def test_number_only(self, css_file, capsys):
        assert run_cli(str(css_file), "-t", "json", "-n") == 0
        report = json.loads(capsys.readouterr().out)
        assert "uniqueColor" not in report
        assert "paths" not in report
        assert report["totalUniqueColors"] == 3

    def test_table_output(self, css_file, capsys):
        assert run_cli(str(css_file)) == 0
        out = capsys.readouterr().out
        assert out.startswith(" StyleStats!\n")
        assert "Rules" in out

    def test_config(self, css_file, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"rules": False, "classSelectors": True}))

        assert run_cli(str(css_file), "-t", "json", "-c", str(config)) == 0
        report = json.loads(capsys.readouterr().out)
        assert "rules" not in report
        assert report["classSelectors"] == 4

    def test_savefile(self, css_file, tmp_path, capsys):
        out = tmp_path / "report.csv"
        assert run_cli(str(css_file), "-t", "csv", "-f", str(out)) == 0
        assert capsys.readouterr().out == ""
        assert out.read_text(encoding="utf-8").startswith("published,paths,")

    def test_missing_input(self, tmp_path):
        assert run_cli(str(tmp_path / "missing.css"), "-q") == 1

    def test_malformed_selector(self, tmp_path):
        path = tmp_path / "bad.css"
        path.write_text("a > { color: red }")
        assert run_cli(str(path), "-q") == 1

    def test_bad_config(self, css_file, tmp_path):
        config = tmp_path / "config.json"
        config.write_text("[]")
        assert run_cli(str(css_file), "-c", str(config), "-q") == 1

    def test_log_file(self, css_file, tmp_path, capsys):
        log_file = tmp_path / "stylestats.log"
        try:
            assert run_cli(str(css_file), "-t", "json", "-v", "--log-file", str(log_file)) == 0
        finally:
            setup_logger()
        text = log_file.read_text(encoding="utf-8")
        assert "DEBUG" in text
        assert "Analyzed 5 rules" in text
        json.loads(capsys.readouterr().out)
