"""Tests for the web UI and JSON API."""

from stylestats.utils.log import setup_logger
from stylestats.web import app as web_app
from stylestats.web import run as web_run


class TestPages:
    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert b"StyleStats" in response.data

    def test_default_options(self, client):
        response = client.get("/api/options")
        assert response.status_code == 200
        options = response.get_json()
        assert options["rules"] is True
        assert options["propertiesCount"] == 10


class TestAnalyzeApi:
    def test_analyze_css(self, client, sample_css):
        response = client.post("/api/analyze", json={"css": sample_css})
        assert response.status_code == 200
        report = response.get_json()
        assert report["paths"] == ["input.css"]
        assert report["rules"] == 5
        assert report["uniqueColor"] == ["#FF0000", "#FFFFFF", "RED"]

    def test_options(self, client, sample_css):
        response = client.post("/api/analyze", json={
            "css": sample_css,
            "options": {"published": False, "sourceMap": True},
        })
        report = response.get_json()
        assert "published" not in report
        assert "color" in report["sourceMap"]["values"]

    def test_no_json(self, client):
        response = client.post("/api/analyze", data="css", content_type="text/plain")
        assert response.status_code == 400

    def test_missing_css_and_url(self, client):
        response = client.post("/api/analyze", json={"css": ""})
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_options_must_be_object(self, client):
        response = client.post("/api/analyze", json={"css": "a {}", "options": [1]})
        assert response.status_code == 400

    def test_malformed_selector(self, client):
        response = client.post("/api/analyze", json={"css": "a > { color: red }"})
        assert response.status_code == 400
        assert "Invalid selector" in response.get_json()["error"]

    def test_too_large(self, client, monkeypatch):
        monkeypatch.setattr(web_app, "MAX_CSS_LENGTH", 10)
        response = client.post("/api/analyze", json={"css": "a { color: red }"})
        assert response.status_code == 400

    def test_invalid_url(self, client):
        response = client.post("/api/analyze", json={"url": "http://"})
        assert response.status_code == 400

    def test_css_must_be_string(self, client):
        response = client.post("/api/analyze", json={"css": 5})
        assert response.status_code == 400
        assert "must be strings" in response.get_json()["error"]

    def test_url_must_be_string(self, client):
        response = client.post("/api/analyze", json={"url": 5})
        assert response.status_code == 400

    def test_body_must_be_object(self, client):
        response = client.post("/api/analyze", json=["a {}"])
        assert response.status_code == 400

    def test_invalid_option_value_is_ignored(self, client):
        response = client.post("/api/analyze", json={
            "css": "a { color: red }",
            "options": {"propertiesCount": [3], "namedColors": 5},
        })
        assert response.status_code == 200
        report = response.get_json()
        assert "propertiesCount" not in report
        assert report["rules"] == 1
        assert report["uniqueColor"] == []


class TestRunner:
    def test_arguments(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(web_app, "run_app", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(web_app, "MAX_CSS_LENGTH", web_app.MAX_CSS_LENGTH)

        log_file = tmp_path / "web.log"
        try:
            web_run.main(["--port", "9000", "--max-css-size", "100", "--log-file", str(log_file)])
        finally:
            setup_logger()

        assert calls == [{"host": "127.0.0.1", "port": 9000, "debug": False}]
        assert web_app.MAX_CSS_LENGTH == 100
        assert log_file.exists()

    def test_defaults(self):
        args = web_run.parse_arguments([])
        assert args.port == 8230
        assert args.max_css_size == web_app.MAX_CSS_LENGTH
        assert not args.debug
