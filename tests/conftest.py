from __future__ import annotations

import pytest

from stylestats.web.app import create_app


SAMPLE_CSS = """
#header .nav > li a { color: #fff; font-size: 14px; font-family: Georgia; }
.btn, .js-toggle { background: rgb(255, 0, 0) !important; float: left; }
*[data-role] { border: 1px solid red; }
[hidden] { display: none; }
@media (max-width: 600px) {
    .btn { font-size: 12px; color: #FFF; }
}
"""


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app()
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def sample_css():
    return SAMPLE_CSS


@pytest.fixture
def css_file(tmp_path):
    """Write the sample stylesheet to a temporary file."""
    path = tmp_path / "sample.css"
    path.write_text(SAMPLE_CSS, encoding="utf-8")
    return path
