"""
Flask web application for stylestats.

Provides a web page and a JSON API for analyzing stylesheets.
"""

import asyncio
from urllib.parse import urlparse

from flask import Flask, render_template, request, jsonify

from ..options import build_options
from ..stats import StyleStats, analyze_css
from ..utils.log import get_logger


# Largest stylesheet accepted through the API
MAX_CSS_LENGTH = 5 * 1024 * 1024


def create_app():
    """Create and configure the Flask application."""
    app = Flask(__name__,
                template_folder='templates')
    logger = get_logger("web")

    @app.route('/')
    def index():
        """Render the main UI page."""
        return render_template('index.html')

    @app.route('/api/analyze', methods=['POST'])
    def analyze_stylesheet():
        """Analyze pasted CSS or a remote stylesheet/page."""
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'error': 'No JSON data provided'}), 400
        if not isinstance(data, dict):
            return jsonify({'error': 'Request body must be an object'}), 400

        css = data.get('css') or ''
        url = data.get('url') or ''
        options = data.get('options') or {}

        if not isinstance(css, str) or not isinstance(url, str):
            return jsonify({'error': 'CSS text and URL must be strings'}), 400
        url = url.strip()
        if not isinstance(options, dict):
            return jsonify({'error': 'Options must be an object'}), 400
        if not css and not url:
            return jsonify({'error': 'CSS text or URL is required'}), 400
        if len(css) > MAX_CSS_LENGTH:
            return jsonify({'error': 'Stylesheet is too large'}), 400

        try:
            if css:
                result = analyze_css(css, options=options, name='input.css')
            else:
                if not url.startswith(('http://', 'https://')):
                    url = 'https://' + url
                if not urlparse(url).netloc:
                    return jsonify({'error': 'Invalid URL format'}), 400
                stats = StyleStats([url], options=options)
                result = asyncio.run(stats.parse_async())
        except (ValueError, TypeError) as e:
            return jsonify({'error': str(e)}), 400
        except OSError as e:
            logger.error(f"Analysis failed: {e}")
            return jsonify({'error': f'Analysis failed: {e}'}), 500

        return jsonify(result)

    @app.route('/api/options')
    def default_options():
        """List the default analysis options."""
        return jsonify(dict(build_options()))

    return app


def run_app(host: str = '127.0.0.1', port: int = 5000, debug: bool = False):
    """Run the Flask web application."""
    app = create_app()
    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    run_app()
