"""
Report renderers: table, JSON, safe JSON, CSV and HTML.
"""

import csv
import io
import json
import os
import re
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich import box
from rich.console import Console
from rich.table import Table

from .prettify import prettify


TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')

SAFE_JSON_ESCAPES = {
    "\0": "\\0",
    "\x08": "\\b",
    "\t": "\\t",
    "\x1a": "\\z",
    "\n": "\\n",
    "\r": "\\r",
    '"': '\\"',
    "'": "\\'",
    "\\": "\\\\",
}
SAFE_JSON_PATTERN = re.compile(r'[\0\x08\t\x1a\n\r"\'\\]')


def escape(text: str) -> str:
    """Escape quotes, backslashes and control characters."""
    return SAFE_JSON_PATTERN.sub(lambda match: SAFE_JSON_ESCAPES[match.group(0)], text)


class Format:
    """
    Renders a report in the supported output formats.

    The report itself is never modified.
    """

    def __init__(self, data: Dict[str, Any], simple: bool = False):
        """
        Initialize the formatter.

        Args:
            data: Report dictionary
            simple: Render a compact table
        """
        self.data = data
        self.simple = simple

    def to_json(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False)

    def to_safe_json(self) -> str:
        """JSON on one line, escaped for embedding in a quoted string."""
        return escape(json.dumps(self.data, ensure_ascii=False))

    def to_csv(self) -> str:
        """One header row of metric names and one row of values."""
        row = {key: self._csv_value(key, value) for key, value in self.data.items()}

        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=list(row), lineterminator='\n')
        writer.writeheader()
        writer.writerow(row)
        return buffer.getvalue()

    @staticmethod
    def _csv_value(key: str, value: Any) -> Any:
        if key == 'propertiesCount':
            return ' '.join(f"{item['property']}:{item['count']}" for item in value)
        if isinstance(value, dict):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, (list, tuple)):
            return ' '.join(str(item) for item in value)
        return value

    def to_html(self) -> str:
        env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=select_autoescape(['html'])
        )
        template = env.get_template('stats.html')
        return template.render(
            stats=prettify(self.data),
            published=self.data.get('published'),
            paths=self.data.get('paths', []),
        )

    def to_table(self, width: int = 100) -> str:
        """Render the report as a plain text table."""
        table = Table(
            show_header=False,
            box=box.SIMPLE if self.simple else box.SQUARE,
            show_lines=not self.simple,
        )
        table.add_column("Metric", style="cyan", no_wrap=True)
        table.add_column("Value", overflow="fold")

        for name, value in prettify(self.data):
            table.add_row(name, value)

        buffer = io.StringIO()
        console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
        console.print(table)
        return buffer.getvalue()

    def render(self, output_type: str = 'table') -> str:
        """
        Render in the named format.

        Args:
            output_type: One of "table", "json", "safe-json", "csv", "html"

        Raises:
            ValueError: If the format is unknown
        """
        renderers = {
            'table': self.to_table,
            'json': self.to_json,
            'safe-json': self.to_safe_json,
            'csv': self.to_csv,
            'html': self.to_html,
        }
        if output_type not in renderers:
            raise ValueError(f"Unknown output format: {output_type}")
        return renderers[output_type]()
