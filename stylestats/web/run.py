#!/usr/bin/env python3
"""
Serve the StyleStats page and JSON API.

Usage:
    python -m stylestats.web.run
    python -m stylestats.web.run --port 8080 --max-css-size 1048576
"""

import argparse
import logging
from typing import List, Optional

from stylestats.web import app as web_app
from stylestats.utils.log import setup_logger, print_status


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='stylestats-web',
        description='Serve a page and a JSON API that report stylesheet statistics'
    )
    parser.add_argument(
        '--host',
        default='127.0.0.1',
        help='Interface to listen on (default: %(default)s)'
    )
    parser.add_argument(
        '--port', '-p',
        type=int,
        default=8230,
        help='Port to listen on (default: %(default)s)'
    )
    parser.add_argument(
        '--max-css-size',
        type=int,
        default=web_app.MAX_CSS_LENGTH,
        metavar='CHARS',
        help='Largest pasted stylesheet accepted by /api/analyze (default: %(default)s)'
    )
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Also write log messages to this file'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable Flask debug mode and verbose logging'
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_arguments(argv)
    setup_logger(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    web_app.MAX_CSS_LENGTH = args.max_css_size
    print_status(f"Serving stylesheet statistics at http://{args.host}:{args.port}")
    web_app.run_app(host=args.host, port=args.port, debug=args.debug)


if __name__ == '__main__':
    main()
