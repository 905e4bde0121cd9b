#!/usr/bin/env python3
"""
StyleStats - stylesheet statistics from the command line.

Reports selector complexity, color and font diversity, declaration
anti-patterns and size metrics for CSS files, HTML pages and URLs.

Usage:
    stylestats path/to/style.css
    stylestats https://example.com --type json

Features:
    - Analyzes local files, directories, glob patterns and URLs
    - Reads linked and embedded stylesheets from HTML
    - Configurable metrics through a JSON config file
    - Table, JSON, CSV and HTML output
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .options import number_only
from .report.format import Format
from .stats import StyleStats
from .utils.constants import USER_AGENTS
from .utils.log import (
    setup_logger,
    print_error,
    print_success,
    print_warning,
)


OUTPUT_TYPES = ('table', 'json', 'safe-json', 'csv', 'html')


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='stylestats',
        description='Evaluate stylesheets and report their statistics',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s path/to/style.css
    %(prog)s path/to/styles/ --type json
    %(prog)s "src/**/*.css" --gzip --simple
    %(prog)s https://example.com -t html -f report.html
        """
    )

    parser.add_argument(
        'inputs',
        nargs='+',
        metavar='file',
        help='CSS/HTML file, directory, glob pattern or URL'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Path to a JSON file with metric options'
    )

    parser.add_argument(
        '--type', '-t',
        choices=OUTPUT_TYPES,
        default='table',
        help='Output format (default: table)'
    )

    parser.add_argument(
        '--simple', '-s',
        action='store_true',
        help='Show a compact table'
    )

    parser.add_argument(
        '--gzip', '-g',
        action='store_true',
        help='Show the gzipped size'
    )

    parser.add_argument(
        '--number', '-n',
        action='store_true',
        help='Show only numeric metrics'
    )

    parser.add_argument(
        '--ua', '-u',
        type=str,
        help='User agent for remote inputs (ios or android)'
    )

    parser.add_argument(
        '--savefile', '-f',
        type=str,
        help='Write the report to a file instead of stdout'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress output except errors'
    )

    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Also write log messages to this file'
    )

    return parser.parse_args(argv)


def resolve_user_agent(name: Optional[str]) -> Optional[str]:
    """Map a --ua value to a user agent string."""
    if not name:
        return None
    user_agent = USER_AGENTS.get(name.lower())
    if user_agent is None:
        print_warning("User agent should be `ios` or `android`.")
    return user_agent


def save_or_print(content: str, path: Optional[str]) -> None:
    """Write the report to a file, or to stdout."""
    if path:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        print_success(f"Report saved to {path}")
    else:
        sys.stdout.write(content if content.endswith('\n') else content + '\n')


async def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for stylestats.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else (logging.ERROR if args.quiet else logging.WARNING)
    setup_logger(level=log_level, log_file=args.log_file)

    try:
        overrides = {}
        if args.gzip:
            overrides['gzippedSize'] = True

        stats = StyleStats(
            args.inputs,
            options=overrides,
            config_path=args.config,
            user_agent=resolve_user_agent(args.ua)
        )
        if args.number:
            stats.options = number_only(stats.options)

        result = await stats.parse_async()

        output = Format(result, simple=args.simple).render(args.type)
        if args.type == 'table':
            output = ' StyleStats!\n' + output
        save_or_print(output, args.savefile)

        return 0

    except KeyboardInterrupt:
        print_error("\nInterrupted by user")
        return 1
    except ValueError as e:
        print_error(f"Invalid input: {e}")
        return 1
    except OSError as e:
        print_error(f"Error: {e}")
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
