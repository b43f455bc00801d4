#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
__main__.py

MAIN OBJECTIVE:
---------------
This script provides the command-line entry point, executed with
python -m csv_lang_detector or via the console script.

Dependencies:
-------------
- sys
- argparse
- json
- rich

MAIN FEATURES:
--------------
1) Command-line argument parsing
2) Column listing and column selection for a CSV file
3) Rich or JSON rendering of results and statistics
4) Header heuristic override
5) Error reporting with a non-zero exit code

Author:
-------
Antoine Lemor
"""

import argparse
import json
import sys
from typing import List, Optional

from rich.console import Console

from . import __version__
from .cli.display import create_columns_table, display_result
from .config.settings import Settings
from .pipelines.pipeline_controller import DetectionSession
from .utils.logging_utils import setup_logging_from_settings


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog='csv-lang-detector',
        description='CSVLangDetector - detect the language of a CSV text column'
    )

    parser.add_argument(
        'file',
        type=str,
        help='CSV file to analyse'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'CSVLangDetector v{__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '-c', '--config',
        type=str,
        help='Path to configuration file'
    )

    parser.add_argument(
        '--column',
        type=str,
        help='Column to classify (default: second column)'
    )

    parser.add_argument(
        '--list-columns',
        action='store_true',
        help='List selectable columns and exit'
    )

    header_group = parser.add_mutually_exclusive_group()
    header_group.add_argument(
        '--header',
        dest='force_header',
        action='store_const',
        const=True,
        help='Treat the first row as a header'
    )
    header_group.add_argument(
        '--no-header',
        dest='force_header',
        action='store_const',
        const=False,
        help='Treat the first row as data'
    )

    detection_group = parser.add_argument_group('detection options')
    detection_group.add_argument(
        '--method',
        choices=['lingua', 'langid'],
        help='Language detection backend'
    )
    detection_group.add_argument(
        '--min-length',
        type=int,
        metavar='N',
        help='Texts shorter than N characters are Undetermined'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON instead of tables'
    )

    return parser.parse_args(argv)


def load_settings(args) -> Settings:
    # Overrides apply to this run only
    settings = Settings(args.config)

    overrides = {}
    if args.method:
        overrides['method'] = args.method
    if args.min_length is not None:
        overrides['min_text_length'] = args.min_length
    settings.update_language_settings(overrides)

    if args.verbose:
        settings.logging.level = 'DEBUG'
    return settings


def main(argv: Optional[List[str]] = None, classifier=None, console: Optional[Console] = None) -> int:
    """Main entry point; returns the process exit code"""
    args = parse_arguments(argv)
    settings = load_settings(args)
    setup_logging_from_settings(settings)
    console = console or Console()

    session = DetectionSession(classifier=classifier, settings=settings, force_header=args.force_header)
    schema = session.upload_file(args.file)
    if schema is None:
        console.print(f"[red]{session.error}[/red]")
        return 1

    if args.list_columns:
        if args.json:
            console.print_json(json.dumps(schema.to_dict()))
        else:
            console.print(create_columns_table(schema, session.selected_column))
        return 0

    column = args.column or session.selected_column
    if not column:
        console.print("[yellow]No column available for language detection.[/yellow]")
        return 0

    result = session.select_column(column)
    if result is None:
        console.print(f"[red]{session.error or 'Error processing CSV'}[/red]")
        return 1

    if args.json:
        console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        display_result(result, console)
    return 0


def run():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
