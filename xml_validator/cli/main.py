#!/usr/bin/env python3
# Path: xml_validator/cli/main.py
"""
XML Validator CLI
=================

Command-line interface: load a document from a file or URL, run the
validation pipeline and report the issues.
"""

import sys
import argparse
from typing import Optional, Sequence

from rich.console import Console

from xml_validator.core.config_loader import ConfigLoader
from xml_validator.core.exceptions import ContentAcquisitionError, XMLValidatorError
from xml_validator.core.logger import configure_logging, get_logger
from xml_validator.engine.models import ValidationOptions
from xml_validator.engine.pipeline import ValidationPipeline
from xml_validator.loaders.content_loader import ContentLoader
from xml_validator.output.reporters import FormatterConfig, OUTPUT_FORMATS, create_reporter
from xml_validator.constants import (
    EXIT_INTERRUPTED,
    EXIT_ISSUES,
    EXIT_OK,
    LOG_INPUT,
    VERSION,
)

logger = get_logger(__name__, 'cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='xml-validator',
        description="Check XML exports (e.g. WordPress WXR feeds) for well-formedness "
                    "and common content mistakes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a local export
  xml-validator export.xml

  # Validate a remote feed, report up to 20 issues
  xml-validator --max-errors=20 https://example.com/feed.xml

  # Report every issue, no colors
  xml-validator --max-errors=0 --no-color export.xml

  # Machine-readable output
  xml-validator --format json export.xml
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'XML Validator {VERSION}'
    )
    parser.add_argument(
        'source',
        help='Path or http(s) URL of the XML document'
    )
    parser.add_argument(
        '--max-errors',
        type=int,
        default=None,
        help='Maximum number of errors to report, 0 for all (default: 5)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug output'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )
    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default='text',
        help='Output format (default: text)'
    )
    parser.add_argument(
        '--context-lines',
        type=int,
        default=None,
        help='Lines of context shown around each issue (default: 2)'
    )
    parser.add_argument(
        '--no-tips',
        action='store_true',
        help='Do not print correction tips after a failed validation'
    )

    return parser


def run(
    source: str,
    options: ValidationOptions,
    formatter: FormatterConfig,
    config: ConfigLoader,
    console: Optional[Console] = None
) -> int:
    """Validate one document and report it. Returns the exit code."""
    reporter = create_reporter(formatter, console)
    reporter.render_header(source, options.max_issues)

    try:
        content = ContentLoader(config).load(source)
    except ContentAcquisitionError as e:
        logger.error(f"{LOG_INPUT} {e}")
        reporter.render_error(f"Error reading file: {e}")
        return EXIT_ISSUES

    result = ValidationPipeline().run(content, options, source)
    reporter.report(result, content, options.max_issues)

    return EXIT_OK if result.is_valid else EXIT_ISSUES


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_errors is not None and args.max_errors < 0:
        parser.error("--max-errors must be >= 0")
    if args.context_lines is not None and args.context_lines < 0:
        parser.error("--context-lines must be >= 0")

    error_console = Console(stderr=True)

    try:
        config = ConfigLoader()

        debug = args.debug or config.get('debug', False)
        configure_logging(config, level='DEBUG' if debug else None, console=error_console)

        options = ValidationOptions(
            max_issues=args.max_errors if args.max_errors is not None else config['max_errors'],
            debug=debug,
        )
        formatter = FormatterConfig(
            color=config.get('color', True) and not args.no_color,
            context_lines=(
                args.context_lines if args.context_lines is not None
                else config['context_lines']
            ),
            show_tips=not args.no_tips,
            output_format=args.format,
        )

        return run(args.source, options, formatter, config)

    except KeyboardInterrupt:
        error_console.print("\n[yellow]Validation interrupted by user[/yellow]")
        return EXIT_INTERRUPTED

    except XMLValidatorError as e:
        error_console.print(f"\n[red bold]Error:[/red bold] {e}")
        return EXIT_ISSUES


if __name__ == "__main__":
    sys.exit(main())
