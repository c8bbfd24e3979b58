#!/usr/bin/env python3
# Path: typed_string/main.py
"""
typed_string - Command Line Entry Point

Matches input strings against a template and prints decoded values or
diagnostics.

Usage:
    typed-string 'route/{integer}/end' route/3/end route/x/end
    typed-string --pattern route route/3/end
    typed-string --list
    typed-string --format json 'v{integer}.{integer}' v1.2
    typed-string --output-dir reports --pattern route route/3/end

Exit codes:
    0  every input matched
    1  at least one input did not match
    2  invalid pattern, unknown decoder, or usage error
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config_loader import ConfigLoader
from .constants import (
    EXIT_MATCHED,
    EXIT_NOT_MATCHED,
    EXIT_USAGE,
    STATUS_FAIL,
    STATUS_INFO,
    OutputMode,
)
from .core.logger import setup_ipo_logging, get_input_logger
from .decoders.registry import UnknownDecoderError
from .library.pattern_loader import PatternLoader
from .matcher import TypedStringMatcher, from_template
from .output.diagnostics import render_diagnostic
from .output.formatters import FormatterRegistry
from .output.report_models import MatchReport
from .process.models.errors import TypedStringError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='typed-string',
        description='Match strings against typed templates such as "route/{integer}/end".',
    )
    parser.add_argument(
        'template',
        nargs='?',
        help='Template with {decoder} placeholders (omit when using --pattern)',
    )
    parser.add_argument('inputs', nargs='*', help='Strings to match')
    parser.add_argument(
        '-p', '--pattern',
        help='Use a named pattern from the pattern library',
    )
    parser.add_argument(
        '--library',
        help='Pattern library directory (overrides configuration)',
    )
    parser.add_argument(
        '--validate',
        action='store_true',
        help='Validate only: print the input instead of decoded values',
    )
    parser.add_argument(
        '-f', '--format',
        choices=FormatterRegistry.get_available(),
        help='Output format (default from configuration)',
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='List library patterns and exit',
    )
    parser.add_argument(
        '-o', '--output-dir',
        help='Also write the report into this directory',
    )
    return parser


def list_patterns(loader: PatternLoader) -> int:
    """Print the pattern library."""
    patterns = loader.load_all()
    if not patterns:
        print(f"{STATUS_INFO} No patterns found in {loader.library_path}")
        return EXIT_MATCHED

    width = max(len(name) for name in patterns)
    for name in sorted(patterns):
        definition = patterns[name]
        description = f"  {definition.description}" if definition.description else ''
        print(f"  {name:<{width}}  {definition.template}{description}")
    return EXIT_MATCHED


def resolve_matcher(
    args: argparse.Namespace,
    loader: PatternLoader,
    output_mode: OutputMode
) -> TypedStringMatcher:
    """
    Build the matcher requested on the command line.

    Raises:
        KeyError, UnknownDecoderError, TypedStringError
    """
    if args.pattern:
        matcher = loader.compile(args.pattern)
        if args.validate:
            matcher = matcher.with_output_mode(OutputMode.VALIDATE)
        return matcher
    return from_template(args.template, output_mode=output_mode)


def run(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ConfigLoader()
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', False),
    )
    logger = get_input_logger('cli')

    library = args.library or config.get('pattern_library_dir')
    loader = PatternLoader(library)

    if args.list:
        return list_patterns(loader)

    # With --pattern every positional argument is an input
    if args.pattern and args.template is not None:
        args.inputs.insert(0, args.template)
        args.template = None

    if not args.pattern and args.template is None:
        parser.print_usage(sys.stderr)
        print(f"{STATUS_FAIL} a template or --pattern is required", file=sys.stderr)
        return EXIT_USAGE

    if not args.inputs:
        print(f"{STATUS_FAIL} no inputs given", file=sys.stderr)
        return EXIT_USAGE

    output_mode = OutputMode.VALIDATE if args.validate else config.get(
        'default_output_mode', OutputMode.VALUES
    )

    try:
        matcher = resolve_matcher(args, loader, output_mode)
    except TypedStringError as e:
        print(f"{STATUS_FAIL} {render_diagnostic(e)}", file=sys.stderr)
        return EXIT_USAGE
    except UnknownDecoderError as e:
        print(f"{STATUS_FAIL} {e}", file=sys.stderr)
        return EXIT_USAGE
    except KeyError as e:
        print(f"{STATUS_FAIL} {e.args[0]}", file=sys.stderr)
        return EXIT_USAGE

    max_length = config.get('max_input_length', 0)
    if max_length > 0:
        too_long = [i for i in args.inputs if len(i) > max_length]
        if too_long:
            print(
                f"{STATUS_FAIL} {len(too_long)} input(s) exceed the "
                f"maximum length of {max_length}",
                file=sys.stderr,
            )
            return EXIT_USAGE

    report = MatchReport(
        template=matcher.template,
        pattern_name=matcher.name,
        output_mode=matcher.output_mode.value,
    )
    for candidate in args.inputs:
        report.add(candidate, matcher.match(candidate))

    logger.info(
        f"Matched {report.matched_count}/{len(report.entries)} inputs "
        f"against {matcher.template!r}"
    )

    formatter = FormatterRegistry.get(args.format or config.get('output_format', 'text'))
    if formatter is None:
        formatter = FormatterRegistry.get('text')
    print(formatter.format_report(report))

    if args.output_dir:
        written = formatter.write_report(report, Path(args.output_dir))
        print(f"{STATUS_INFO} Report written to {written}", file=sys.stderr)

    return EXIT_MATCHED if report.all_matched else EXIT_NOT_MATCHED


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == '__main__':
    main()
