"""Main CLI entry point for tfvarsub."""

import argparse
import sys
from typing import Optional

from .commands import apply_definitions, export_definitions, render_template


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='info',
        help='Set log level'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )


def _add_discovery_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--root-dir',
        type=str,
        default='./',
        help='Root directory to search for definition and template files'
    )
    parser.add_argument(
        '--vars-ext',
        type=str,
        default='.tfvars',
        help='Extension of definition files'
    )
    parser.add_argument(
        '--exclude',
        action='append',
        metavar='PATTERN',
        help='Directory name pattern to skip (can be specified multiple times)'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the tfvarsub CLI."""
    parser = argparse.ArgumentParser(
        prog='tfvarsub',
        description='Substitute var.<name> placeholders with values from definition files'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Apply command
    apply_parser = subparsers.add_parser('apply', help='Export variables and rewrite templates in place')
    _add_discovery_arguments(apply_parser)
    apply_parser.add_argument(
        '--template-ext',
        type=str,
        default='.tf',
        help='Extension of template files'
    )
    export_group = apply_parser.add_mutually_exclusive_group()
    export_group.add_argument(
        '--export-file',
        type=str,
        metavar='PATH',
        help='Write merged variables as YAML to PATH instead of stdout'
    )
    export_group.add_argument(
        '--no-export',
        action='store_true',
        help='Do not emit the merged variables'
    )
    apply_parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Report templates that would change without writing them'
    )
    apply_parser.add_argument(
        '--backup',
        action='store_true',
        help='Keep a .bak copy of each rewritten template'
    )
    apply_parser.add_argument(
        '--fail-on-unresolved',
        action='store_true',
        help='Exit with code 3 if any placeholder is unresolved'
    )
    _add_logging_arguments(apply_parser)

    # Export command
    export_parser = subparsers.add_parser('export', help='Print merged variables as YAML')
    _add_discovery_arguments(export_parser)
    export_parser.add_argument(
        '--export-file',
        type=str,
        metavar='PATH',
        help='Write YAML to PATH instead of stdout'
    )
    _add_logging_arguments(export_parser)

    # Render command
    render_parser = subparsers.add_parser('render', help='Substitute a single template without rewriting it')
    render_parser.add_argument(
        'template',
        type=str,
        help='Path to template file'
    )
    render_parser.add_argument(
        '--vars',
        action='append',
        metavar='FILE',
        help='Definition file, merged in the order given (can be specified multiple times)'
    )
    render_parser.add_argument(
        '--out',
        type=str,
        metavar='PATH',
        help='Write the result to PATH instead of stdout'
    )
    render_parser.add_argument(
        '--fail-on-unresolved',
        action='store_true',
        help='Exit with code 3 if any placeholder is unresolved'
    )
    _add_discovery_arguments(render_parser)
    _add_logging_arguments(render_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'apply':
        return apply_definitions(parsed_args)
    elif parsed_args.command == 'export':
        return export_definitions(parsed_args)
    elif parsed_args.command == 'render':
        return render_template(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
