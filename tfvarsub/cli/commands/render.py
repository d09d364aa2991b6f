"""Render command: substitute a single template to stdout or another file."""

import logging
import sys
from argparse import Namespace
from pathlib import Path

from tfvarsub.config import RunConfig
from tfvarsub.exceptions import ParseError
from tfvarsub.symbols import build_symbol_table
from tfvarsub.variables import PlaceholderSubstitutor, read_template, write_template
from tfvarsub.variables.substitution import TEMPLATE_ERRORS

from .common import EXIT_ERROR, EXIT_OK, EXIT_UNRESOLVED, configure_logging, discover_symbol_table


logger = logging.getLogger(__name__)


def write_stdout(text: str) -> None:
    """Write rendered text to stdout, passing undecodable template bytes through."""
    buffer = getattr(sys.stdout, 'buffer', None)
    if buffer is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    buffer.write(text.encode('utf-8', errors=TEMPLATE_ERRORS))
    buffer.flush()


def render_template(args: Namespace) -> int:
    """
    Substitute one template without rewriting it.

    Definitions come from the --vars files in the order given, or from
    every definition file under --root-dir when none are given.
    """
    configure_logging(args)
    config = RunConfig.from_args(args)
    template = Path(args.template)

    try:
        if args.vars:
            table = build_symbol_table(args.vars)
        else:
            table = discover_symbol_table(config)

        text = read_template(template)

        substitutor = PlaceholderSubstitutor()
        rendered = substitutor.substitute(text, table)

        unresolved = substitutor.find_unresolved(text, table)
        if unresolved:
            logger.warning(f"Unresolved placeholders in {template}: {', '.join(unresolved)}")

        if args.out:
            out_path = Path(args.out)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            write_template(out_path, rendered)
            logger.info(f"Rendered {template} to {out_path}")
        else:
            write_stdout(rendered)

        if config.fail_on_unresolved and unresolved:
            return EXIT_UNRESOLVED
        return EXIT_OK

    except ParseError as e:
        logger.error(f"Parse error: {e}")
        return e.exit_code
    except OSError as e:
        logger.error(f"File error: {e}")
        return EXIT_ERROR
    except UnicodeError as e:
        logger.error(f"Encoding error: {e}")
        return EXIT_ERROR
