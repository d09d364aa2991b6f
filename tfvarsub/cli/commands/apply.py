"""Apply command: export the merged variables and rewrite templates in place."""

import logging
import sys
from argparse import Namespace

from tfvarsub.config import RunConfig
from tfvarsub.discovery import find_files
from tfvarsub.exceptions import ParseError
from tfvarsub.export import dump_yaml
from tfvarsub.variables import PlaceholderSubstitutor
from tfvarsub.values import SymbolTable

from .common import (
    EXIT_ERROR,
    EXIT_OK,
    EXIT_PARSE_ERROR,
    EXIT_UNRESOLVED,
    configure_logging,
    discover_symbol_table,
)


logger = logging.getLogger(__name__)


def write_export(table: SymbolTable, config: RunConfig) -> None:
    """Write the merged table as YAML to the export file or stdout."""
    if not config.export:
        return

    if config.export_file:
        config.export_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config.export_file, 'w', encoding='utf-8') as f:
            dump_yaml(table, f)
        logger.info(f"Wrote merged variables to {config.export_file}")
    else:
        dump_yaml(table, sys.stdout)


def apply_definitions(args: Namespace) -> int:
    """
    Merge all definition files and substitute every template under the root.

    Exit codes: 0 success, 1 file errors, 2 parse errors,
    3 unresolved placeholders when --fail-on-unresolved is set.
    """
    configure_logging(args)
    config = RunConfig.from_args(args)

    try:
        table = discover_symbol_table(config)
        write_export(table, config)

        templates = find_files(config.root_dir, config.template_ext, config.exclude)
        logger.info(f"Found {len(templates)} template files under {config.root_dir}")

        substitutor = PlaceholderSubstitutor()
        changed = 0
        unresolved_total = 0

        for template in templates:
            result = substitutor.render_file(
                template,
                table,
                write=not config.dry_run,
                backup=config.backup
            )

            if result.changed:
                changed += 1
                if config.dry_run:
                    logger.info(f"[DRY RUN] Would rewrite {template} ({result.replaced} placeholders)")

            if result.unresolved:
                unresolved_total += len(result.unresolved)
                logger.warning(f"Unresolved placeholders in {template}: {', '.join(result.unresolved)}")

        if not config.dry_run:
            logger.info(f"Rewrote {changed} of {len(templates)} template files")

        if config.fail_on_unresolved and unresolved_total:
            logger.error(f"{unresolved_total} unresolved placeholders")
            return EXIT_UNRESOLVED

        return EXIT_OK

    except ParseError as e:
        logger.error(f"Parse error: {e}")
        return e.exit_code
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return EXIT_ERROR
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return EXIT_ERROR
    except UnicodeError as e:
        logger.error(f"Encoding error: {e}")
        return EXIT_ERROR
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return EXIT_ERROR
