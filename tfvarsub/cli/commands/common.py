"""Helpers shared by the CLI commands."""

import logging
from argparse import Namespace

from tfvarsub.config import RunConfig
from tfvarsub.discovery import find_files
from tfvarsub.symbols import build_symbol_table
from tfvarsub.values import SymbolTable


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_UNRESOLVED = 3


def configure_logging(args: Namespace) -> None:
    """Set up logging on stderr from the --log-level/--debug/--quiet/--verbose flags."""
    level_name = getattr(args, 'log_level', 'info')
    if level_name == 'warn':
        level_name = 'warning'
    log_level = getattr(logging, level_name.upper())

    if getattr(args, 'debug', False):
        log_level = logging.DEBUG
    elif getattr(args, 'quiet', False):
        log_level = logging.ERROR
    elif getattr(args, 'verbose', False):
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def discover_symbol_table(config: RunConfig) -> SymbolTable:
    """Find every definition file under the root and merge them in walk order."""
    paths = find_files(config.root_dir, config.vars_ext, config.exclude)
    logger.info(f"Found {len(paths)} definition files under {config.root_dir}")
    table = build_symbol_table(paths)
    logger.info(f"Merged {len(table)} variables")
    return table
