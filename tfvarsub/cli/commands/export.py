"""Export command: print the merged variables without touching templates."""

import logging
from argparse import Namespace

from tfvarsub.config import RunConfig
from tfvarsub.exceptions import ParseError

from .apply import write_export
from .common import EXIT_ERROR, EXIT_OK, configure_logging, discover_symbol_table


logger = logging.getLogger(__name__)


def export_definitions(args: Namespace) -> int:
    """Merge all definition files under the root and emit them as YAML."""
    configure_logging(args)
    config = RunConfig.from_args(args)

    try:
        table = discover_symbol_table(config)
        write_export(table, config)
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
