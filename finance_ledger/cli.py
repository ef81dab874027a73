# finance_ledger/cli.py
import logging
import os
import sys

import click
from dotenv import load_dotenv
import yaml

from finance_ledger.config import load_config
from finance_ledger.core.ledger import Ledger
from finance_ledger.parsing import LedgerInputError
from finance_ledger.session import Console, run_session

LOG_LEVEL_ENV = "FINANCE_LEDGER_LOG_LEVEL"

logger = logging.getLogger(__name__)

@click.command()
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional config.yaml'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help=f'Optional .env file (e.g. setting {LOG_LEVEL_ENV})'
)
@click.option(
    '--retry-invalid-input',
    is_flag=True,
    default=False,
    help='Re-prompt on a malformed date or amount instead of exiting.'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level for diagnostics written to stderr'
)
def main(config_path, env_file, retry_invalid_input, log_level):
    """
    Interactive in-memory income/expense ledger.

    Add transactions, list them, show totals, and filter by date or
    category from a numbered menu. Everything entered is discarded on exit.
    """
    if env_file:
        load_dotenv(env_file)

    try:
        cfg = load_config(config_path)
    except (ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(str(e), param_hint="'--config'")

    level = str(log_level or os.getenv(LOG_LEVEL_ENV) or cfg['log_level']).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise click.BadParameter(f"Unknown log level '{level}'", param_hint="'--log-level'")
    logging.basicConfig(level=level)

    retry = retry_invalid_input or cfg['on_invalid_input'] == 'retry'
    logger.debug("Malformed dates and amounts will %s", "re-prompt" if retry else "abort")

    ledger = Ledger()
    console = Console(sys.stdin, retry_invalid_input=retry)
    try:
        run_session(ledger, console)
    except LedgerInputError as e:
        raise click.ClickException(str(e))
