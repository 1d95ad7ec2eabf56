# file: lupn/cli.py
"""
lupn CLI.

Commands:
  - luPn: look up country information for a phone number or calling-code prefix
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from lupn import __version__
from lupn.config import LupnSettings, load_settings
from lupn.core.lookup import lookup_number
from lupn.io.report import human_text, to_json
from lupn.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _load_and_configure(config_path: Path | None) -> LupnSettings:
    try:
        settings = load_settings(yaml_path=config_path)
        configure_logging(level=settings.log_level, json_logging=settings.json_logging)
    except (ValidationError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    except ValueError as exc:
        # logging rejects unknown level names with ValueError.
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    return settings


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__)
def main() -> None:
    """Phone number and calling-code lookup."""


@main.command(
    "luPn",
    short_help="Look up country info from a phone number or prefix",
)
@click.argument("number", metavar="[phone number or prefix]", type=str)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config path.",
)
def lupn_cmd(number: str, as_json: bool, config_path: Path | None) -> None:
    """
    luPn (Lookup Phone Number) works with complete numbers like +4912345678
    or country prefixes like +822 to return country information.
    """

    settings = _load_and_configure(config_path)
    result = lookup_number(number, max_prefix_length=settings.max_prefix_length)
    logger.debug("Lookup of %r produced %s", number, type(result).__name__)

    if as_json:
        click.echo(to_json(result))
    else:
        click.echo(human_text(result), nl=False)
