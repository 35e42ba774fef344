"""
Selector CLI command: parse.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import json
import logging
from typing import Optional

import click

from ..core.exceptions import TagToolsError
from ..selector import describe_selector, format_selector, parse_selector
from ..selector.ast import SelectorList
from .main import get_config

logger = logging.getLogger(__name__)


@click.group()
def selector() -> None:
    """CSS selector commands."""


@selector.command(name="parse")
@click.argument("selector_text", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: from config, else text)",
)
@click.pass_context
def parse(ctx: click.Context, selector_text: tuple, format: Optional[str]) -> None:
    """Parse a CSS selector and print its canonical form.

    Several arguments are joined with spaces, so shell-split selectors such
    as `div > span` do not need quoting.
    """
    output_format = format or get_config(ctx).output_format
    try:
        result = parse_selector(list(selector_text))
    except TagToolsError as e:
        logger.error(f"Failed to parse selector: {e}")
        click.echo(f"❌ Error: {e.message}", err=True)
        raise click.Abort()

    if output_format == "json":
        payload = {
            "type": "selector_list" if isinstance(result, SelectorList) else "selector",
            "formatted": format_selector(result),
            **result.to_dict(),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(describe_selector(result))
