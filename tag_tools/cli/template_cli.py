"""
Template CLI command: split.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import json
import logging
from typing import Optional

import click

from ..core.exceptions import TagToolsError
from ..template import iter_segments
from .main import get_config

logger = logging.getLogger(__name__)


@click.group()
def template() -> None:
    """`{{ }}` template commands."""


@template.command(name="split")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: from config, else text)",
)
@click.pass_context
def split(ctx: click.Context, source, format: Optional[str]) -> None:
    """Split a template file (or stdin) into literal and code segments."""
    output_format = format or get_config(ctx).output_format
    text = source.read()
    try:
        segments = list(iter_segments(text))
    except TagToolsError as e:
        logger.error(f"Failed to split template: {e}")
        click.echo(f"❌ Error: {e.message}", err=True)
        raise click.Abort()

    if output_format == "json":
        payload = [
            {"index": s.index, "kind": s.kind.value, "text": s.text} for s in segments
        ]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for s in segments:
        click.echo(f"[{s.index}] {s.kind.value}: {s.text!r}")
