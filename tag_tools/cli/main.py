"""
Main CLI entry point for tag tools.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import click
import importlib
import logging
from pathlib import Path
from typing import Dict, Optional

from ..core.config import ToolConfig, load_config
from ..core.exceptions import ConfigurationError
from ..logging import setup_logging

logger = logging.getLogger(__name__)

_COMMANDS: Dict[str, str] = {
    "selector": "tag_tools.cli.selector_cli:selector",
    "template": "tag_tools.cli.template_cli:template",
}


def _load_click_command(import_path: str) -> click.Command:
    module_path, obj_name = import_path.split(":", 1)
    mod = importlib.import_module(module_path)
    return getattr(mod, obj_name)


class LazyGroup(click.Group):
    """
    Click group that lazy-loads subcommands on demand.

    Only the module of the invoked subcommand is imported, so `template`
    runs never build the selector grammar.
    """

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        target = _COMMANDS.get(cmd_name)
        if not target:
            return None
        return _load_click_command(target)


def get_config(ctx: click.Context) -> ToolConfig:
    """Return the ToolConfig stored on the root context, or defaults."""
    root = ctx.find_root()
    if isinstance(root.obj, dict) and isinstance(root.obj.get("config"), ToolConfig):
        return root.obj["config"]
    return ToolConfig()


@click.group(cls=LazyGroup)
@click.option(
    "--config",
    "-C",
    "config_path",
    default=None,
    help="Path to config.json",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(version="1.0.0")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """Tag tools - parse CSS selectors and split `{{ }}` templates."""
    config = ToolConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigurationError as e:
            raise click.ClickException(f"Failed to load config '{config_path}': {e}")

    level = "DEBUG" if verbose else config.log_level
    setup_logging(level, config.log_file)
    logger.debug("Loaded configuration: %s", config.model_dump())

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


if __name__ == "__main__":
    cli()
