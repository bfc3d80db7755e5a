import logging
from pathlib import Path

import click

from prstatus.cli.commands.dash import dash_cmd
from prstatus.cli.commands.show import show_cmd
from prstatus.cli.config import default_config_path
from prstatus.core.context import create_context
from prstatus.core.errors import PrStatusError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="prstatus")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (default: ~/.config/prstatus/config.toml)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path | None) -> None:
    """Show review and CI status for open pull requests."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        resolved_path = config_path if config_path is not None else default_config_path()
        try:
            ctx.obj = create_context(config_path=resolved_path, cwd=Path.cwd())
        except PrStatusError as e:
            raise click.ClickException(e.message) from e


cli.add_command(show_cmd)
cli.add_command(dash_cmd)


def main() -> None:
    """CLI entry point used by the `prstatus` console script."""
    cli()
