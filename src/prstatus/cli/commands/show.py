"""Show status overlays for the open pull requests of a repository."""

import click
from rich.console import Console

from prstatus.core.context import PrStatusContext
from prstatus.core.errors import PrStatusError
from prstatus.gateway.overlay_host.console import ConsoleOverlayHost


@click.command("show")
@click.option("--force", "-f", is_flag=True, help="Fetch even if cached data is current")
@click.option("--repo", "repository", default=None, help="Repository as OWNER/NAME")
@click.pass_obj
def show_cmd(ctx: PrStatusContext, force: bool, repository: str | None) -> None:
    """Print open pull requests with review and CI status.

    Each row shows the review decision, the latest review per reviewer and
    CI counts as passed/failed/pending.

    Examples:

    \b
      # Current repository
      prstatus show

    \b
      # Another repository, bypassing the cache
      prstatus show --repo octo-org/widgets --force
    """
    host = ConsoleOverlayHost(Console())
    controller = ctx.controller_for(host)
    try:
        controller.show(force=force, repository=repository)
    except PrStatusError as e:
        raise click.ClickException(e.message) from e
