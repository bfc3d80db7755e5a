"""Interactive pull request status dashboard."""

import click

from prstatus.core.context import PrStatusContext
from prstatus.tui.app import PullRequestStatusApp


@click.command("dash")
@click.option("--repo", "repository", default=None, help="Repository as OWNER/NAME")
@click.option(
    "--interval",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds between automatic refreshes, 0 to disable (default: from config)",
)
@click.pass_obj
def dash_cmd(ctx: PrStatusContext, repository: str | None, interval: float | None) -> None:
    """Open an interactive table of pull requests with live status.

    \b
    Keys:
      s   show (uses cache while current)
      f   force refresh
      c   clear overlays
      a   toggle automatic refresh
      q   quit

    Timer refreshes refetch on every tick, since reviews and CI runs do not
    change the repository push time that `s` relies on.
    """
    refresh_interval = interval if interval is not None else ctx.config.refresh_interval
    app = PullRequestStatusApp(
        ctx.controller_for, repository=repository, refresh_interval=refresh_interval
    )
    ctx.tui_runner.run(app)
