"""Overlay host that prints a rich table to the terminal."""

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

from prstatus.core.types import CheckSeverity, Overlay, PullRequestRecord, RepositoryKey
from prstatus.gateway.overlay_host.abc import OverlayHost

SEVERITY_STYLES: dict[CheckSeverity, str] = {
    "error": "red",
    "warning": "yellow",
    "success": "green",
}


class ConsoleOverlayHost(OverlayHost):
    """Prints one row per open PR with its annotation in the last column.

    PRs without an annotation get an empty cell, which keeps "no data"
    visually distinct from a failed fetch (that is reported as an error).
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def render(
        self,
        repository: RepositoryKey,
        records: Mapping[int, PullRequestRecord],
        overlays: Mapping[int, Overlay],
    ) -> None:
        if not records:
            self._console.print(f"No open pull requests in {repository}")
            return

        table = Table(title=repository, show_header=True, header_style="bold")
        table.add_column("pr", no_wrap=True)
        table.add_column("title")
        table.add_column("status", no_wrap=True)

        for number in sorted(records, reverse=True):
            overlay = overlays.get(number)
            table.add_row(f"#{number}", records[number].title, overlay_cell(overlay))

        self._console.print(table)

    def clear(self) -> None:
        self._console.clear()


def overlay_cell(overlay: Overlay | None) -> Text:
    """Styled annotation cell; empty when the PR has no overlay."""
    if overlay is None:
        return Text("")
    # Drop the adjacency space; the table already separates columns
    text = overlay.text.lstrip(" ")
    if overlay.ci_severity is None:
        return Text(text)
    return Text(text, style=SEVERITY_STYLES[overlay.ci_severity])
