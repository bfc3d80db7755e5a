"""Pull request table widget for the status dashboard."""

from collections.abc import Mapping

from textual.widgets import DataTable

from prstatus.core.types import Overlay, PullRequestRecord
from prstatus.gateway.overlay_host.console import overlay_cell


class PullRequestTable(DataTable):
    """DataTable with one row per open PR and a status column for overlays.

    Rows are keyed by PR number so overlays can be attached and removed
    without rebuilding the table.
    """

    def __init__(self) -> None:
        super().__init__(cursor_type="row")
        self._numbers: list[int] = []

    def on_mount(self) -> None:
        self.add_column("pr", key="pr")
        self.add_column("title", key="title")
        self.add_column("status", key="status")

    def populate(self, records: Mapping[int, PullRequestRecord]) -> None:
        """Show one row per record, newest PR first, preserving the cursor.

        If the selected PR still exists, the cursor stays on it. Otherwise it
        stays at the same row index, clamped to the new row count.
        """
        selected: int | None = None
        cursor_row = self.cursor_row
        if self._numbers and cursor_row is not None and 0 <= cursor_row < len(self._numbers):
            selected = self._numbers[cursor_row]
        saved_cursor_row = cursor_row

        self._numbers = sorted(records, reverse=True)
        self.clear()
        for number in self._numbers:
            self.add_row(f"#{number}", records[number].title, "", key=str(number))

        if not self._numbers:
            return
        if selected is not None and selected in self._numbers:
            self.move_cursor(row=self._numbers.index(selected))
        elif saved_cursor_row is not None and saved_cursor_row >= 0:
            self.move_cursor(row=min(saved_cursor_row, len(self._numbers) - 1))

    def apply_overlays(self, overlays: Mapping[int, Overlay]) -> None:
        """Set every row's status cell; rows without an overlay are blanked."""
        for number in self._numbers:
            self.update_cell(str(number), "status", overlay_cell(overlays.get(number)))

    def clear_overlays(self) -> None:
        self.apply_overlays({})

    @property
    def pr_numbers(self) -> list[int]:
        return list(self._numbers)
