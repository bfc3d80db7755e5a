"""Main Textual application for the prstatus dashboard."""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from functools import partial

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer, Header, Label

from prstatus.core.cache import format_timestamp
from prstatus.core.controller import OverlayController
from prstatus.core.errors import PrStatusError
from prstatus.core.types import Overlay, PullRequestRecord, RepositoryKey
from prstatus.gateway.overlay_host.abc import OverlayHost
from prstatus.tui.host import TableOverlayHost
from prstatus.tui.widgets.pr_table import PullRequestTable


class PullRequestStatusApp(App):
    """Interactive dashboard of open pull requests with status overlays.

    Explicit refreshes (s, f) report failures as error notifications. Timer
    refreshes are best-effort and never interrupt the UI. Either way a failed
    refresh leaves the table as it was.
    """

    TITLE = "prstatus"

    DEFAULT_CSS = """
    #main-container {
        height: 1fr;
    }

    #status-line {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "exit_app", "Quit"),
        Binding("escape", "exit_app", "Quit", show=False),
        Binding("s", "show", "Show"),
        Binding("f", "show_forced", "Force refresh"),
        Binding("c", "clear", "Clear"),
        Binding("a", "toggle_auto", "Toggle auto"),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(
        self,
        controller_factory: Callable[[OverlayHost], OverlayController],
        *,
        repository: str | None,
        refresh_interval: float,
    ) -> None:
        """Initialize the dashboard app.

        Args:
            controller_factory: Builds the controller rendering into this app
            repository: "owner/name" override, or None for the working directory's repo
            refresh_interval: Seconds between automatic refreshes (0 to disable)
        """
        super().__init__()
        self._controller_factory = controller_factory
        self._repository = repository
        self._refresh_interval = refresh_interval
        self._auto_enabled = refresh_interval > 0
        self._table: PullRequestTable | None = None
        self._status_line: Label | None = None
        self._status_message = ""
        self._generation = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            yield PullRequestTable()
        yield Label("Loading pull requests...", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self._table = self.query_one(PullRequestTable)
        self._status_line = self.query_one("#status-line", Label)

        self._start_show(force=False)

        if self._refresh_interval > 0:
            self.set_interval(self._refresh_interval, self._on_refresh_event)

    def _new_controller(self) -> OverlayController:
        return self._controller_factory(TableOverlayHost(self, generation=self._generation))

    def _start_show(self, *, force: bool) -> None:
        worker = partial(self._show_in_thread, self._new_controller(), force)
        self.run_worker(worker, thread=True, exclusive=True, group="refresh")

    def _show_in_thread(self, controller: OverlayController, force: bool) -> None:
        try:
            controller.show(force=force, repository=self._repository)
        except PrStatusError as e:
            self.call_from_thread(self._report_error, e.message)

    def _on_refresh_event(self) -> None:
        if not self._auto_enabled:
            return
        # Reviews and CI runs do not move the repository timestamp; the tick does
        event_at = format_timestamp(datetime.now(UTC))
        worker = partial(self._auto_refresh_in_thread, self._new_controller(), event_at)
        self.run_worker(worker, thread=True, exclusive=True, group="refresh")

    def _auto_refresh_in_thread(self, controller: OverlayController, event_at: str) -> None:
        controller.auto_refresh(repository=self._repository, updated_since=event_at)

    def _report_error(self, message: str) -> None:
        self.notify(message, title="Refresh failed", severity="error")
        self._set_status(f"Refresh failed: {message}")

    def _set_status(self, message: str) -> None:
        self._status_message = message
        if self._status_line is not None:
            self._status_line.update(message)

    def apply_render(
        self,
        generation: int,
        repository: RepositoryKey,
        records: Mapping[int, PullRequestRecord],
        overlays: Mapping[int, Overlay],
    ) -> None:
        """Populate the table and attach overlays (UI thread only).

        Renders from a refresh that started before the last clear are dropped.
        """
        if generation != self._generation:
            return
        self.sub_title = repository
        if self._table is not None:
            self._table.populate(records)
            self._table.apply_overlays(overlays)
        update_time = datetime.now().strftime("%H:%M:%S")
        self._set_status(f"{len(records)} open pull requests, updated {update_time}")

    def apply_clear(self) -> None:
        """Remove overlays but keep the rows (UI thread only)."""
        self._generation += 1
        if self._table is not None:
            self._table.clear_overlays()
        self._set_status("Overlays cleared")

    def action_exit_app(self) -> None:
        self.exit()

    def action_show(self) -> None:
        self._start_show(force=False)

    def action_show_forced(self) -> None:
        self._start_show(force=True)

    def action_clear(self) -> None:
        self._new_controller().clear()

    def action_toggle_auto(self) -> None:
        if self._refresh_interval <= 0:
            self._set_status("Auto refresh is disabled (refresh_interval = 0)")
            return
        self._auto_enabled = not self._auto_enabled
        state = "on" if self._auto_enabled else "off"
        self._set_status(f"Auto refresh {state}")

    def action_cursor_down(self) -> None:
        """Move cursor down (vim j key)."""
        if self._table is not None:
            self._table.action_cursor_down()

    def action_cursor_up(self) -> None:
        """Move cursor up (vim k key)."""
        if self._table is not None:
            self._table.action_cursor_up()

    @property
    def auto_enabled(self) -> bool:
        return self._auto_enabled

    @property
    def status_message(self) -> str:
        """Text currently shown in the status line."""
        return self._status_message
