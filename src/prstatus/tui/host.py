"""OverlayHost backed by the dashboard's pull request table."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from prstatus.core.types import Overlay, PullRequestRecord, RepositoryKey
from prstatus.gateway.overlay_host.abc import OverlayHost

if TYPE_CHECKING:
    from prstatus.tui.app import PullRequestStatusApp


class TableOverlayHost(OverlayHost):
    """Marshals controller output onto the Textual UI thread.

    render() is only called from refresh worker threads and hands the data
    to the app with call_from_thread, tagged with the generation the refresh
    started in. The app drops renders from a generation that a clear has
    since ended. clear() is only called from key bindings, which already run
    on the UI thread.
    """

    def __init__(self, app: "PullRequestStatusApp", *, generation: int) -> None:
        self._app = app
        self._generation = generation

    def render(
        self,
        repository: RepositoryKey,
        records: Mapping[int, PullRequestRecord],
        overlays: Mapping[int, Overlay],
    ) -> None:
        self._app.call_from_thread(
            self._app.apply_render, self._generation, repository, records, overlays
        )

    def clear(self) -> None:
        self._app.apply_clear()
