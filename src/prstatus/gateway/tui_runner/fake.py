"""In-memory TuiRunner for command tests."""

from textual.app import App

from prstatus.gateway.tui_runner.abc import TuiRunner


class FakeTuiRunner(TuiRunner):
    """Records each app it is given and returns immediately."""

    def __init__(self) -> None:
        self._apps: list[App] = []

    def run(self, app: App) -> None:
        self._apps.append(app)

    @property
    def apps_run(self) -> tuple[App, ...]:
        return tuple(self._apps)
