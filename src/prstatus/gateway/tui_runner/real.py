from textual.app import App

from prstatus.gateway.tui_runner.abc import TuiRunner


class RealTuiRunner(TuiRunner):
    def run(self, app: App) -> None:
        app.run()
