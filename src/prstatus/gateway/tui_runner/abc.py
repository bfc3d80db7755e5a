"""Abstract base class for handing a Textual app its event loop."""

from abc import ABC, abstractmethod

from textual.app import App


class TuiRunner(ABC):
    """Runs a full-screen Textual app to completion.

    Commands never call App.run() themselves, so tests can check which app a
    command built without entering the event loop.
    """

    @abstractmethod
    def run(self, app: App) -> None:
        """Block until the app exits."""
        ...
