"""Error types raised by prstatus operations."""


class PrStatusError(Exception):
    """Base class for all user-reportable prstatus failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ToolNotFoundError(PrStatusError):
    """The external CLI needed to reach GitHub is not installed."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"'{tool}' not found on PATH. Install it from https://cli.github.com/")
        self.tool = tool


class FetchError(PrStatusError):
    """Fetching pull request status failed.

    Raised for non-zero exits of the external CLI and for unparseable output.
    Callers must not use any partial results.
    """

    def __init__(self, repository: str, diagnostic: str) -> None:
        super().__init__(f"Failed to fetch pull requests for {repository}: {diagnostic}")
        self.repository = repository
        self.diagnostic = diagnostic


class NoActiveRepositoryError(PrStatusError):
    """No repository context is available for the current invocation."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"No active GitHub repository: {detail}")
        self.detail = detail


class ConfigError(PrStatusError):
    """The configuration file is malformed."""
