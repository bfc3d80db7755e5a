"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from prstatus.cli.config import PrStatusConfig, load_config
from prstatus.core.cache import StatusCache
from prstatus.core.controller import OverlayController
from prstatus.gateway.fetcher.abc import PullRequestStatusFetcher
from prstatus.gateway.fetcher.real import RealPullRequestStatusFetcher
from prstatus.gateway.overlay_host.abc import OverlayHost
from prstatus.gateway.repo_context.abc import RepositoryContext
from prstatus.gateway.repo_context.real import RealRepositoryContext
from prstatus.gateway.time.abc import Time
from prstatus.gateway.time.real import RealTime
from prstatus.gateway.tui_runner.abc import TuiRunner
from prstatus.gateway.tui_runner.real import RealTuiRunner


@dataclass(frozen=True)
class PrStatusContext:
    """Immutable context holding all dependencies for prstatus operations.

    Created once at the CLI entry point. The cache lives here so every
    controller built from this context shares the same process-wide cache.
    """

    fetcher: PullRequestStatusFetcher
    repo_context: RepositoryContext
    cache: StatusCache
    time: Time
    tui_runner: TuiRunner
    config: PrStatusConfig

    def controller_for(self, host: OverlayHost) -> OverlayController:
        """Build a controller rendering into host, sharing this context's cache."""
        return OverlayController(
            fetcher=self.fetcher,
            cache=self.cache,
            repo_context=self.repo_context,
            host=host,
            ignored_reviewers=self.config.ignored_reviewers,
        )

    @classmethod
    def for_test(
        cls,
        *,
        fetcher: PullRequestStatusFetcher | None = None,
        repo_context: RepositoryContext | None = None,
        time: Time | None = None,
        tui_runner: TuiRunner | None = None,
        config: PrStatusConfig | None = None,
    ) -> "PrStatusContext":
        """Create a context wired entirely with fakes.

        Any argument left as None gets an empty fake.
        """
        from prstatus.gateway.fetcher.fake import FakePullRequestStatusFetcher
        from prstatus.gateway.repo_context.fake import FakeRepositoryContext
        from prstatus.gateway.time.fake import FakeTime
        from prstatus.gateway.tui_runner.fake import FakeTuiRunner

        resolved_time = time if time is not None else FakeTime()
        return cls(
            fetcher=fetcher if fetcher is not None else FakePullRequestStatusFetcher(),
            repo_context=(
                repo_context if repo_context is not None else FakeRepositoryContext(active=None)
            ),
            cache=StatusCache(resolved_time),
            time=resolved_time,
            tui_runner=tui_runner if tui_runner is not None else FakeTuiRunner(),
            config=config if config is not None else PrStatusConfig.default(),
        )


def create_context(*, config_path: Path, cwd: Path) -> PrStatusContext:
    """Create the production context.

    Raises:
        ConfigError: If the config file is malformed
    """
    time = RealTime()
    return PrStatusContext(
        fetcher=RealPullRequestStatusFetcher(),
        repo_context=RealRepositoryContext(cwd),
        cache=StatusCache(time),
        time=time,
        tui_runner=RealTuiRunner(),
        config=load_config(config_path),
    )
