"""Tests for the show and dash commands."""

from click.testing import CliRunner

from prstatus.cli.cli import cli
from prstatus.cli.config import PrStatusConfig
from prstatus.core.context import PrStatusContext
from prstatus.core.errors import FetchError, ToolNotFoundError
from prstatus.core.types import ActiveRepository
from prstatus.gateway.fetcher.fake import FakePullRequestStatusFetcher
from prstatus.gateway.repo_context.fake import FakeRepositoryContext
from prstatus.gateway.tui_runner.fake import FakeTuiRunner
from prstatus.tui.app import PullRequestStatusApp
from tests.test_utils.records import make_record

REPO = "owner/repo"


def _context(
    fetcher: FakePullRequestStatusFetcher,
    *,
    config: PrStatusConfig | None = None,
    tui_runner: FakeTuiRunner | None = None,
) -> PrStatusContext:
    return PrStatusContext.for_test(
        fetcher=fetcher,
        repo_context=FakeRepositoryContext(
            active=ActiveRepository(key=REPO, updated_at="2023-12-31T00:00:00Z")
        ),
        config=config,
        tui_runner=tui_runner,
    )


class TestShowCommand:
    def test_prints_annotated_rows(self) -> None:
        fetcher = FakePullRequestStatusFetcher(
            records_by_repository={
                REPO: {
                    42: make_record(
                        42,
                        title="Retry",
                        decision="CHANGES_REQUESTED",
                        reviews=[("alice", "CHANGES_REQUESTED")],
                        checks=["SUCCESS", "FAILURE"],
                    ),
                    41: make_record(41, title="Docs"),
                }
            }
        )
        ctx = _context(fetcher)

        result = CliRunner().invoke(cli, ["show"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "#42" in result.output
        assert "#41" in result.output
        assert "❌(alice:❌) CI:1/1/0" in result.output

    def test_ignored_reviewers_come_from_config(self) -> None:
        fetcher = FakePullRequestStatusFetcher(
            records_by_repository={
                REPO: {7: make_record(7, title="Bump", reviews=[("dependabot", "COMMENTED")])}
            }
        )
        config = PrStatusConfig(ignored_reviewers=("dependabot",), refresh_interval=0)
        ctx = _context(fetcher, config=config)

        result = CliRunner().invoke(cli, ["show"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "#7" in result.output
        assert "dependabot" not in result.output

    def test_empty_repository(self) -> None:
        ctx = _context(FakePullRequestStatusFetcher())

        result = CliRunner().invoke(cli, ["show"], obj=ctx)

        assert result.exit_code == 0
        assert f"No open pull requests in {REPO}" in result.output

    def test_repo_option_overrides_active_repository(self) -> None:
        fetcher = FakePullRequestStatusFetcher()
        ctx = _context(fetcher)

        result = CliRunner().invoke(cli, ["show", "--repo", "other/repo"], obj=ctx)

        assert result.exit_code == 0
        assert fetcher.fetch_calls == ("other/repo",)

    def test_fetch_error_is_reported(self) -> None:
        fetcher = FakePullRequestStatusFetcher(errors={REPO: FetchError(REPO, "HTTP 502")})
        ctx = _context(fetcher)

        result = CliRunner().invoke(cli, ["show", "--force"], obj=ctx)

        assert result.exit_code == 1
        assert "HTTP 502" in result.output

    def test_missing_gh_is_reported(self) -> None:
        fetcher = FakePullRequestStatusFetcher(errors={REPO: ToolNotFoundError("gh")})
        ctx = _context(fetcher)

        result = CliRunner().invoke(cli, ["show"], obj=ctx)

        assert result.exit_code == 1
        assert "'gh' not found" in result.output

    def test_no_active_repository_is_reported(self) -> None:
        ctx = PrStatusContext.for_test()

        result = CliRunner().invoke(cli, ["show"], obj=ctx)

        assert result.exit_code == 1
        assert "No active GitHub repository" in result.output


class TestDashCommand:
    def test_launches_app_with_config_interval(self) -> None:
        tui_runner = FakeTuiRunner()
        config = PrStatusConfig(ignored_reviewers=(), refresh_interval=45)
        ctx = _context(FakePullRequestStatusFetcher(), config=config, tui_runner=tui_runner)

        result = CliRunner().invoke(cli, ["dash"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert len(tui_runner.apps_run) == 1
        app = tui_runner.apps_run[0]
        assert isinstance(app, PullRequestStatusApp)
        assert app.auto_enabled is True

    def test_interval_zero_disables_auto_refresh(self) -> None:
        tui_runner = FakeTuiRunner()
        ctx = _context(FakePullRequestStatusFetcher(), tui_runner=tui_runner)

        result = CliRunner().invoke(cli, ["dash", "--interval", "0"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert tui_runner.apps_run[0].auto_enabled is False

    def test_negative_interval_is_rejected(self) -> None:
        tui_runner = FakeTuiRunner()
        ctx = _context(FakePullRequestStatusFetcher(), tui_runner=tui_runner)

        result = CliRunner().invoke(cli, ["dash", "--interval", "-5"], obj=ctx)

        assert result.exit_code == 2
        assert tui_runner.apps_run == ()
