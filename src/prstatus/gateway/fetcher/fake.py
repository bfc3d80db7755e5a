"""Fake implementation of PullRequestStatusFetcher for testing."""

from collections.abc import Mapping

from prstatus.core.types import PullRequestRecord, RepositoryKey
from prstatus.gateway.fetcher.abc import PullRequestStatusFetcher


class FakePullRequestStatusFetcher(PullRequestStatusFetcher):
    """Test implementation - canned records, never spawns processes.

    Usage:
        fetcher = FakePullRequestStatusFetcher(
            records_by_repository={"owner/repo": {1: PullRequestRecord(number=1)}},
        )

        # Simulate gh failing for a repository
        fetcher.set_error("owner/repo", FetchError("owner/repo", "HTTP 502"))

        assert fetcher.fetch_calls == ("owner/repo",)
    """

    def __init__(
        self,
        *,
        records_by_repository: Mapping[RepositoryKey, Mapping[int, PullRequestRecord]]
        | None = None,
        errors: Mapping[RepositoryKey, Exception] | None = None,
    ) -> None:
        self._records_by_repository = dict(records_by_repository or {})
        self._errors = dict(errors or {})
        self._fetch_calls: list[RepositoryKey] = []

    def fetch(self, key: RepositoryKey) -> dict[int, PullRequestRecord]:
        self._fetch_calls.append(key)
        if key in self._errors:
            raise self._errors[key]
        return dict(self._records_by_repository.get(key, {}))

    def set_records(self, key: RepositoryKey, records: Mapping[int, PullRequestRecord]) -> None:
        self._records_by_repository[key] = records

    def set_error(self, key: RepositoryKey, error: Exception | None) -> None:
        """Make fetches for key raise error, or succeed again when error is None."""
        if error is None:
            self._errors.pop(key, None)
        else:
            self._errors[key] = error

    @property
    def fetch_calls(self) -> tuple[RepositoryKey, ...]:
        """Read-only access to every key fetched, in order, for test assertions."""
        return tuple(self._fetch_calls)
