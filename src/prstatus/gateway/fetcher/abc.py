"""Abstract base class for fetching pull request review and CI status."""

from abc import ABC, abstractmethod

from prstatus.core.types import PullRequestRecord, RepositoryKey


class PullRequestStatusFetcher(ABC):
    """Abstract interface for retrieving open pull requests of a repository.

    Two implementations:
    - RealPullRequestStatusFetcher: Production - shells out to the gh CLI
    - FakePullRequestStatusFetcher: Testing - canned records, no processes
    """

    @abstractmethod
    def fetch(self, key: RepositoryKey) -> dict[int, PullRequestRecord]:
        """Fetch the normalized status of every open pull request.

        Implementations do not retry.

        Args:
            key: Repository identifier ("owner/name")

        Returns:
            Mapping of PR number to PullRequestRecord

        Raises:
            ToolNotFoundError: If the external CLI is not installed
            FetchError: If the CLI fails or its output cannot be parsed
        """
        ...
