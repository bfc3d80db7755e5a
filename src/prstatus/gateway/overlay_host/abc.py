"""Abstract base class for the UI that renders status overlays."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from prstatus.core.types import Overlay, PullRequestRecord, RepositoryKey


class OverlayHost(ABC):
    """The UI collaborator that attaches annotations after pull request rows.

    prstatus never locates rows itself. It hands the host the resolved
    records and a PR-number -> Overlay mapping; PRs with nothing to show are
    absent from the mapping.
    """

    @abstractmethod
    def render(
        self,
        repository: RepositoryKey,
        records: Mapping[int, PullRequestRecord],
        overlays: Mapping[int, Overlay],
    ) -> None:
        """Replace the displayed overlays with the given ones.

        Args:
            repository: Repository the records belong to
            records: Every open PR in the resolved dataset
            overlays: Annotation per PR number, only for PRs that have one
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every rendered overlay."""
        ...
