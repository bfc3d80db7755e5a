"""Orchestrates fetching, caching and formatting for one host UI."""

import logging
from collections.abc import Collection, Mapping

from prstatus.core.cache import StatusCache
from prstatus.core.errors import PrStatusError
from prstatus.core.formatting import build_overlays
from prstatus.core.types import Overlay, PullRequestRecord, RepositoryKey
from prstatus.gateway.fetcher.abc import PullRequestStatusFetcher
from prstatus.gateway.overlay_host.abc import OverlayHost
from prstatus.gateway.repo_context.abc import RepositoryContext

logger = logging.getLogger(__name__)


class OverlayController:
    """Turns a repository into rendered per-PR status overlays.

    Data flows one way: repository -> cache or fetch -> records ->
    overlays -> host. A failed fetch leaves both the cache and the host
    untouched.
    """

    def __init__(
        self,
        *,
        fetcher: PullRequestStatusFetcher,
        cache: StatusCache,
        repo_context: RepositoryContext,
        host: OverlayHost,
        ignored_reviewers: Collection[str],
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._repo_context = repo_context
        self._host = host
        self._ignored_reviewers = frozenset(ignored_reviewers)

    def resolve_records(
        self, key: RepositoryKey, repository_updated_at: str, *, force: bool
    ) -> Mapping[int, PullRequestRecord]:
        """Return cached records if still valid, otherwise fetch and cache.

        Raises:
            ToolNotFoundError: If gh is not installed
            FetchError: If the fetch fails; the cache is not modified
        """
        if not force and self._cache.is_valid(key, repository_updated_at):
            entry = self._cache.get(key)
            if entry is not None:
                logger.debug("Using cached status for %s (fetched %s)", key, entry.fetched_at)
                return entry.records

        logger.debug("Fetching status for %s (force=%s)", key, force)
        records = self._fetcher.fetch(key)
        return self._cache.put(key, records).records

    def refresh(
        self, key: RepositoryKey, repository_updated_at: str, *, force: bool
    ) -> dict[int, str]:
        """Compute the annotation text for every PR that has one.

        Returns:
            Mapping of PR number to annotation; PRs with nothing to show are omitted
        """
        records = self.resolve_records(key, repository_updated_at, force=force)
        overlays = build_overlays(records, self._ignored_reviewers)
        return {number: overlay.text for number, overlay in overlays.items()}

    def show(
        self,
        *,
        force: bool = False,
        repository: str | None = None,
        updated_since: str | None = None,
    ) -> dict[int, Overlay]:
        """Render overlays for the active repository.

        Explicit user invocation: every error propagates to the caller.

        Args:
            force: Fetch even if the cached entry is still valid
            repository: "owner/name" override for the active repository
            updated_since: Extra update time, TIMESTAMP_FORMAT, for changes such as
                reviews and CI runs that the repository timestamp does not track

        Returns:
            The overlays handed to the host
        """
        active = self._repo_context.get_active_repository(repository)
        updated_at = active.updated_at
        if updated_since is not None:
            updated_at = max(updated_at, updated_since)
        records = self.resolve_records(active.key, updated_at, force=force)
        overlays = build_overlays(records, self._ignored_reviewers)
        self._host.render(active.key, records, overlays)
        return overlays

    def clear(self) -> None:
        """Remove rendered overlays. The cache is left as-is."""
        self._host.clear()

    def auto_refresh(
        self, *, repository: str | None = None, updated_since: str | None = None
    ) -> dict[int, Overlay] | None:
        """Best-effort show for host refresh events.

        Failures are logged and swallowed so the host UI is never
        interrupted; the previous overlays stay on screen.

        Returns:
            The rendered overlays, or None if the refresh failed
        """
        try:
            return self.show(force=False, repository=repository, updated_since=updated_since)
        except PrStatusError as e:
            logger.warning("Automatic status refresh failed: %s", e.message)
            return None
