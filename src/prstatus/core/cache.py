"""In-memory, process-wide cache of pull request status per repository."""

import logging
import threading
from collections.abc import Mapping
from datetime import UTC, datetime
from types import MappingProxyType

from prstatus.core.types import TIMESTAMP_FORMAT, CacheEntry, PullRequestRecord, RepositoryKey
from prstatus.gateway.time.abc import Time

logger = logging.getLogger(__name__)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as a fixed-width UTC timestamp (second precision).

    Example:
        >>> format_timestamp(datetime(2024, 1, 15, 10, 30, 5, 999, tzinfo=UTC))
        "2024-01-15T10:30:05Z"
    """
    return moment.astimezone(UTC).strftime(TIMESTAMP_FORMAT)


class StatusCache:
    """Maps a repository to the records from its last successful fetch.

    An entry is valid while its fetch time is not older than the caller's
    "repository last updated" timestamp. Both are fixed-width ISO-8601 UTC
    strings, so the comparison is a plain string comparison.

    Entries are replaced atomically under a lock; readers observe either the
    previous entry or the new one. Entries are never evicted.
    """

    def __init__(self, time: Time) -> None:
        self._time = time
        self._entries: dict[RepositoryKey, CacheEntry] = {}
        self._lock = threading.Lock()

    def is_valid(self, key: RepositoryKey, repository_updated_at: str) -> bool:
        """Check whether the cached entry for key is at least as new as the repository.

        Args:
            key: Repository identifier
            repository_updated_at: Latest known remote update, TIMESTAMP_FORMAT

        Returns:
            True if an entry exists and was fetched at or after repository_updated_at
        """
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return False
        return entry.fetched_at >= repository_updated_at

    def get(self, key: RepositoryKey) -> CacheEntry | None:
        """Return the entry for key without checking validity."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: RepositoryKey, records: Mapping[int, PullRequestRecord]) -> CacheEntry:
        """Store records for key, stamped with the current time.

        Returns:
            The entry now held for key
        """
        entry = CacheEntry(
            fetched_at=format_timestamp(self._time.now()),
            records=MappingProxyType(dict(records)),
        )
        with self._lock:
            self._entries[key] = entry
        logger.debug("Cached %d pull requests for %s at %s", len(records), key, entry.fetched_at)
        return entry
