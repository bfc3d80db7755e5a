"""Fake implementation of RepositoryContext for testing."""

from dataclasses import replace

from prstatus.core.errors import NoActiveRepositoryError
from prstatus.core.types import ActiveRepository
from prstatus.gateway.repo_context.abc import RepositoryContext


class FakeRepositoryContext(RepositoryContext):
    """Test implementation - returns a configured repository.

    An explicit repository override is honored as-is and shares the
    configured updated_at. With active=None and no override, lookups raise
    NoActiveRepositoryError.
    """

    def __init__(self, *, active: ActiveRepository | None) -> None:
        self._active = active
        self._lookups: list[str | None] = []

    def get_active_repository(self, repository: str | None) -> ActiveRepository:
        self._lookups.append(repository)
        if self._active is None:
            if repository is None:
                raise NoActiveRepositoryError("not inside a GitHub repository")
            return ActiveRepository(key=repository, updated_at="")
        if repository is not None:
            return replace(self._active, key=repository)
        return self._active

    def set_updated_at(self, updated_at: str) -> None:
        """Simulate a push to the remote repository."""
        if self._active is None:
            raise NoActiveRepositoryError("no active repository configured")
        self._active = replace(self._active, updated_at=updated_at)

    @property
    def lookups(self) -> tuple[str | None, ...]:
        return tuple(self._lookups)
