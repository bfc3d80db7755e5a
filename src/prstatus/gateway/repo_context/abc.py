"""Abstract base class for discovering the repository a host is showing."""

from abc import ABC, abstractmethod

from prstatus.core.types import ActiveRepository


class RepositoryContext(ABC):
    """Supplies the active repository and its last-updated timestamp.

    prstatus has no notion of "current repository" on its own; this
    collaborator decides it (from the working directory, or from an
    explicit override).
    """

    @abstractmethod
    def get_active_repository(self, repository: str | None) -> ActiveRepository:
        """Resolve the active repository.

        Args:
            repository: Explicit "owner/name" override, or None to use the
                repository of the working directory

        Returns:
            ActiveRepository with key and latest remote update timestamp

        Raises:
            ToolNotFoundError: If the external CLI is not installed
            NoActiveRepositoryError: If no repository can be resolved
        """
        ...
