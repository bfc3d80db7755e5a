"""Production implementation of RepositoryContext using `gh repo view`."""

import json
import logging
import shutil
import subprocess
from pathlib import Path

from prstatus.core.errors import NoActiveRepositoryError, ToolNotFoundError
from prstatus.core.types import ActiveRepository
from prstatus.gateway.repo_context.abc import RepositoryContext

logger = logging.getLogger(__name__)


class RealRepositoryContext(RepositoryContext):
    """Resolves the repository with gh, using pushedAt as its update time.

    gh prints pushedAt as "2024-01-15T10:30:00Z", the same fixed-width form
    the cache stamps entries with.
    """

    def __init__(self, cwd: Path, *, gh_binary: str = "gh") -> None:
        self._cwd = cwd
        self._gh_binary = gh_binary

    def get_active_repository(self, repository: str | None) -> ActiveRepository:
        gh_path = shutil.which(self._gh_binary)
        if gh_path is None:
            raise ToolNotFoundError(self._gh_binary)

        cmd = [gh_path, "repo", "view"]
        if repository is not None:
            cmd.append(repository)
        cmd.extend(["--json", "nameWithOwner,pushedAt"])

        logger.debug("Running: %s", " ".join(cmd))
        result = subprocess.run(cmd, cwd=self._cwd, capture_output=True, text=True, check=False)
        if result.returncode != 0:
            detail = result.stderr.strip() or f"gh exited with status {result.returncode}"
            raise NoActiveRepositoryError(detail)

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise NoActiveRepositoryError(f"invalid JSON from gh: {e}") from e

        # LBYL: Validate required keys before accessing
        if not isinstance(data, dict):
            raise NoActiveRepositoryError("gh did not report a repository name")
        name = data.get("nameWithOwner")
        if not isinstance(name, str) or not name:
            raise NoActiveRepositoryError("gh did not report a repository name")
        pushed_at = data.get("pushedAt")
        if pushed_at is not None and not isinstance(pushed_at, str):
            raise NoActiveRepositoryError(f"gh reported an invalid pushedAt for {name}")

        # Never-pushed repositories have no pushedAt; any fetched entry is then current
        return ActiveRepository(key=name, updated_at=pushed_at or "")
