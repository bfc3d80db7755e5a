"""Production implementation of PullRequestStatusFetcher using the gh CLI."""

import logging
import shutil
import subprocess

from prstatus.core.errors import FetchError, ToolNotFoundError
from prstatus.core.types import PullRequestRecord, RepositoryKey
from prstatus.gateway.fetcher.abc import PullRequestStatusFetcher
from prstatus.gateway.fetcher.parsing import parse_pr_status_list

logger = logging.getLogger(__name__)

# PRs beyond this many are not shown; bounds memory and gh latency
PR_LIST_LIMIT = 100

PR_JSON_FIELDS = "number,title,reviewDecision,latestReviews,statusCheckRollup"


class RealPullRequestStatusFetcher(PullRequestStatusFetcher):
    """Fetches open pull requests with `gh pr list`.

    gh handles authentication and host selection; this class only builds
    the command, runs it once and normalizes the output.
    """

    def __init__(self, *, gh_binary: str = "gh") -> None:
        self._gh_binary = gh_binary

    def fetch(self, key: RepositoryKey) -> dict[int, PullRequestRecord]:
        # LBYL: Check gh is installed before spawning anything
        gh_path = shutil.which(self._gh_binary)
        if gh_path is None:
            raise ToolNotFoundError(self._gh_binary)

        cmd = [
            gh_path,
            "pr",
            "list",
            "--repo",
            key,
            "--state",
            "open",
            "--limit",
            str(PR_LIST_LIMIT),
            "--json",
            PR_JSON_FIELDS,
        ]
        logger.debug("Running: %s", " ".join(cmd))
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)

        if result.returncode != 0:
            diagnostic = result.stderr.strip()
            if not diagnostic:
                diagnostic = f"{self._gh_binary} exited with status {result.returncode}"
            raise FetchError(key, diagnostic)

        records = parse_pr_status_list(result.stdout, repository=key)
        logger.debug("Fetched %d open pull requests for %s", len(records), key)
        return records
