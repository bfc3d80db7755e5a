"""Normalization of `gh pr list` JSON output into PullRequestRecord objects."""

import json
from typing import Any, cast

from prstatus.core.errors import FetchError
from prstatus.core.types import (
    CHECK_CONCLUSIONS,
    REVIEW_DECISIONS,
    REVIEW_STATES,
    Check,
    CheckConclusion,
    PullRequestRecord,
    Review,
    ReviewDecision,
    ReviewState,
)

# Legacy commit statuses report `state` instead of `conclusion`
_STATUS_CONTEXT_STATES: dict[str, str] = {
    "SUCCESS": "SUCCESS",
    "FAILURE": "FAILURE",
    "ERROR": "FAILURE",
    "PENDING": "PENDING",
    "EXPECTED": "PENDING",
}


def parse_pr_status_list(json_str: str, *, repository: str) -> dict[int, PullRequestRecord]:
    """Parse gh pr list JSON output into records keyed by PR number.

    Args:
        json_str: JSON array printed by gh pr list --json ...
        repository: Repository the output belongs to, used in error messages

    Returns:
        Mapping of PR number to PullRequestRecord (last one wins on duplicates)

    Raises:
        FetchError: If the output is not valid JSON or not shaped like a PR list
    """
    try:
        prs_data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise FetchError(repository, f"invalid JSON from gh: {e}") from e

    if not isinstance(prs_data, list):
        raise FetchError(repository, "expected a JSON array of pull requests")

    records: dict[int, PullRequestRecord] = {}
    for pr in prs_data:
        record = _parse_pr(pr, repository=repository)
        records[record.number] = record
    return records


def _parse_pr(pr: Any, *, repository: str) -> PullRequestRecord:
    if not isinstance(pr, dict):
        raise FetchError(repository, "expected each pull request to be a JSON object")

    number = pr.get("number")
    # bool is an int subclass; reject it explicitly
    if not isinstance(number, int) or isinstance(number, bool):
        raise FetchError(repository, f"pull request without a valid number: {number!r}")

    title = pr.get("title")
    if title is not None and not isinstance(title, str):
        raise FetchError(repository, f"pull request #{number} has a non-string title")

    reviews = _list_field(pr, "latestReviews", number=number, repository=repository)
    checks = _list_field(pr, "statusCheckRollup", number=number, repository=repository)
    return PullRequestRecord(
        number=number,
        title=title or "",
        review_decision=normalize_review_decision(pr.get("reviewDecision")),
        reviews=tuple(_parse_review(r, number=number, repository=repository) for r in reviews),
        checks=tuple(_parse_check(c, number=number, repository=repository) for c in checks),
    )


def _list_field(pr: dict[str, Any], field: str, *, number: int, repository: str) -> list[Any]:
    value = pr.get(field)
    if value is None:
        return []
    if not isinstance(value, list):
        raise FetchError(repository, f"pull request #{number}: expected {field} to be an array")
    return value


def _parse_review(review: Any, *, number: int, repository: str) -> Review:
    if not isinstance(review, dict):
        raise FetchError(repository, f"pull request #{number}: review is not a JSON object")
    author = review.get("author")
    if author is None:
        author = {}
    if not isinstance(author, dict):
        raise FetchError(repository, f"pull request #{number}: review author is not a JSON object")
    login = author.get("login")
    return Review(
        reviewer_login=login if isinstance(login, str) else "",
        state=normalize_review_state(review.get("state")),
    )


def _parse_check(check: Any, *, number: int, repository: str) -> Check:
    if not isinstance(check, dict):
        raise FetchError(repository, f"pull request #{number}: check is not a JSON object")
    conclusion = check.get("conclusion")
    state = check.get("state")
    if not conclusion and isinstance(state, str):
        conclusion = _STATUS_CONTEXT_STATES.get(state)
    return Check(conclusion=normalize_check_conclusion(conclusion))


def normalize_review_decision(value: object) -> ReviewDecision:
    """Map GitHub's reviewDecision (possibly null or empty) onto ReviewDecision."""
    if isinstance(value, str) and value in REVIEW_DECISIONS:
        return cast(ReviewDecision, value)
    return "NONE"


def normalize_review_state(value: object) -> ReviewState:
    if isinstance(value, str) and value in REVIEW_STATES:
        return cast(ReviewState, value)
    return "UNKNOWN"


def normalize_check_conclusion(value: object) -> CheckConclusion:
    """Known conclusions pass through; null (in progress) and anything else become PENDING."""
    if isinstance(value, str) and value in CHECK_CONCLUSIONS:
        return cast(CheckConclusion, value)
    return "PENDING"
