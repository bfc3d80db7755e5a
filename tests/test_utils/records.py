"""Builders for pull request records used across tests."""

from prstatus.core.types import (
    Check,
    CheckConclusion,
    PullRequestRecord,
    Review,
    ReviewDecision,
    ReviewState,
)


def make_record(
    number: int,
    *,
    title: str = "",
    decision: ReviewDecision = "NONE",
    reviews: list[tuple[str, ReviewState]] | None = None,
    checks: list[CheckConclusion] | None = None,
) -> PullRequestRecord:
    """Create a PullRequestRecord from compact review/check descriptions.

    Example:
        make_record(7, decision="APPROVED", reviews=[("alice", "APPROVED")], checks=["SUCCESS"])
    """
    return PullRequestRecord(
        number=number,
        title=title,
        review_decision=decision,
        reviews=tuple(Review(reviewer_login=login, state=state) for login, state in reviews or []),
        checks=tuple(Check(conclusion=conclusion) for conclusion in checks or []),
    )
