"""Pure functions that turn a pull request record into a display string.

Nothing here performs I/O or touches the cache. The same record and
ignore list always produce the same output.
"""

from collections.abc import Collection, Mapping, Sequence

from prstatus.core.types import (
    Check,
    CheckSeverity,
    CheckSummary,
    Overlay,
    PullRequestRecord,
    Review,
    ReviewDecision,
    ReviewState,
)

DECISION_ICONS: dict[str, str] = {
    "APPROVED": "✅",
    "CHANGES_REQUESTED": "❌",
    "REVIEW_REQUIRED": "👀",
}

REVIEW_STATE_ICONS: dict[str, str] = {
    "APPROVED": "✅",
    "CHANGES_REQUESTED": "❌",
    "COMMENTED": "💬",
    "DISMISSED": "🚫",
    "PENDING": "⏳",
}

UNKNOWN_REVIEW_STATE_ICON = "?"

PASSING_CONCLUSIONS = frozenset({"SUCCESS", "NEUTRAL", "SKIPPED"})
FAILING_CONCLUSIONS = frozenset({"FAILURE", "CANCELLED", "TIMED_OUT"})


def format_decision(decision: ReviewDecision) -> str | None:
    """Icon for the aggregate review decision, or None when there is no decision."""
    return DECISION_ICONS.get(decision)


def format_review_state(state: ReviewState) -> str:
    """Icon for one reviewer's state.

    Unlike decisions, unknown states are never dropped: they show as "?".
    """
    return REVIEW_STATE_ICONS.get(state, UNKNOWN_REVIEW_STATE_ICON)


def format_reviewers(reviews: Sequence[Review], ignored_logins: Collection[str]) -> str | None:
    """Space-separated "login:icon" list in reported order.

    Args:
        reviews: Reviews as reported by GitHub (duplicates are kept)
        ignored_logins: Logins to leave out, matched exactly

    Returns:
        The reviewer list, or None if nothing remains after filtering
    """
    parts = [
        f"{review.reviewer_login}:{format_review_state(review.state)}"
        for review in reviews
        if review.reviewer_login not in ignored_logins
    ]
    if not parts:
        return None
    return " ".join(parts)


def format_checks(checks: Sequence[Check]) -> CheckSummary | None:
    """Bucket checks into pass/fail/pending counts.

    Severity is "error" if anything failed, otherwise "warning" if anything
    is still pending, otherwise "success".

    Returns:
        CheckSummary, or None if the PR has no checks
    """
    if not checks:
        return None

    passed = sum(1 for check in checks if check.conclusion in PASSING_CONCLUSIONS)
    failed = sum(1 for check in checks if check.conclusion in FAILING_CONCLUSIONS)
    pending = len(checks) - passed - failed

    severity: CheckSeverity
    if failed > 0:
        severity = "error"
    elif pending > 0:
        severity = "warning"
    else:
        severity = "success"

    return CheckSummary(passed=passed, failed=failed, pending=pending, severity=severity)


def format_status(record: PullRequestRecord, ignored_logins: Collection[str]) -> str | None:
    """Combine decision icon and reviewer list, e.g. "❌(alice:❌)"."""
    decision = format_decision(record.review_decision)
    reviewers = format_reviewers(record.reviews, ignored_logins)

    if decision is not None and reviewers is not None:
        return f"{decision}({reviewers})"
    if decision is not None:
        return decision
    return reviewers


def format_line(record: PullRequestRecord, ignored_logins: Collection[str]) -> str | None:
    """Full annotation for a row, with a leading space for display adjacency.

    Example:
        " ❌(alice:❌) CI:1/1/0"

    Returns:
        The annotation, or None when there is neither review status nor CI data
    """
    overlay = format_overlay(record, ignored_logins)
    if overlay is None:
        return None
    return overlay.text


def format_overlay(record: PullRequestRecord, ignored_logins: Collection[str]) -> Overlay | None:
    """Annotation text together with the CI severity hosts use for styling."""
    status = format_status(record, ignored_logins)
    checks = format_checks(record.checks)

    parts = [part for part in (status, checks.text if checks else None) if part is not None]
    if not parts:
        return None

    return Overlay(
        text=" " + " ".join(parts),
        ci_severity=checks.severity if checks else None,
    )


def build_overlays(
    records: Mapping[int, PullRequestRecord], ignored_logins: Collection[str]
) -> dict[int, Overlay]:
    """Annotate every record, omitting PRs that have nothing to show."""
    overlays: dict[int, Overlay] = {}
    for number, record in records.items():
        overlay = format_overlay(record, ignored_logins)
        if overlay is not None:
            overlays[number] = overlay
    return overlays
