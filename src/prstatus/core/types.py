"""Type definitions for pull request status overlays."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

# Opaque repository identifier, e.g. "owner/name"
RepositoryKey = str

ReviewDecision = Literal["APPROVED", "CHANGES_REQUESTED", "REVIEW_REQUIRED", "NONE"]

ReviewState = Literal[
    "APPROVED", "CHANGES_REQUESTED", "COMMENTED", "DISMISSED", "PENDING", "UNKNOWN"
]

# Anything GitHub reports outside this set is normalized to "PENDING"
CheckConclusion = Literal[
    "SUCCESS", "NEUTRAL", "SKIPPED", "FAILURE", "CANCELLED", "TIMED_OUT", "PENDING"
]

CheckSeverity = Literal["error", "warning", "success"]

REVIEW_DECISIONS: frozenset[str] = frozenset(
    {"APPROVED", "CHANGES_REQUESTED", "REVIEW_REQUIRED", "NONE"}
)
REVIEW_STATES: frozenset[str] = frozenset(
    {"APPROVED", "CHANGES_REQUESTED", "COMMENTED", "DISMISSED", "PENDING", "UNKNOWN"}
)
CHECK_CONCLUSIONS: frozenset[str] = frozenset(
    {"SUCCESS", "NEUTRAL", "SKIPPED", "FAILURE", "CANCELLED", "TIMED_OUT", "PENDING"}
)

# Fixed-width UTC timestamps compare lexicographically in chronological order
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class Review:
    """A single entry from a pull request's latest reviews."""

    reviewer_login: str
    state: ReviewState


@dataclass(frozen=True)
class Check:
    """A single entry from a pull request's status check rollup."""

    conclusion: CheckConclusion


@dataclass(frozen=True)
class PullRequestRecord:
    """Normalized remote state of one pull request.

    Every field has a "no data" default so formatting code only ever
    branches on enum variants and empty collections.

    Attributes:
        number: PR number, unique within its repository
        title: PR title, used by hosts to label rows (ignored by formatting)
        review_decision: Aggregate review verdict computed by GitHub
        reviews: Reviews in the order GitHub reported them (not deduplicated)
        checks: Check results in rollup order
    """

    number: int
    title: str = ""
    review_decision: ReviewDecision = "NONE"
    reviews: tuple[Review, ...] = ()
    checks: tuple[Check, ...] = ()


@dataclass(frozen=True)
class CacheEntry:
    """One repository's cached dataset.

    Replaced wholesale on every successful fetch, never mutated in place.
    """

    fetched_at: str  # TIMESTAMP_FORMAT
    records: Mapping[int, PullRequestRecord]


@dataclass(frozen=True)
class CheckSummary:
    """CI check counts bucketed by outcome, plus a display severity."""

    passed: int
    failed: int
    pending: int
    severity: CheckSeverity

    @property
    def text(self) -> str:
        return f"CI:{self.passed}/{self.failed}/{self.pending}"


@dataclass(frozen=True)
class Overlay:
    """Annotation rendered after a pull request row.

    ci_severity is None when the PR has no checks.
    """

    text: str
    ci_severity: CheckSeverity | None


@dataclass(frozen=True)
class ActiveRepository:
    """The repository a host is currently showing."""

    key: RepositoryKey
    updated_at: str  # TIMESTAMP_FORMAT, latest known remote-side update
