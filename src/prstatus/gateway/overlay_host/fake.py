"""Fake implementation of OverlayHost for testing."""

from collections.abc import Mapping
from dataclasses import dataclass

from prstatus.core.types import Overlay, PullRequestRecord, RepositoryKey
from prstatus.gateway.overlay_host.abc import OverlayHost


@dataclass(frozen=True)
class RenderCall:
    repository: RepositoryKey
    records: dict[int, PullRequestRecord]
    overlays: dict[int, Overlay]


class FakeOverlayHost(OverlayHost):
    """Test implementation - remembers what would be on screen.

    `displayed` reflects the current on-screen overlays: replaced by each
    render, emptied by clear.
    """

    def __init__(self) -> None:
        self._render_calls: list[RenderCall] = []
        self._clear_count = 0
        self._displayed: dict[int, Overlay] = {}

    def render(
        self,
        repository: RepositoryKey,
        records: Mapping[int, PullRequestRecord],
        overlays: Mapping[int, Overlay],
    ) -> None:
        self._render_calls.append(
            RenderCall(repository=repository, records=dict(records), overlays=dict(overlays))
        )
        self._displayed = dict(overlays)

    def clear(self) -> None:
        self._clear_count += 1
        self._displayed = {}

    @property
    def render_calls(self) -> tuple[RenderCall, ...]:
        return tuple(self._render_calls)

    @property
    def clear_count(self) -> int:
        return self._clear_count

    @property
    def displayed(self) -> dict[int, Overlay]:
        return dict(self._displayed)
