"""Tests for StatusCache validity and replacement semantics."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from prstatus.core.cache import StatusCache, format_timestamp
from prstatus.gateway.time.fake import FakeTime
from tests.test_utils.records import make_record

FETCH_TIME = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


def _cache_at(moment: datetime) -> tuple[StatusCache, FakeTime]:
    time = FakeTime(moment)
    return StatusCache(time), time


class TestFormatTimestamp:
    def test_fixed_width_utc_second_precision(self) -> None:
        moment = datetime(2024, 1, 5, 3, 4, 5, 999999, tzinfo=UTC)
        assert format_timestamp(moment) == "2024-01-05T03:04:05Z"

    def test_converts_to_utc(self) -> None:
        moment = datetime(2024, 1, 15, 12, 30, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2024-01-15T10:30:00Z"


class TestIsValid:
    def test_no_entry_is_invalid(self) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        assert cache.is_valid("owner/repo", "2000-01-01T00:00:00Z") is False

    @pytest.mark.parametrize(
        "updated_at",
        ["2024-01-15T10:30:00Z", "2024-01-15T10:29:59Z", "2023-12-31T23:59:59Z", ""],
    )
    def test_valid_when_updated_at_not_after_fetch(self, updated_at: str) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        cache.put("owner/repo", {})
        assert cache.is_valid("owner/repo", updated_at) is True

    @pytest.mark.parametrize("updated_at", ["2024-01-15T10:30:01Z", "2025-01-01T00:00:00Z"])
    def test_stale_when_updated_after_fetch(self, updated_at: str) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        cache.put("owner/repo", {})
        assert cache.is_valid("owner/repo", updated_at) is False

    def test_entries_are_per_repository(self) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        cache.put("owner/one", {})
        assert cache.is_valid("owner/two", "2000-01-01T00:00:00Z") is False


class TestGetAndPut:
    def test_get_missing_returns_none(self) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        assert cache.get("owner/repo") is None

    def test_put_stamps_current_time(self) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        record = make_record(1, decision="APPROVED")

        entry = cache.put("owner/repo", {1: record})

        assert entry.fetched_at == "2024-01-15T10:30:00Z"
        assert cache.get("owner/repo") == entry
        assert dict(entry.records) == {1: record}

    def test_put_replaces_whole_entry(self) -> None:
        cache, time = _cache_at(FETCH_TIME)
        cache.put("owner/repo", {1: make_record(1), 2: make_record(2)})
        time.advance(seconds=60)

        cache.put("owner/repo", {3: make_record(3)})

        entry = cache.get("owner/repo")
        assert entry is not None
        assert entry.fetched_at == "2024-01-15T10:31:00Z"
        assert list(entry.records) == [3]

    def test_get_has_no_side_effects(self) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        cache.put("owner/repo", {1: make_record(1)})
        first = cache.get("owner/repo")
        second = cache.get("owner/repo")
        assert first is second

    def test_stored_records_are_read_only(self) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        entry = cache.put("owner/repo", {1: make_record(1)})
        with pytest.raises(TypeError):
            entry.records[2] = make_record(2)  # type: ignore[index]

    def test_caller_mutation_does_not_leak_into_cache(self) -> None:
        cache, _ = _cache_at(FETCH_TIME)
        records = {1: make_record(1)}
        cache.put("owner/repo", records)

        records[2] = make_record(2)

        entry = cache.get("owner/repo")
        assert entry is not None
        assert list(entry.records) == [1]
