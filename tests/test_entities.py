"""Tests for domain entities."""

import pytest

from adtrack.domain.entities import (
    AggregatedStats,
    DailyEntry,
    DateFilterState,
    DateRangeOption,
    EntrySnapshot,
    Platform,
    Project,
)


class TestDailyEntry:
    """Tests for DailyEntry entity."""

    def test_entry_immutability(self):
        """Test that DailyEntry entities are immutable."""
        entry = DailyEntry(
            id="abc",
            date="2024-01-01",
            project=Project.AZZA,
            platform=Platform.META,
            spend=100.0,
            purchases=10,
        )
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            entry.spend = 5.0

    def test_to_dict_uses_stable_identifiers(self):
        entry = DailyEntry(
            id="abc",
            date="2024-01-01",
            project=Project.SABORIO,
            platform=Platform.GOOGLE,
            spend=12.5,
            purchases=3,
        )
        assert entry.to_dict() == {
            "id": "abc",
            "date": "2024-01-01",
            "project": "saborio",
            "platform": "google",
            "spend": 12.5,
            "purchases": 3,
        }

    def test_entry_equality(self):
        kwargs = dict(
            date="2024-01-01",
            project=Project.AZZA,
            platform=Platform.META,
            spend=1.0,
            purchases=1,
        )
        assert DailyEntry(id="a", **kwargs) == DailyEntry(id="a", **kwargs)
        assert DailyEntry(id="a", **kwargs) != DailyEntry(id="b", **kwargs)


class TestDateFilterState:
    def test_defaults_to_today_without_custom_dates(self):
        state = DateFilterState()
        assert state.option == DateRangeOption.TODAY
        assert state.custom_start_date is None
        assert state.custom_end_date is None


class TestAggregatedStats:
    def test_empty(self):
        stats = AggregatedStats.empty()
        assert stats.total_spend == 0
        assert stats.total_purchases == 0
        assert stats.cpr == 0
        assert stats.best_platform is None
        assert stats.highest_cost_platform is None


class TestEntrySnapshot:
    def test_len_counts_entries(self, make_entry):
        snapshot = EntrySnapshot(version=3, entries=(make_entry(), make_entry()))
        assert len(snapshot) == 2
        assert snapshot.version == 3


def test_platform_declaration_order_is_canonical():
    assert list(Platform) == [
        Platform.META,
        Platform.SNAPCHAT,
        Platform.TIKTOK,
        Platform.GOOGLE,
    ]
