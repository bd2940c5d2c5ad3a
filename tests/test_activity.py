"""
Tests for year-bucket classification of repository activity.
"""

import pytest
from pydantic import ValidationError

from ghdist.processing.activity import (
    BEFORE_WINDOW,
    ActivityRecord,
    YearWindow,
    classify_activity,
    order_activity,
)
from ghdist.processing.distribution import OTHERS_KEY, RankedEntry

from conftest import make_repo

WINDOW = YearWindow(min_year=2017, max_year=2021)


def record(created: int, updated: int) -> ActivityRecord:
    return ActivityRecord(created_year=created, updated_year=updated)


class TestYearWindow:
    """Test window construction and membership."""

    def test_ending_at(self):
        assert YearWindow.ending_at(2021) == WINDOW

    def test_ending_at_custom_span(self):
        window = YearWindow.ending_at(2026, span=3)
        assert window.years() == [2026, 2025, 2024]

    def test_years_descending(self):
        assert WINDOW.years() == [2021, 2020, 2019, 2018, 2017]

    def test_contains(self):
        assert 2017 in WINDOW
        assert 2021 in WINDOW
        assert 2016 not in WINDOW
        assert 2022 not in WINDOW

    def test_reversed_bounds_rejected(self):
        with pytest.raises(ValidationError):
            YearWindow(min_year=2021, max_year=2017)

    def test_zero_span_rejected(self):
        with pytest.raises(ValueError):
            YearWindow.ending_at(2021, span=0)


class TestClassifyActivity:
    """Test that each record lands in exactly one bucket."""

    def test_full_key_set_on_empty_input(self):
        counts = classify_activity([], WINDOW)
        assert counts == {2021: 0, 2020: 0, 2019: 0, 2018: 0, 2017: 0, BEFORE_WINDOW: 0}

    def test_created_in_window(self):
        counts = classify_activity([record(2019, 2019)], WINDOW)
        assert counts[2019] == 1
        assert counts[BEFORE_WINDOW] == 0

    def test_old_record_only_counts_before_window(self):
        counts = classify_activity([record(2015, 2015)], WINDOW)
        assert counts[BEFORE_WINDOW] == 1
        assert all(counts[year] == 0 for year in WINDOW.years())

    def test_created_before_updated_inside(self):
        """Falls back to the update year and is not double counted."""
        counts = classify_activity([record(2014, 2020)], WINDOW)
        assert counts[2020] == 1
        assert counts[BEFORE_WINDOW] == 0

    def test_created_wins_over_updated(self):
        counts = classify_activity([record(2018, 2021)], WINDOW)
        assert counts[2018] == 1
        assert counts[2021] == 0

    def test_after_window_goes_to_catch_all(self):
        counts = classify_activity([record(2023, 2024)], WINDOW)
        assert counts[BEFORE_WINDOW] == 1

    def test_one_bucket_per_record(self):
        records = [record(2019, 2019), record(2014, 2020), record(2010, 2012), record(2017, 2016)]
        counts = classify_activity(records, WINDOW)
        assert sum(counts.values()) == len(records)

    def test_from_repository(self):
        assert ActivityRecord.from_repository(make_repo("r", 2016, 2020)) == record(2016, 2020)


class TestOrderActivity:
    """Test ordering of activity percentages."""

    def test_years_then_others(self):
        percents = {2021: 10.0, 2020: 20.0, 2019: 30.0, 2018: 0.0, 2017: 0.0, BEFORE_WINDOW: 40.0}
        ordered = order_activity(percents, WINDOW)
        assert [e.key for e in ordered] == [2021, 2020, 2019, 2018, 2017, OTHERS_KEY]
        assert ordered[-1] == RankedEntry(key=OTHERS_KEY, percentage=40.0)

    def test_missing_keys_are_zero(self):
        ordered = order_activity({}, WINDOW)
        assert len(ordered) == 6
        assert all(e.percentage == 0.0 for e in ordered)
