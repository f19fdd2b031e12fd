"""Tests for the default cell stringifier."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from workbook_tables import EscapingStringifier, InvalidConfiguration, Stringifier
from workbook_tables.runtime.stringifier import SupportsStringify, format_duration


@pytest.fixture
def stringifier() -> Stringifier:
    return Stringifier()


class TestFormatting:

    def test_none_is_empty(self, stringifier):
        assert stringifier.stringify("x", int, None) == ""

    def test_midnight_datetime_is_a_date(self, stringifier):
        assert stringifier.stringify("when", datetime, datetime(2024, 3, 1)) == "2024-03-01"

    def test_datetime_with_time_is_sortable_timestamp(self, stringifier):
        value = datetime(2024, 3, 1, 13, 45, 7)
        assert stringifier.stringify("when", datetime, value) == "2024-03-01 13:45:07Z"

    def test_aware_datetime_is_shown_in_utc(self, stringifier):
        value = datetime(2024, 3, 1, 15, 0, tzinfo=timezone(timedelta(hours=2)))
        assert stringifier.stringify("when", datetime, value) == "2024-03-01 13:00:00Z"

    def test_plain_date(self, stringifier):
        assert stringifier.stringify("d", date, date(1999, 12, 31)) == "1999-12-31"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (timedelta(hours=1, minutes=2, seconds=3), "1:02:03"),
            (timedelta(days=1), "1:0:00:00"),
            (timedelta(seconds=1, microseconds=250000), "0:00:01.25"),
            (timedelta(minutes=-5), "-0:05:00"),
        ],
    )
    def test_durations(self, value, expected):
        assert format_duration(value) == expected

    def test_other_values_use_str(self, stringifier):
        assert stringifier.stringify("n", Decimal, Decimal("1.50")) == "1.50"
        assert stringifier.stringify("b", bool, True) == "True"


class TestTruncation:

    def test_long_text_is_cut_with_ellipsis(self):
        s = Stringifier(max_cell_length=10)
        out = s.stringify("t", str, "abcdefghijk")
        assert out == "abcdefg..."
        assert len(out) == 10

    def test_text_at_limit_is_unchanged(self):
        s = Stringifier(max_cell_length=10)
        assert s.stringify("t", str, "abcdefghij") == "abcdefghij"

    def test_minimum_length(self):
        assert Stringifier(max_cell_length=4).stringify("t", str, "hello") == "h..."

    def test_too_small_length_fails_at_construction(self):
        with pytest.raises(InvalidConfiguration):
            Stringifier(max_cell_length=3)

    def test_too_small_length_fails_on_assignment(self):
        s = Stringifier()
        with pytest.raises(InvalidConfiguration):
            s.max_cell_length = 2
        assert s.max_cell_length == 50


class TestExtensibility:

    def test_escaping_stringifier(self):
        s = EscapingStringifier()
        assert s.stringify("t", str, "<b>&</b>") == "&lt;b&gt;&amp;&lt;/b&gt;"

    def test_subclass_can_special_case_by_title(self):
        class Masking(Stringifier):
            def stringify(self, title, value_type, value):
                if title == "secret":
                    return "***"
                return super().stringify(title, value_type, value)

        s = Masking()
        assert s.stringify("secret", str, "hunter2") == "***"
        assert s.stringify("name", str, "ada") == "ada"
        assert isinstance(s, SupportsStringify)
