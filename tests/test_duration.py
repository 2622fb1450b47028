"""Tests for duration notation."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from dateslice import Duration, InvalidDurationComponent, parse_duration
from dateslice.duration import normalize_unit


def test_parse_all_units():
    """Test that every unit is parsed in significance order."""
    duration = parse_duration("2years:3months:1week:4days:5hours:6minutes:7seconds")

    assert duration == Duration(
        years=2, months=3, weeks=1, days=4, hours=5, minutes=6, seconds=7
    )


def test_parse_single_unit_defaults_others_to_zero():
    duration = parse_duration("15minutes")

    assert duration.minutes == 15
    assert duration.years == 0
    assert duration.seconds == 0


def test_parse_accepts_singular_and_mixed_case():
    assert parse_duration("1Year:2DAY") == Duration(years=1, days=2)


def test_parse_trims_whitespace_around_tokens():
    """Test that spaces around and inside tokens are accepted."""
    assert parse_duration(" 3 days : 2hours ") == Duration(days=3, hours=2)


def test_normalize_unit_strips_only_one_trailing_s():
    assert normalize_unit("year") == "years"
    assert normalize_unit("years") == "years"
    assert normalize_unit("dayss") == "days"
    assert normalize_unit("daysss") == "dayss"
    assert normalize_unit("HOUR") == "hours"


def test_parse_keeps_double_s_quirk():
    """Test that a doubled plural still resolves to the unit."""
    assert parse_duration("2yearss") == Duration(years=2)


def test_parse_rejects_out_of_order_units():
    with pytest.raises(InvalidDurationComponent, match="out of order"):
        parse_duration("3months:2years")

    with pytest.raises(InvalidDurationComponent, match="out of order"):
        parse_duration("1day:1year")


def test_parse_rejects_duplicate_units():
    with pytest.raises(InvalidDurationComponent, match="repeated"):
        parse_duration("1year:1year")


def test_parse_rejects_unknown_unit():
    with pytest.raises(InvalidDurationComponent, match="Unknown duration unit"):
        parse_duration("3fortnights")


def test_parse_rejects_malformed_tokens():
    """Test that missing numbers, missing units and signs are rejected."""
    for text in ("days", "3", "-3days", "3.5days", "1day::2hours", ":1day"):
        with pytest.raises(InvalidDurationComponent):
            parse_duration(text)


def test_parse_rejects_empty_text():
    with pytest.raises(InvalidDurationComponent, match="Empty duration"):
        parse_duration("")


def test_str_renders_canonical_form():
    duration = Duration(years=1, weeks=2, seconds=30)

    assert str(duration) == "1years:2weeks:30seconds"
    assert str(Duration()) == "0seconds"


def test_str_output_parses_back_to_same_duration():
    for text in ("1year:2months", "3weeks:4seconds", "0days", "10hour:5minute"):
        duration = parse_duration(text)
        assert parse_duration(str(duration)) == duration


def test_negative_fields_rejected():
    with pytest.raises(ValueError, match="must be >= 0"):
        Duration(days=-1)


def test_shift_adds_and_subtracts():
    moment = datetime(2020, 1, 1, tzinfo=timezone.utc)

    assert Duration(days=1).shift(moment) == datetime(2020, 1, 2, tzinfo=timezone.utc)
    assert Duration(days=1).shift(moment, -1) == datetime(
        2019, 12, 31, tzinfo=timezone.utc
    )


def test_shift_months_clamps_to_end_of_month():
    moment = datetime(2021, 1, 31, 12, 0, tzinfo=timezone.utc)

    shifted = Duration(months=1).shift(moment)

    assert shifted == datetime(2021, 2, 28, 12, 0, tzinfo=timezone.utc)


def test_shift_months_keeps_local_clock_across_dst():
    """Test that calendar units keep the local time of day."""
    paris = ZoneInfo("Europe/Paris")
    winter = datetime(2021, 3, 1, 9, 0, tzinfo=paris)

    shifted = Duration(months=1).shift(winter)

    assert shifted.hour == 9
    assert shifted.utcoffset() != winter.utcoffset()


def test_shift_days_adds_elapsed_time_across_dst():
    """Test that days are fixed 24-hour spans, not calendar days."""
    paris = ZoneInfo("Europe/Paris")
    before = datetime(2021, 3, 27, 12, 0, tzinfo=paris)

    shifted = Duration(days=1).shift(before)

    assert shifted.timestamp() - before.timestamp() == 86400
    assert (shifted.day, shifted.hour) == (28, 13)
    assert shifted.tzinfo is paris


def test_shift_out_of_range_raises():
    moment = datetime(9999, 12, 31, tzinfo=timezone.utc)

    with pytest.raises(InvalidDurationComponent, match="out of range"):
        Duration(days=1).shift(moment)

    with pytest.raises(InvalidDurationComponent, match="out of range"):
        Duration(years=9999).shift(moment, -1)
