"""
Tests for the parsing of server supplied dates.

Dates that can't be parsed should give None - never an exception.
"""

import logging
from datetime import datetime, timezone

import pytest

from davproto.protocol.dates import DATE_FORMATS, parse_date

EXPECTED = datetime(2023, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


class TestParseDate:
    def test_none(self):
        assert parse_date(None) is None

    @pytest.mark.parametrize(
        "value",
        [
            "2023-01-15T10:30:00Z",
            "Mon, 15 Jan 2023 10:30:00 GMT",
            "2023-01-15T11:30:00+0100",
            "Sun Jan 15 10:30:00 GMT 2023",
            "Sunday, 15-Jan-23 10:30:00 GMT",
            "Sun January 15 10:30:00 2023",
        ],
    )
    def test_supported_formats(self, value):
        assert parse_date(value) == EXPECTED

    def test_fractional_seconds(self):
        parsed = parse_date("2023-01-15T10:30:00.250Z")
        assert parsed == EXPECTED.replace(microsecond=250000)

    def test_result_is_utc(self):
        parsed = parse_date("2023-01-15T11:30:00+01:00")
        assert parsed.tzinfo == timezone.utc
        assert parsed == EXPECTED

    def test_negative_offset(self):
        assert parse_date("2023-01-15T05:30:00-0500") == EXPECTED

    def test_named_zones(self):
        assert parse_date("Sun, 15 Jan 2023 05:30:00 EST") == EXPECTED
        assert parse_date("Sun, 15 Jan 2023 02:30:00 PST") == EXPECTED
        assert parse_date("Sun, 15 Jan 2023 10:30:00 UTC") == EXPECTED

    @pytest.mark.parametrize(
        "value",
        [
            "Sun, 15 Jan 2023 11:30:00 CET",
            "Sun, 15 Jan 2023 11:30:00 BST",
            "Sun, 15 Jan 2023 12:30:00 EET",
            "Sun, 15 Jan 2023 16:00:00 IST",
            "Sun, 15 Jan 2023 21:30:00 AEDT",
            "Sun Jan 15 11:30:00 CET 2023",
            "Sun Jan 15 19:30:00 JST 2023",
            "Sun Jan 15 19:30:00 KST 2023",
            "Sun Jan 15 20:00:00 ACST 2023",
            "Sunday, 15-Jan-23 12:30:00 CEST",
            "Sunday, 15-Jan-23 20:30:00 AEST",
            "Sunday, 15-Jan-23 10:30:00 WET",
        ],
    )
    def test_zones_outside_north_america(self, value):
        assert parse_date(value) == EXPECTED

    def test_gmt_offset_zone(self):
        assert parse_date("Sun, 15 Jan 2023 11:30:00 GMT+01:00") == EXPECTED

    def test_weekday_is_not_checked_against_date(self):
        ## 2023-01-15 was a sunday
        assert parse_date("Fri, 15 Jan 2023 10:30:00 GMT") == EXPECTED

    def test_names_are_case_insensitive(self):
        assert parse_date("SUN, 15 JAN 2023 10:30:00 GMT") == EXPECTED
        assert parse_date("sunday, 15-jan-23 10:30:00 gmt") == EXPECTED

    def test_full_and_short_names(self):
        assert parse_date("Sunday, 15 January 2023 10:30:00 GMT") == EXPECTED
        assert parse_date("Sun Jan 15 10:30:00 2023") == EXPECTED

    def test_asctime_padded_day(self):
        assert parse_date("Thu Jan  5 10:30:00 2023") == datetime(
            2023, 1, 5, 10, 30, 0, tzinfo=timezone.utc
        )

    def test_bytes_and_whitespace(self):
        assert parse_date(b"2023-01-15T10:30:00Z") == EXPECTED
        assert parse_date("  2023-01-15T10:30:00Z\n") == EXPECTED

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not-a-date",
            "2023-13-15T10:30:00Z",
            "2023-01-15T25:30:00Z",
            "2023-01-15",
            "2023-01-15T10:30:00",
            "Xyz, 15 Jan 2023 10:30:00 GMT",
            "Sun, 15 Foo 2023 10:30:00 GMT",
            "Sun, 15 Jan 2023 10:30:00 NOWHERE",
            "2023-01-15T10:30:00Z trailing",
        ],
    )
    def test_unparseable_gives_none(self, value):
        assert parse_date(value) is None

    def test_unparseable_is_silent(self, caplog):
        with caplog.at_level(logging.DEBUG):
            assert parse_date("not-a-date") is None
        assert not caplog.records

    def test_two_digit_year_window(self):
        this_year = datetime.now(timezone.utc).year
        yy = (this_year + 10) % 100
        parsed = parse_date("Sunday, 15-Jan-%02d 10:30:00 GMT" % yy)
        assert parsed.year == this_year + 10

        yy = (this_year - 50) % 100
        parsed = parse_date("Sunday, 15-Jan-%02d 10:30:00 GMT" % yy)
        assert parsed.year == this_year - 50

    def test_format_order(self):
        assert [x.pattern for x in DATE_FORMATS] == [
            "yyyy-MM-dd'T'HH:mm:ss'Z'",
            "EEE, dd MMM yyyy HH:mm:ss zzz",
            "yyyy-MM-dd'T'HH:mm:ss.sss'Z'",
            "yyyy-MM-dd'T'HH:mm:ssZ",
            "EEE MMM dd HH:mm:ss zzz yyyy",
            "EEEEEE, dd-MMM-yy HH:mm:ss zzz",
            "EEE MMMM d HH:mm:ss yyyy",
        ]

    def test_formats_are_immutable(self):
        with pytest.raises(AttributeError):
            DATE_FORMATS[0].pattern = "something else"

    def test_each_call_starts_from_first_format(self):
        assert parse_date("Sun Jan 15 10:30:00 2023") == EXPECTED
        assert parse_date("2023-01-15T10:30:00Z") == EXPECTED
