import calendar
import time

import pytest

from siegekit.date import TIMEZONES, Date, date_adjust, strtotime

GMT_TEXT = "Tue, 20-Mar-2007 14:31:38 GMT"
GMT_SECONDS = calendar.timegm((2007, 3, 20, 14, 31, 38, 0, 0, 0))


def test_empty_string_is_zero():
    assert strtotime("") == 0
    assert strtotime(None) == 0


def test_rfc850_style_with_dashes():
    assert strtotime(GMT_TEXT) == GMT_SECONDS


def test_rfc1123_style():
    assert strtotime("Tue, 20 Mar 2007 14:31:38 GMT") == GMT_SECONDS


def test_case_insensitive_names():
    assert strtotime("tue, 20 mar 2007 14:31:38 gmt") == GMT_SECONDS


def test_named_zone_offset():
    est = strtotime("Tue, 20 Mar 2007 14:31:38 EST")
    assert est - GMT_SECONDS == TIMEZONES["EST"] * 60


def test_numeric_zone_offset():
    plus_two = strtotime("Tue, 20 Mar 2007 14:31:38 +0200")
    minus_one = strtotime("Tue, 20 Mar 2007 14:31:38 -0100")
    assert GMT_SECONDS - plus_two == 2 * 3600
    assert minus_one - GMT_SECONDS == 3600


def test_ctime_format():
    expected = calendar.timegm((1993, 6, 9, 1, 29, 59, 0, 0, 0))
    assert strtotime("Wed Jun  9 01:29:59 1993 GMT") == expected


def test_two_digit_year_and_full_weekday():
    expected = calendar.timegm((1993, 6, 10, 1, 29, 59, 0, 0, 0))
    assert strtotime("Thursday, 10-Jun-93 01:29:59 GMT") == expected


def test_unknown_word_fails():
    assert strtotime("Foo, 20 Mar 2007") == -1


def test_missing_year_fails():
    assert strtotime("Tue, 20 Mar 14:31:38 GMT") == -1


def test_date_parsed_timestamp():
    assert Date(GMT_TEXT).timestamp == GMT_SECONDS


def test_now_date_is_close_to_clock():
    assert abs(Date().timestamp - int(time.time())) <= 2


def test_past_date_expired():
    assert Date(GMT_TEXT).expired() is True


def test_future_date_not_expired():
    assert Date("Tue, 20 Mar 2035 14:31:38 GMT").expired() is False


def test_etag_round_trip():
    tag = Date.from_etag('"abc123"')
    assert tag.etag == '"abc123"'
    assert tag.to_string() == '"abc123"'
    assert tag.rfc850() == ""


def test_etag_without_value():
    tag = Date.from_etag(None)
    assert tag.etag == ""
    assert tag.expired() is True


def test_etag_keyword_constructor():
    tag = Date(etag="W/1")
    assert tag.to_string() == "W/1"
    assert tag.timestamp is None


def test_rfc850_format():
    assert Date(GMT_TEXT).rfc850() == "Wed, 20 Mar 107 14:31:38 GMT"


def test_to_string_format():
    assert Date(GMT_TEXT).to_string() == "Tue, 2007-03-20 14:31:38 "


def test_stamp_wraps_to_string():
    when = Date(GMT_TEXT)
    assert when.stamp() == "[" + when.to_string().rstrip() + "] "


def test_date_adjust_moves_forward():
    base = calendar.timegm((2020, 6, 15, 12, 0, 0, 0, 0, 0))
    assert date_adjust(base, 60) == base + 60


def test_date_adjust_invalid_input():
    assert date_adjust(-1, 10) == -1


@pytest.mark.parametrize("secs", [2**31 - 1, 2**40])
def test_date_adjust_overflow(secs):
    assert date_adjust(calendar.timegm((2020, 6, 15, 12, 0, 1, 0, 0, 0)), secs) == -1