"""HTTP date parsing and formatting for cache validation and timestamps."""

from __future__ import annotations

import re
import time
from datetime import date, datetime, timedelta, timezone
from enum import Enum

__all__ = ["Date", "strtotime", "date_adjust"]

WDAY = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKDAY = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
MONTH = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DAYZONE = -60

# Zone name -> offset west of GMT, in minutes.
TIMEZONES = {
    "GMT": 0, "UTC": 0, "WET": 0, "BST": 0 + _DAYZONE,
    "WAT": 60, "AST": 240, "ADT": 240 + _DAYZONE,
    "EST": 300, "EDT": 300 + _DAYZONE, "CST": 360, "CDT": 360 + _DAYZONE,
    "MST": 420, "MDT": 420 + _DAYZONE, "PST": 480, "PDT": 480 + _DAYZONE,
    "YST": 540, "YDT": 540 + _DAYZONE, "HST": 600, "HDT": 600 + _DAYZONE,
    "CAT": 600, "AHST": 600, "NT": 660, "IDLW": 720,
    "CET": -60, "MET": -60, "MEWT": -60, "MEST": -60 + _DAYZONE,
    "CEST": -60 + _DAYZONE, "MESZ": -60 + _DAYZONE, "FWT": -60,
    "FST": -60 + _DAYZONE, "EET": -120, "WAST": -420, "WADT": -420 + _DAYZONE,
    "CCT": -480, "JST": -540, "EAST": -600, "EADT": -600 + _DAYZONE,
    "GST": -600, "NZT": -720, "NZST": -720, "NZDT": -720 + _DAYZONE,
    "IDLE": -720,
}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()
_INT_MAX = 2**31 - 1

_NAME = re.compile(r"[A-Za-z]{1,31}")
_CLOCK = re.compile(r"([0-9]{1,2}):([0-9]{1,2}):([0-9]{1,2})")
_DIGITS = re.compile(r"[0-9]+")


class _Expect(Enum):
    MDAY = 0
    YEAR = 1


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _lookup(name: str, table) -> int:
    lowered = name.lower()
    for index, entry in enumerate(table):
        if entry.lower() == lowered:
            return index
    return -1


def _check_day(name: str) -> int:
    return _lookup(name, WEEKDAY if len(name) > 3 else WDAY)


def _check_month(name: str) -> int:
    return _lookup(name, MONTH)


def _check_tz(name: str) -> int:
    lowered = name.lower()
    for zone, offset in TIMEZONES.items():
        if zone.lower() == lowered:
            return offset * 60
    return -1


def _timegm(tm_year: int, mon: int, mday: int, hour: int, minute: int, sec: int) -> int:
    """Seconds since the epoch for broken-down UTC fields, normalising overflow."""
    year = tm_year + 1900 + mon // 12
    month = mon % 12
    try:
        first = date(year, month + 1, 1).toordinal()
    except ValueError:
        return -1
    days = first - _EPOCH_ORDINAL + mday - 1
    return days * 86400 + hour * 3600 + minute * 60 + sec


def strtotime(text: str | None) -> int:
    """Parse an HTTP-style date into seconds since the epoch.

    Returns 0 for an empty string and -1 for a string that cannot be parsed.
    """
    if not text:
        return 0

    sec = minute = hour = mday = mon = year = wday = tzoff = -1
    expect = _Expect.MDAY
    pos = 0
    part = 0
    size = len(text)

    while pos < size and part < 6:
        found = False
        while pos < size and not _is_alnum(text[pos]):
            pos += 1
        if pos >= size:
            part += 1
            continue

        ch = text[pos]
        if ch.isascii() and ch.isalpha():
            name = _NAME.match(text, pos).group(0)
            if wday == -1:
                wday = _check_day(name)
                found = wday != -1
            if not found and mon == -1:
                mon = _check_month(name)
                found = mon != -1
            if not found and tzoff == -1:
                tzoff = _check_tz(name)
                found = tzoff != -1
            if not found:
                return -1
            pos += len(name)
        elif ch.isascii() and ch.isdigit():
            clock = _CLOCK.match(text, pos) if sec == -1 else None
            if clock is not None:
                hour, minute, sec = (int(group) for group in clock.groups())
                pos = min(pos + 8, size)
            else:
                digits = _DIGITS.match(text, pos).group(0)
                val = int(digits)
                width = len(digits)
                if (
                    tzoff == -1
                    and width == 4
                    and val < 1300
                    and pos > 0
                    and text[pos - 1] in "+-"
                ):
                    found = True
                    tzoff = (val // 100 * 60 + val % 100) * 60
                    if text[pos - 1] == "+":
                        tzoff = -tzoff
                if width == 8 and year == -1 and mon == -1 and mday == -1:
                    found = True
                    year = val // 10000
                    mon = (val % 10000) // 100 - 1
                    mday = val % 100
                if not found and expect is _Expect.MDAY and mday == -1:
                    if 0 < val < 32:
                        mday = val
                        found = True
                    expect = _Expect.YEAR
                if not found and expect is _Expect.YEAR and year == -1:
                    year = val
                    found = True
                    if year > 1970:
                        year -= 1900
                    if mday == -1:
                        expect = _Expect.MDAY
                if not found:
                    return -1
                pos += width
        part += 1

    if sec == -1:
        sec = minute = hour = 0

    if mday == -1 or mon == -1 or year == -1:
        return -1

    if year > 2037:
        return 0x7FFFFFFF

    result = _timegm(year, mon, mday, hour, minute, sec)
    if result == -1:
        return -1
    return result + (tzoff if tzoff != -1 else 0)


def date_adjust(tvalue: int, secs: int) -> int:
    """Move a timestamp by ``secs`` seconds in local time; -1 on failure."""
    if tvalue == -1:
        return -1
    local = time.localtime(tvalue)
    if secs > _INT_MAX - local.tm_sec:
        return -1
    fields = list(local)
    fields[5] += secs
    return int(time.mktime(tuple(fields)))


def _format_iso(moment: datetime) -> str:
    tm_wday = (moment.weekday() + 1) % 7
    return "{}, {:04d}-{:02d}-{:02d} {:02d}:{:02d}:{:02d}".format(
        WEEKDAY[tm_wday][:3],
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
    )


class Date:
    """A point in time taken from a header, or an entity tag."""

    def __init__(self, text: str | None = None, etag: str | None = None):
        self._etag = etag
        if etag is not None:
            self.moment: datetime | None = None
            return
        seconds = int(time.time()) if text is None else strtotime(text)
        self.moment = _EPOCH + timedelta(seconds=seconds)

    @classmethod
    def from_etag(cls, etag: str | None) -> "Date":
        """Build an entity-tag holder; it carries no time."""
        obj = cls.__new__(cls)
        obj._etag = etag
        obj.moment = None
        return obj

    @property
    def etag(self) -> str:
        return "" if self._etag is None else self._etag

    @property
    def timestamp(self) -> int | None:
        if self.moment is None:
            return None
        return int((self.moment - _EPOCH).total_seconds())

    def rfc850(self) -> str:
        """Render the header-style form; empty when there is no usable time."""
        moment = self.moment
        if moment is None or moment.year == 1900:
            return ""
        tm_wday = (moment.weekday() + 1) % 7
        return "{}, {} {} {} {}:{}:{} GMT".format(
            WDAY[tm_wday],
            moment.day,
            MONTH[moment.month - 1],
            moment.year - 1900,
            moment.hour,
            moment.minute,
            moment.second,
        )

    def expired(self) -> bool:
        """True when the time lies in the past, or there is no time at all."""
        stamp = self.timestamp
        if stamp is None:
            return True
        return stamp - int(time.time()) < 0

    def to_string(self) -> str:
        if self._etag is not None:
            return self._etag
        if self.moment is None:
            return ""
        return _format_iso(self.moment) + " "

    def stamp(self) -> str:
        """Bracketed timestamp used as a prefix on verbose output lines."""
        if self.moment is None:
            return ""
        return "[" + _format_iso(self.moment) + "] "

    def __str__(self) -> str:
        return self.to_string()