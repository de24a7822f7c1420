"""A single HTTP cookie as read from a Set-Cookie header."""

from __future__ import annotations

import time
from dataclasses import dataclass

__all__ = ["Cookie", "parse_cookie", "parse_time", "MAX_COOKIE_SIZE"]

MAX_COOKIE_SIZE = 4096

NONE = "none"

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_SPACE = " \t\n\v\f\r"
_SEPARATORS = "=:"


def _or_none(text: str | None) -> str:
    return NONE if text is None else text


@dataclass
class Cookie:
    """Name, value and attributes of one cookie."""

    name: str | None = None
    value: str | None = None
    domain: str | None = None
    path: str | None = None
    expires: int = 0
    session: bool = True
    secure: bool = False

    def expires_string(self) -> str:
        """The expiry time rendered in local time, e.g. for listings."""
        return time.strftime("%a, %d %b %Y %H:%M:%S %z", time.localtime(self.expires))

    def to_string(self) -> str | None:
        """The line stored in the cookies file, or None if the cookie is incomplete."""
        if self.name is None or self.value is None or self.domain is None:
            return None
        path = self.path if self.path is not None else "/"
        text = "%s=%s; domain=%s; path=%s; expires=%d" % (
            self.name,
            self.value,
            self.domain,
            path,
            self.expires,
        )
        return text[: MAX_COOKIE_SIZE - 1]

    def reset_value(self, value: str) -> None:
        self.value = value

    def clone(self, other: "Cookie") -> "Cookie":
        """Take value, domain and path from ``other``; returns self."""
        self.value = _or_none(other.value)
        self.domain = _or_none(other.domain)
        self.path = _or_none(other.path)
        if self.expires > 0:
            self.expires = int(time.time())
        if self.session:
            self.session = other.session
        return self


def _pairs(text: str):
    """Yield trimmed ``key=value`` segments, stopping at one without ``=``."""
    for segment in text.split(";"):
        if "=" not in segment:
            return
        yield segment.strip()


def _split_pair(pair: str) -> tuple[str, str]:
    pos = 0
    size = len(pair)
    while pos < size and pair[pos] not in _SPACE and pair[pos] not in _SEPARATORS:
        pos += 1
    key = pair[:pos]
    pos += 1
    while pos < size and (pair[pos] in _SPACE or pair[pos] in _SEPARATORS):
        pos += 1
    return key, pair[pos:]


def parse_cookie(text: str | None, host: str, now: float | None = None) -> Cookie:
    """Build a cookie from the body of a Set-Cookie header sent by ``host``."""
    if text is None:
        raise ValueError("cookie: unable to parse header string")

    cookie = Cookie()
    for pair in _pairs(text.lstrip(" ")):
        key, val = _split_pair(pair)
        lowered = key.lower()
        if lowered.startswith("expires"):
            expires = parse_time(val, now)
            if expires != -1:
                cookie.session = False
                cookie.expires = expires
        elif lowered.startswith("path"):
            cookie.path = val
        elif lowered.startswith("domain"):
            cookie.domain = val
        elif lowered.startswith("secure"):
            cookie.secure = True
        else:
            cookie.name = key
            cookie.value = val

    if cookie.expires < 1000:
        cookie.session = True

    if cookie.domain is None:
        dot = host.find(".")
        cookie.domain = "." if dot < 0 else host[dot:]
    return cookie


def _strtol(text: str, pos: int) -> tuple[int, int]:
    """Read an integer like C strtol; returns the value and the end position."""
    size = len(text)
    start = pos
    while pos < size and text[pos] in _SPACE:
        pos += 1
    sign = 1
    if pos < size and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    digits = pos
    while pos < size and text[pos].isascii() and text[pos].isdigit():
        pos += 1
    if pos == digits:
        return 0, start
    return sign * int(text[digits:pos]), pos


def _mkmonth(text: str, pos: int) -> tuple[int, int]:
    size = len(text)
    while pos < size and not (text[pos].isascii() and text[pos].isalpha()):
        pos += 1
    if pos >= size:
        return 0, pos
    word = text[pos : pos + 3].lower()
    end = min(pos + 3, size)
    for index, name in enumerate(MONTHS):
        if name.lower() == word:
            return index, end
    return 0, end


def _utc_offset() -> int:
    """Hours between local time and UTC, judged one day after the epoch."""
    local = time.localtime(24 * 60 * 60)
    hours = local.tm_hour
    if local.tm_mday < 2:
        hours -= 24
    return hours


def parse_time(text: str | None, now: float | None = None) -> int:
    """Parse a cookie expiry into seconds since the epoch.

    Returns 0 for a missing, malformed or past date, the number itself for
    delta seconds, and -1 when the time cannot be represented.
    """
    if not text:
        return 0

    def step(p: int) -> int:
        return min(p + 1, len(s))

    comma = text.find(",")
    if comma >= 0:
        s = text[comma + 1 :].lstrip(" ")
        pos = 0
        if "-" in s:
            if len(s) < 18:
                return 0
            mday, pos = _strtol(s, pos)
            mon, pos = _mkmonth(s, step(pos))
            year, pos = _strtol(s, step(pos))
            hour, pos = _strtol(s, step(pos))
            minute, pos = _strtol(s, step(pos))
            sec, pos = _strtol(s, step(pos))
        else:
            if len(s) < 20:
                return 0
            mday, pos = _strtol(s, pos)
            mon, pos = _mkmonth(s, pos)
            year, pos = _strtol(s, pos)
            hour, pos = _strtol(s, pos)
            minute, pos = _strtol(s, step(pos))
            sec, pos = _strtol(s, step(pos))
    elif text[0].isascii() and text[0].isdigit():
        if "T" not in text:
            return _strtol(text, 0)[0]
        s = text.lstrip(" ")
        if len(s) < 21:
            return 0
        pos = 0
        year, pos = _strtol(s, pos)
        mon, pos = _strtol(s, step(pos))
        mday, pos = _strtol(s, step(pos))
        hour, pos = _strtol(s, step(pos))
        minute, pos = _strtol(s, step(pos))
        sec, pos = _strtol(s, step(pos))
    else:
        space = text.find(" ")
        s = "" if space < 0 else text[space:]
        if len(s) < 20:
            return 0
        pos = 0
        mon, pos = _mkmonth(s, pos)
        mday, pos = _strtol(s, pos)
        hour, pos = _strtol(s, pos)
        minute, pos = _strtol(s, step(pos))
        sec, pos = _strtol(s, step(pos))
        year, pos = _strtol(s, pos)

    if not (0 <= sec <= 59 and 0 <= minute <= 59 and 0 <= hour <= 23
            and 1 <= mday <= 31 and 0 <= mon <= 11):
        return 0

    try:
        result = int(time.mktime((year, mon + 1, mday, hour, minute, sec, 0, 0, -1)))
    except (OverflowError, ValueError):
        return -1
    if " GMT" not in text and " UTC" not in text:
        result += _utc_offset() * 3600
    if result == -1:
        return -1

    current = time.time() if now is None else now
    if result - current < 0:
        return 0
    return result