"""A logical HTTP cache: remembers validators, stores no content."""

from __future__ import annotations

import threading
from enum import Enum

from .date import Date

__all__ = ["CacheType", "Cache"]

_HEADER_LIMIT = 255


class CacheType(Enum):
    """Kinds of validator kept per request, with their key prefixes."""

    ETAG = "ET_"
    LAST = "LM_"
    EXPIRES = "EX_"


def _key(ctype: CacheType, request: str | None) -> str | None:
    if not request:
        return None
    return ctype.value + request


class Cache:
    """Entity tags, modification dates and expiry dates keyed by request."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._entries: dict[str, Date] = {}
        self._lock = threading.Lock()

    def contains(self, ctype: CacheType, request: str | None) -> bool:
        if not self.enabled:
            return False
        key = _key(ctype, request)
        if key is None:
            return False
        with self._lock:
            return key in self._entries

    def is_cached(self, request: str | None) -> bool:
        """True while the request's expiry date lies in the future."""
        key = _key(CacheType.EXPIRES, request)
        if key is None:
            return False
        with self._lock:
            day = self._entries.get(key)
            if day is None:
                return False
            if not day.expired():
                return True
            del self._entries[key]
            return False

    def add(self, ctype: CacheType, request: str | None, value: str | None) -> None:
        """Record a validator; an existing expiry date is kept."""
        key = _key(ctype, request)
        if key is None:
            return
        with self._lock:
            if ctype is CacheType.ETAG:
                self._entries[key] = Date.from_etag(value)
            elif ctype is CacheType.EXPIRES:
                if key not in self._entries:
                    self._entries[key] = Date(value)
            else:
                self._entries[key] = Date(value)

    def get(self, ctype: CacheType, request: str | None) -> Date | None:
        key = _key(ctype, request)
        if key is None:
            return None
        with self._lock:
            return self._entries.get(key)

    def header(self, ctype: CacheType, request: str | None) -> str | None:
        """The conditional request line for a fresh entry, or None."""
        if not self.contains(ctype, request):
            return None
        expires = self.get(CacheType.EXPIRES, request)
        if expires is None or expires.expired():
            return None
        stored = self.get(ctype, request)
        if stored is None:
            return None
        if ctype is CacheType.ETAG:
            value = stored.etag
            if not value:
                return ""
            line = "If-None-Match: %s\r\n" % value
        else:
            value = stored.rfc850()
            if not value:
                return ""
            line = "If-Modified-Since: %s\r\n" % value
        return line[:_HEADER_LIMIT]