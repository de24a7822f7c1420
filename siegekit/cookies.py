"""A thread-aware jar of HTTP cookies, persisted between runs."""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass
from pathlib import Path

from .cookie import NONE, MAX_COOKIE_SIZE, Cookie, parse_cookie

__all__ = ["CookieJar", "MAX_COOKIES_SIZE"]

MAX_COOKIES_SIZE = 81920

_MAX_LINE = 4095

_FILE_HEADER = (
    "#\n"
    "# Siege cookies file. You may edit this file to add cookies\n"
    "# manually but comments and formatting will be removed.    \n"
    "# All cookies that expire in the future will be preserved. \n"
    "# ---------------------------------------------------------\n"
)


@dataclass
class _Entry:
    owner: int
    cookie: Cookie


def _default_path() -> Path:
    home = os.environ.get("HOME")
    base = Path(home) if home else Path.home()
    return base / ".siege" / "cookies.txt"


def _bare_domain(cookie: Cookie) -> str:
    domain = cookie.domain if cookie.domain is not None else NONE
    return domain[1:] if domain.startswith(".") else domain


def _domain_matches(host: str, domain: str) -> bool:
    host_l = host.lower()
    domain_l = domain.lower()
    if host_l == domain_l:
        return True
    return len(domain_l) < len(host_l) and host_l.endswith(domain_l)


def _resolve(owner: int | None) -> int:
    return threading.get_ident() if owner is None else owner


class CookieJar:
    """Cookies kept per owner (by default the calling thread)."""

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = Path(path) if path is not None else _default_path()
        self._entries: list[_Entry] = []
        self._lock = threading.RLock()

    def add(self, text: str, host: str, owner: int | None = None) -> bool:
        """Store the cookie from a Set-Cookie value; replaces one of the same name."""
        owner = _resolve(owner)
        cookie = parse_cookie(text, host)
        if cookie.name is None or cookie.value is None:
            return False
        with self._lock:
            for entry in self._entries:
                if (
                    entry.owner == owner
                    and _domain_matches(host, _bare_domain(entry.cookie))
                    and (entry.cookie.name or NONE).lower() == cookie.name.lower()
                ):
                    entry.cookie.reset_value(cookie.value)
                    return True
            self._entries.append(_Entry(owner, cookie))
        return True

    def delete(self, name: str, owner: int | None = None) -> bool:
        """Remove the owner's first cookie called ``name``."""
        owner = _resolve(owner)
        with self._lock:
            for entry in self._entries:
                if entry.owner == owner and (entry.cookie.name or NONE).lower() == name.lower():
                    self._entries.remove(entry)
                    return True
        return False

    def delete_all(self, owner: int | None = None) -> bool:
        """Remove every cookie belonging to the owner."""
        owner = _resolve(owner)
        with self._lock:
            self._entries = [entry for entry in self._entries if entry.owner != owner]
        return True

    def header(self, host: str, owner: int | None = None) -> str:
        """The ``Cookie:`` request line for ``host``, or an empty string."""
        owner = _resolve(owner)
        now = time.time()
        parts: list[str] = []
        with self._lock:
            stale: list[_Entry] = []
            for entry in self._entries:
                if entry.owner != owner:
                    continue
                if not _domain_matches(host, _bare_domain(entry.cookie)):
                    continue
                cookie = entry.cookie
                if cookie.expires <= now and not cookie.session:
                    stale.append(entry)
                    continue
                parts.append("%s=%s" % (cookie.name or NONE, cookie.value or NONE))
            for entry in stale:
                self._entries.remove(entry)
        text = ";".join(parts)[: MAX_COOKIES_SIZE - 10]
        if not text:
            return ""
        return "Cookie: " + text[:MAX_COOKIE_SIZE] + "\r\n"

    def listing(self) -> str:
        """A human-readable dump of every cookie in the jar."""
        with self._lock:
            return "".join(
                "%d: NAME: %s\n   VALUE: %s\n   Expires: %s\n"
                % (
                    entry.owner,
                    entry.cookie.name or NONE,
                    entry.cookie.value or NONE,
                    entry.cookie.expires_string(),
                )
                for entry in self._entries
            )

    def load(self) -> dict[int, list[str]]:
        """Read the cookies file, grouping cookie strings by owner in file order.

        Owners are numbered from 0 in the order they first appear.
        """
        try:
            handle = open(self.path, "r", encoding="utf-8", errors="replace")
        except OSError:
            return {}
        owners: dict[str, int] = {}
        groups: dict[int, list[str]] = {}
        with handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if len(line) > _MAX_LINE:
                    continue
                line = line.split("#", 1)[0].rstrip()
                if len(line) <= 1:
                    continue
                pair = line.split("|", 1)
                if len(pair) < 2:
                    continue
                ident, value = pair[0].strip(), pair[1].strip()
                index = owners.setdefault(ident, len(owners))
                bucket = groups.setdefault(index, [])
                if value not in bucket:
                    bucket.append(value)
        return groups

    def save(self) -> bool:
        """Write every unexpired, non-session cookie to the cookies file."""
        now = time.time()
        with self._lock:
            lines = []
            for entry in self._entries:
                cookie = entry.cookie
                if cookie.session or cookie.expires < now:
                    continue
                text = cookie.to_string()
                if text is not None:
                    lines.append("%d | %s\n" % (entry.owner, text))
            try:
                with open(self.path, "w", encoding="utf-8") as handle:
                    handle.write(_FILE_HEADER)
                    handle.writelines(lines)
            except OSError:
                return False
        return True

    def close(self) -> None:
        """Save the jar and empty it."""
        with self._lock:
            self.save()
            self._entries.clear()

    def __enter__(self) -> "CookieJar":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)