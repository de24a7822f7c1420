"""Login credentials for HTTP, proxy and FTP authentication."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Scheme", "Credentials", "parse_credentials"]


class Scheme(Enum):
    """Protocols a set of credentials applies to."""

    UNSUPPORTED = 0
    HTTP = 1
    HTTPS = 2
    FTP = 3
    PROXY = 4


@dataclass
class Credentials:
    scheme: Scheme
    username: str
    password: str
    realm: str


def parse_credentials(scheme: Scheme, text: str) -> Credentials:
    """Read ``username:password[:realm]``; the realm defaults to ``any``."""
    username, _, rest = text.partition(":")
    password, colon, realm = rest.partition(":")
    return Credentials(
        scheme=scheme,
        username=username,
        password=password,
        realm=realm if colon else "any",
    )