"""Substitution of configuration variables into a line of text."""

from __future__ import annotations

import os
from collections.abc import Mapping

__all__ = ["evaluate"]

_OPENERS = "{("
_CLOSERS = "})"


def evaluate(
    variables: Mapping[str, str],
    buf: str,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Replace the first ``$NAME``, ``${NAME}`` or ``$(NAME)`` in ``buf``.

    The name is looked up in ``variables`` first and then in the environment;
    an unknown name is dropped from the result. A bare name ends at ``/``.
    """
    if environ is None:
        environ = os.environ

    dollar = buf.find("$")
    if dollar < 0:
        raise ValueError("no variable reference in: %r" % buf)

    pos = dollar + 1
    if pos < len(buf) and buf[pos] in _OPENERS:
        pos += 1

    start = pos
    while pos < len(buf) and buf[pos] not in "})/":
        pos += 1
    name = buf[start:pos]

    if pos < len(buf) and buf[pos] in _CLOSERS:
        pos += 1

    if name in variables:
        value = variables[name]
    else:
        value = environ.get(name, "")

    return buf[:dollar] + value + buf[pos:]