"""Reading URL lists and variable assignments from configuration files."""

from __future__ import annotations

import os
import re

from .evaluate import evaluate

__all__ = ["parse_line", "is_variable_line", "read_cfg_file", "read_cmd_line", "BUFSIZE"]

BUFSIZE = 40000

_SPACE = " \t\n\v\f\r"
_SEPARATORS = "=:"
_NAME = re.compile(r"[A-Za-z0-9_]*")


def parse_line(text: str) -> str:
    """Strip whitespace, comment lines and trailing comments from a line.

    A trailing ``#`` comment is only removed when the line holds a space and
    no ``/``, so that fragments in URLs survive.
    """
    text = text.strip()
    if text.startswith("#"):
        return ""
    if "/" not in text and " " in text:
        text = text.split("#", 1)[0]
    text = text.split("\n", 1)[0]
    return text.strip()


def is_variable_line(line: str) -> bool:
    """True when the line assigns a variable: ``NAME=value``.

    Everything left of the first ``=`` must be letters, digits or underscores.
    """
    pos = line.find("=")
    if pos < 0:
        return False
    return _NAME.fullmatch(line[:pos]) is not None


def _split_assignment(line: str) -> tuple[str, str]:
    pos = 0
    size = len(line)
    while pos < size and line[pos] not in _SPACE and line[pos] not in _SEPARATORS:
        pos += 1
    option = line[:pos]
    pos += 1
    while pos < size and (line[pos] in _SPACE or line[pos] in _SEPARATORS):
        pos += 1
    return option, line[pos:]


def _expand(variables: dict[str, str], line: str) -> str:
    while "$" in line:
        line = evaluate(variables, line)
    return line


def read_cfg_file(filename: str | os.PathLike) -> list[str]:
    """Read a URL file, expanding ``$VAR`` references as assignments are met.

    Comment lines, blank lines and over-long lines are skipped; assignment
    lines define variables and are not returned. Raises ``OSError`` when the
    file cannot be opened.
    """
    variables: dict[str, str] = {}
    lines: list[str] = []
    with open(filename, "r", encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            content = raw[:-1] if raw.endswith("\n") else raw
            if len(content) > BUFSIZE - 1:
                continue
            line = parse_line(content).rstrip("\r\n")
            if not line:
                continue
            if is_variable_line(line):
                option, value = _split_assignment(line)
                variables[option] = value
            else:
                lines.append(_expand(variables, line))
    return lines


def read_cmd_line(url: str) -> list[str]:
    """Turn a URL given on the command line into the list of lines to fetch.

    The URL is entered four times, as the command line run has always done;
    an empty or comment-only URL gives an empty list.
    """
    line = parse_line(url[: BUFSIZE - 1]).rstrip("\r\n")
    if not line:
        return []
    return [line] * 4