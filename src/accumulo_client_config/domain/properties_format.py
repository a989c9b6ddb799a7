"""Properties text format used by configuration files and serialized blobs.

Purpose
-------
Translate ``key=value`` properties text into ordered string mappings and back.
The same format is read from files on the search path and produced by
:meth:`ClientConfiguration.serialize`, so the writer must emit text the parser
reads back unchanged.

Contents
--------
* :func:`parse_properties` – text → ``dict[str, str]`` (last duplicate wins).
* :func:`format_properties` – mapping → text, one ``key = value`` line each.
* Helpers for logical-line assembly, key splitting, and escaping.

Syntax summary
--------------
* Blank lines and lines starting with ``#`` or ``!`` are ignored.
* A line ending in an odd number of backslashes continues on the next line.
* The key ends at the first unescaped ``=``, ``:`` or whitespace.
* Escapes: ``\\t``, ``\\n``, ``\\r``, ``\\f``, ``\\uXXXX``; any other escaped
  character stands for itself.
"""

from __future__ import annotations

import re
from typing import Iterator, Mapping

from .errors import InvalidFormat

_NATURAL_LINE = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_REVERSE_ESCAPES = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f", "\\": "\\\\"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_properties(text: str) -> dict[str, str]:
    """Parse *text* into an insertion-ordered mapping.

    Raises
    ------
    InvalidFormat
        On a malformed ``\\uXXXX`` escape or a continuation backslash on the
        final line.

    Examples
    --------
    >>> parse_properties("# comment\\ninstance.name = demo\\ninstance.zookeeper.host:zk1:2181\\n")
    {'instance.name': 'demo', 'instance.zookeeper.host': 'zk1:2181'}
    >>> parse_properties("a = one \\\\\\n    two")
    {'a': 'one two'}
    """

    result: dict[str, str] = {}
    for line_number, logical in _logical_lines(text):
        raw_key, raw_value = _split_entry(logical)
        key = _unescape(raw_key, line_number)
        result[key] = _unescape(raw_value, line_number)
    return result


def format_properties(entries: Mapping[str, str]) -> str:
    """Render *entries* as properties text that :func:`parse_properties` reads back.

    Examples
    --------
    >>> print(format_properties({"instance.name": "demo", "odd key": " padded"}), end="")
    instance.name = demo
    odd\\ key = \\ padded
    """

    lines = [f"{_escape_key(key)} = {_escape_value(value)}" for key, value in entries.items()]
    return "".join(line + "\n" for line in lines)


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, logical_line)`` pairs with continuations joined."""

    natural = _NATURAL_LINE.split(text)
    index = 0
    while index < len(natural):
        start = index
        line = natural[index].lstrip(_WHITESPACE)
        index += 1
        if not line or line[0] in "#!":
            continue
        while _continues(line):
            if index >= len(natural):
                raise InvalidFormat(f"Unterminated escape sequence at end of input (line {start + 1})")
            line = line[:-1] + natural[index].lstrip(_WHITESPACE)
            index += 1
        yield start + 1, line


def _continues(line: str) -> bool:
    """Return ``True`` when *line* ends in an odd number of backslashes."""

    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""

    position = 0
    length = len(line)
    while position < length:
        char = line[position]
        if char == "\\":
            position += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        position += 1
    key = line[:position]
    rest = line[position:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(raw: str, line_number: int) -> str:
    """Resolve backslash escapes in *raw*."""

    if "\\" not in raw:
        return raw
    chars: list[str] = []
    position = 0
    length = len(raw)
    while position < length:
        char = raw[position]
        position += 1
        if char != "\\":
            chars.append(char)
            continue
        if position >= length:
            raise InvalidFormat(f"Unterminated escape sequence on line {line_number}")
        code = raw[position]
        position += 1
        if code == "u":
            digits = raw[position : position + 4]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                raise InvalidFormat(f"Malformed \\uxxxx encoding on line {line_number}")
            chars.append(chr(int(digits, 16)))
            position += 4
        else:
            chars.append(_ESCAPES.get(code, code))
    return _join_surrogates("".join(chars))


def _join_surrogates(value: str) -> str:
    """Combine UTF-16 surrogate pairs produced by consecutive ``\\u`` escapes."""

    if not any("\ud800" <= char <= "\udfff" for char in value):
        return value
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def _escape_key(key: str) -> str:
    return "".join(_escape_char(char, special=" =:#!") for char in key)


def _escape_value(value: str) -> str:
    escaped = "".join(_escape_char(char, special="") for char in value)
    # the parser strips whitespace before a value
    if escaped.startswith(" "):
        return "\\" + escaped
    return escaped


def _escape_char(char: str, *, special: str) -> str:
    if char in _REVERSE_ESCAPES:
        return _REVERSE_ESCAPES[char]
    if char in special:
        return "\\" + char
    if ord(char) < 0x20 or ord(char) == 0x7F:
        return f"\\u{ord(char):04x}"
    return char
