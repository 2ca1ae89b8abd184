"""
Reader for Java ``.properties`` files.

Follows the line grammar of ``java.util.Properties.load``: comments, the
three key/value separators, backslash line continuations and escapes.
"""

from __future__ import annotations

import re
import string
from pathlib import Path

from ..core.exceptions import PropertiesFormatError
from ..core.logging import get_logger

logger = get_logger(__name__)

WHITESPACE = " \t\f"
SEPARATORS = "=:"
COMMENT_MARKERS = "#!"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SURROGATES = re.compile("[\ud800-\udfff]")


def _continues(line: str) -> bool:
    """A line continues when it ends in an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> list[tuple[int, str]]:
    """Join continued lines and drop blanks and comments.

    Returns:
        list[tuple[int, str]]: (first natural line number, logical line) pairs.
    """
    natural = _LINE_BREAK.split(text)
    logical: list[tuple[int, str]] = []
    index = 0
    while index < len(natural):
        line_number = index + 1
        line = natural[index].lstrip(WHITESPACE)
        index += 1
        if not line or line[0] in COMMENT_MARKERS:
            continue
        while _continues(line):
            line = line[:-1]
            if index >= len(natural):
                break
            line += natural[index].lstrip(WHITESPACE)
            index += 1
        logical.append((line_number, line))
    return logical


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into its raw key and raw value."""
    end = 0
    while end < len(line):
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in SEPARATORS or char in WHITESPACE:
            break
        end += 1
    end = min(end, len(line))

    start = end
    while start < len(line) and line[start] in WHITESPACE:
        start += 1
    if start < len(line) and line[start] in SEPARATORS:
        start += 1
        while start < len(line) and line[start] in WHITESPACE:
            start += 1
    return line[:end], line[start:]


def _unescape(raw: str, line_number: int, source: str) -> str:
    chars: list[str] = []
    index = 0
    while index < len(raw):
        char = raw[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index >= len(raw):
            break
        char = raw[index]
        index += 1
        if char == "u":
            digits = raw[index:index + 4]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise PropertiesFormatError(
                    message=f"malformed \\uxxxx escape '\\u{digits}'",
                    line_number=line_number,
                    source=source,
                )
            chars.append(chr(int(digits, 16)))
            index += 4
            continue
        chars.append(_ESCAPES.get(char, char))

    value = "".join(chars)
    if _SURROGATES.search(value):
        # \uXXXX escapes are UTF-16 code units; recombine surrogate pairs.
        value = value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    return value


def parse_properties(text: str, source: str = "<string>") -> dict[str, str]:
    """Parse ``.properties`` text into a mapping.

    Later occurrences of a key override earlier ones.

    Args:
        text: File content.
        source: Name used in error messages.

    Returns:
        dict[str, str]: Keys and values with escapes resolved.

    Raises:
        PropertiesFormatError: On a malformed ``\\uxxxx`` escape.
    """
    properties: dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, line_number, source)
        properties[key] = _unescape(raw_value, line_number, source)
    return properties


def read_properties(path: Path) -> dict[str, str]:
    """Read and parse a ``.properties`` file.

    The file is decoded as UTF-8, or as ISO-8859-1 (the historical
    ``Properties`` encoding) when it is not valid UTF-8.

    Raises:
        FileNotFoundError: If the file does not exist.
        PropertiesFormatError: On a malformed escape sequence.
    """
    data = path.read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("iso-8859-1")
    text = text.removeprefix("\ufeff")

    properties = parse_properties(text, source=str(path))
    logger.debug("properties_parsed", path=str(path), keys=sorted(properties))
    return properties
