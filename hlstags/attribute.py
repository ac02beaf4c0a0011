"""
Attribute list scanning for HLS tag lines.

Splits the part of a tag line after the ``#EXT-X-...:`` prefix into
``(name, value)`` pairs, as described in RFC 8216 section 4.2.
"""

import re
from typing import Iterator, Tuple

from .error import InvalidInputError

_NAME_PATTERN = re.compile(r"[A-Z0-9-]+")


def _split_top_level(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(offset, span)`` for each comma-separated span of text.

    Commas inside double quotes do not split.
    """
    start = 0
    in_quotes = False
    for i, c in enumerate(text):
        if c == '"':
            in_quotes = not in_quotes
        elif c == ',' and not in_quotes:
            yield start, text[start:i]
            start = i + 1

    if in_quotes:
        raise InvalidInputError(f"Unterminated quoted string in attribute list: {text!r}")

    yield start, text[start:]


def _parse_pair(span: str, offset: int) -> Tuple[str, str]:
    if not span:
        raise InvalidInputError(f"Empty attribute at offset {offset}")

    name, sep, value = span.partition('=')
    if not sep:
        raise InvalidInputError(f"Attribute without '=' at offset {offset}: {span!r}")
    if not name:
        raise InvalidInputError(f"Attribute without name at offset {offset}: {span!r}")
    if not _NAME_PATTERN.fullmatch(name):
        raise InvalidInputError(f"Invalid attribute name at offset {offset}: {name!r}")
    if not value:
        raise InvalidInputError(f"Attribute {name} has an empty value")

    # Quoted-string values are yielded without their quotes
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]

    return name, value


def parse_attribute_pairs(text: str) -> Iterator[Tuple[str, str]]:
    """
    Scan an attribute list into ``(name, value)`` pairs.

    Pairs are produced lazily in input order, so a grammar error is raised
    only when the iterator reaches the malformed pair. Duplicate names are
    yielded as they appear; the caller decides how to treat them.

    Args:
        text: Attribute list, e.g. ``TIME-OFFSET=1.23,PRECISE=YES``

    Yields:
        Tuples of (name, raw value)

    Raises:
        InvalidInputError: On a pair without ``=``, an empty or invalid name,
            an empty value, an empty pair (including a dangling comma) or an
            unterminated quoted string

    Example:
        >>> list(parse_attribute_pairs("TIME-OFFSET=1.23,PRECISE=YES"))
        [('TIME-OFFSET', '1.23'), ('PRECISE', 'YES')]
    """
    if not text:
        return

    for offset, span in _split_top_level(text):
        yield _parse_pair(span, offset)
