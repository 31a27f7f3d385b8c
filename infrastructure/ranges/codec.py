"""
Text encoding for PostgreSQL ``tstzrange`` literals.

A literal is two comma-separated tokens::

    [2024-01-01T00:00:00+00:00,2024-01-02T00:00:00+00:00)
    (,2024-06-01T12:00:00+00:00]

``(`` alone as the start token and ``)`` alone as the end token mean the side is
unbounded. Encoding always renders the full ``+00:00`` offset. Decoding also
accepts what the server itself prints (``"2024-01-01 00:00:00+00"``): quoted
instants and the compact ``+hh`` offset.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Tuple

from .bounds import Bound, BoundKind, to_utc
from .errors import MalformedRangeLiteral

SEPARATOR = ","
INCLUSIVE_START = "["
EXCLUSIVE_START = "("
INCLUSIVE_END = "]"
EXCLUSIVE_END = ")"

# A time component followed by a bare hour offset, e.g. "...00:00:00+00".
_COMPACT_OFFSET = re.compile(r"^(.*[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)([+-]\d{2})$")

# RFC 3339 date-time, with a space allowed in place of "T" as PostgreSQL prints it.
_RFC3339_INSTANT = re.compile(
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}[T ][0-9]{2}:[0-9]{2}:[0-9]{2}(?:\.[0-9]+)?(?:Z|[+-][0-9]{2}:[0-9]{2})$"
)


def format_instant(value: datetime) -> str:
    return to_utc(value).isoformat()


def format_bounds(start: Bound, end: Bound) -> str:
    if start.kind is BoundKind.UNBOUNDED:
        start_token = EXCLUSIVE_START
    else:
        opener = INCLUSIVE_START if start.kind is BoundKind.INCLUSIVE else EXCLUSIVE_START
        start_token = f"{opener}{format_instant(start.instant)}"

    if end.kind is BoundKind.UNBOUNDED:
        end_token = EXCLUSIVE_END
    else:
        closer = INCLUSIVE_END if end.kind is BoundKind.INCLUSIVE else EXCLUSIVE_END
        end_token = f"{format_instant(end.instant)}{closer}"

    return f"{start_token}{SEPARATOR}{end_token}"


def normalize_instant_text(text: str) -> str:
    """Strip wrapping double quotes and expand a compact ``+hh`` offset to ``+hh:00``."""
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    match = _COMPACT_OFFSET.match(text)
    if match:
        text = f"{match.group(1)}{match.group(2)}:00"
    return text


def parse_instant(text: str, literal: str) -> datetime:
    normalized = normalize_instant_text(text)
    if not _RFC3339_INSTANT.match(normalized):
        raise MalformedRangeLiteral(literal, f"instant {text!r} is not an RFC 3339 date-time")
    try:
        return to_utc(datetime.fromisoformat(normalized))
    except (ValueError, OverflowError) as exc:
        raise MalformedRangeLiteral(literal, f"unparseable instant {text!r}") from exc


def parse_bounds(literal: str) -> Tuple[Bound, Bound]:
    """Decode a range literal into its (start, end) bounds.

    Raises ``MalformedRangeLiteral`` on any failure; nothing is recovered from a
    partially valid literal.
    """
    parts = literal.split(SEPARATOR)
    if len(parts) != 2:
        raise MalformedRangeLiteral(literal, f"expected 2 comma-separated parts, got {len(parts)}")
    start_text, end_text = parts
    return _parse_start(start_text, literal), _parse_end(end_text, literal)


def _parse_start(token: str, literal: str) -> Bound:
    if token == EXCLUSIVE_START:
        return Bound.unbounded()
    if not token:
        raise MalformedRangeLiteral(literal, "missing start bound")

    opener, instant_text = token[0], token[1:]
    if opener == INCLUSIVE_START:
        return Bound.inclusive(parse_instant(instant_text, literal))
    if opener == EXCLUSIVE_START:
        return Bound.exclusive(parse_instant(instant_text, literal))
    raise MalformedRangeLiteral(literal, f"unknown start delimiter {opener!r}")


def _parse_end(token: str, literal: str) -> Bound:
    if token == EXCLUSIVE_END:
        return Bound.unbounded()
    if not token:
        raise MalformedRangeLiteral(literal, "missing end bound")

    instant_text, closer = token[:-1], token[-1]
    if closer == INCLUSIVE_END:
        return Bound.inclusive(parse_instant(instant_text, literal))
    if closer == EXCLUSIVE_END:
        return Bound.exclusive(parse_instant(instant_text, literal))
    raise MalformedRangeLiteral(literal, f"unknown end delimiter {closer!r}")
