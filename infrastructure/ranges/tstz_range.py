from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .bounds import Bound, BoundKind, to_utc
from .codec import format_bounds, parse_bounds


@dataclass(frozen=True, slots=True)
class TstzRange:
    """Immutable range over timezone-aware instants, mirroring PostgreSQL's ``tstzrange``.

    Each side is independently unbounded, inclusive or exclusive. The
    constructor does not check that ``start`` precedes ``end``; a reversed range
    is representable and simply contains nothing (see ``is_ordered``).
    """

    start: Bound
    end: Bound

    @classmethod
    def new(cls, start: Bound, end: Bound) -> "TstzRange":
        return cls(start, end)

    @classmethod
    def from_instant_pair(cls, start: datetime, end: datetime) -> "TstzRange":
        """Build the half-open range ``[start, end)``."""
        return cls(Bound.inclusive(start), Bound.exclusive(end))

    from_datetime_range = from_instant_pair

    @classmethod
    def from_text(cls, literal: str) -> "TstzRange":
        start, end = parse_bounds(literal)
        return cls(start, end)

    def to_text(self) -> str:
        return format_bounds(self.start, self.end)

    def __str__(self) -> str:
        return self.to_text()

    @property
    def lower(self) -> Optional[datetime]:
        return self.start.instant

    @property
    def upper(self) -> Optional[datetime]:
        return self.end.instant

    def is_start_inclusive(self) -> bool:
        return self.start.kind is BoundKind.INCLUSIVE

    def is_end_inclusive(self) -> bool:
        return self.end.kind is BoundKind.INCLUSIVE

    def is_start_unbounded(self) -> bool:
        return self.start.kind is BoundKind.UNBOUNDED

    def is_end_unbounded(self) -> bool:
        return self.end.kind is BoundKind.UNBOUNDED

    def is_ordered(self) -> bool:
        if self.start.instant is None or self.end.instant is None:
            return True
        return self.start.instant <= self.end.instant

    def contains_instant(self, instant: datetime) -> bool:
        """Return True when ``instant`` falls inside the range."""
        instant = to_utc(instant)
        match (self.start.kind, self.end.kind):
            case (BoundKind.UNBOUNDED, BoundKind.UNBOUNDED):
                return True
            case (BoundKind.UNBOUNDED, BoundKind.INCLUSIVE):
                return instant <= self.end.instant
            case (BoundKind.UNBOUNDED, BoundKind.EXCLUSIVE):
                return instant < self.end.instant
            case (BoundKind.INCLUSIVE, BoundKind.UNBOUNDED):
                return instant >= self.start.instant
            case (BoundKind.EXCLUSIVE, BoundKind.UNBOUNDED):
                return instant > self.start.instant
            case (BoundKind.INCLUSIVE, BoundKind.INCLUSIVE):
                return self.start.instant <= instant <= self.end.instant
            case (BoundKind.INCLUSIVE, BoundKind.EXCLUSIVE):
                return self.start.instant <= instant < self.end.instant
            case (BoundKind.EXCLUSIVE, BoundKind.INCLUSIVE):
                return self.start.instant < instant <= self.end.instant
            case (BoundKind.EXCLUSIVE, BoundKind.EXCLUSIVE):
                return self.start.instant < instant < self.end.instant
        raise ValueError(f"Unsupported bound combination: {self.start.kind}, {self.end.kind}")
