from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional


class BoundKind(StrEnum):
    """Enumeration of the three shapes a range endpoint can take."""

    UNBOUNDED = "unbounded"
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


def to_utc(value: datetime) -> datetime:
    """Normalize an instant to UTC. Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True, slots=True)
class Bound:
    """One side of a timestamp range."""

    kind: BoundKind
    instant: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", BoundKind(self.kind))
        if self.kind is BoundKind.UNBOUNDED:
            if self.instant is not None:
                raise ValueError("An unbounded bound cannot carry an instant")
            return
        if self.instant is None:
            raise ValueError(f"A {self.kind} bound requires an instant")
        object.__setattr__(self, "instant", to_utc(self.instant))

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(BoundKind.UNBOUNDED)

    @classmethod
    def inclusive(cls, instant: datetime) -> "Bound":
        return cls(BoundKind.INCLUSIVE, instant)

    @classmethod
    def exclusive(cls, instant: datetime) -> "Bound":
        return cls(BoundKind.EXCLUSIVE, instant)

    @property
    def is_unbounded(self) -> bool:
        return self.kind is BoundKind.UNBOUNDED

    @property
    def is_inclusive(self) -> bool:
        return self.kind is BoundKind.INCLUSIVE
