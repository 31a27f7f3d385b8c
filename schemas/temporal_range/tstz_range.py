from datetime import datetime

from pydantic import BaseModel, RootModel, field_validator, model_validator

from infrastructure.ranges.bounds import Bound, BoundKind, to_utc
from infrastructure.ranges.tstz_range import TstzRange


class BoundModel(BaseModel):
    """Tagged representation of one side of a range."""

    kind: BoundKind
    instant: datetime | None = None

    @field_validator("instant", mode="after")
    @classmethod
    def _normalize_instant(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("instant must carry a UTC offset")
        return to_utc(value)

    @model_validator(mode="after")
    def _check_instant_matches_kind(self) -> "BoundModel":
        if self.kind == BoundKind.UNBOUNDED and self.instant is not None:
            raise ValueError("unbounded bound must not carry an instant")
        if self.kind != BoundKind.UNBOUNDED and self.instant is None:
            raise ValueError(f"{self.kind} bound requires an instant")
        return self

    @classmethod
    def from_bound(cls, bound: Bound) -> "BoundModel":
        return cls(kind=bound.kind, instant=bound.instant)

    def to_bound(self) -> Bound:
        return Bound(self.kind, self.instant)


class TstzRangeModel(RootModel[tuple[BoundModel, BoundModel]]):
    """Structured ``[start, end]`` pair used where JSON is preferred over the range literal."""

    @classmethod
    def from_range(cls, value: TstzRange) -> "TstzRangeModel":
        return cls((BoundModel.from_bound(value.start), BoundModel.from_bound(value.end)))

    def to_range(self) -> TstzRange:
        start, end = self.root
        return TstzRange(start.to_bound(), end.to_bound())
