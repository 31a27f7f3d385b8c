from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Protocol

from .errors import UnsupportedScalarShape
from .tstz_range import TstzRange

TYPE_NAME = "tstzrange"
COLUMN_TYPE = TYPE_NAME.upper()


class RangeScalarAdapter(Protocol):
    """Contract between ``TstzRange`` and a persistence framework's scalar values."""

    type_name: str
    column_type: str

    def null(self) -> Any:
        """Scalar stored for an absent range."""

    def to_scalar(self, value: Optional[TstzRange]) -> Any:
        """Convert a range (or None) into the framework's scalar."""

    def from_scalar(self, value: Any) -> TstzRange:
        """Convert a non-null scalar back into a range."""

    def extract_from_row(self, row: Any, column: Any) -> TstzRange:
        """Read a required range out of a result row."""


class TextScalarAdapter:
    """Adapter that exchanges ranges as their text literal."""

    type_name = TYPE_NAME
    column_type = COLUMN_TYPE

    def null(self) -> Optional[str]:
        return None

    def to_scalar(self, value: Optional[TstzRange]) -> Optional[str]:
        if value is None:
            return self.null()
        if not isinstance(value, TstzRange):
            raise UnsupportedScalarShape(
                f"Expected TstzRange or None, got {type(value).__name__}"
            )
        return value.to_text()

    def from_scalar(self, value: Any) -> TstzRange:
        if not isinstance(value, str):
            raise UnsupportedScalarShape(
                f"Expected a non-null text scalar, got {type(value).__name__}"
            )
        return TstzRange.from_text(value)

    def extract_from_row(self, row: Any, column: Any) -> TstzRange:
        value = _lookup(row, column)
        if value is None:
            raise UnsupportedScalarShape(f"Column {column!r} is null or missing")
        return self.from_scalar(value)


def _lookup(row: Any, column: Any) -> Any:
    if isinstance(row, Mapping):
        return row.get(column)
    # SQLAlchemy Row exposes name-based access through ``_mapping``.
    mapping = getattr(row, "_mapping", None)
    if mapping is not None and not isinstance(column, int):
        return mapping.get(column)
    if isinstance(column, int):
        try:
            return row[column]
        except (IndexError, TypeError) as exc:
            raise UnsupportedScalarShape(
                f"Column {column!r} is missing from {type(row).__name__}"
            ) from exc
    raise UnsupportedScalarShape(
        f"Cannot read column {column!r} from {type(row).__name__}"
    )


text_adapter = TextScalarAdapter()

to_scalar = text_adapter.to_scalar
from_scalar = text_adapter.from_scalar
extract_from_row = text_adapter.extract_from_row
