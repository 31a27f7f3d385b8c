from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, cast, literal
from sqlalchemy.dialects.postgresql import TSTZRANGE
from sqlalchemy.sql.elements import ColumnElement

from .tstz_range import TstzRange

CONTAINS_OP = "@>"
CONTAINED_BY_OP = "<@"
OVERLAPS_OP = "&&"


def as_expression(value: Any) -> ColumnElement:
    """Coerce a range, an instant or an existing SQL expression into a column expression."""
    if isinstance(value, ColumnElement):
        return value
    if hasattr(value, "__clause_element__"):
        return value.__clause_element__()
    if isinstance(value, TstzRange):
        return cast(literal(value.to_text(), String()), TSTZRANGE())
    if isinstance(value, datetime):
        return literal(value, DateTime(timezone=True))
    raise TypeError(f"Cannot use {type(value).__name__} as a range operand")


def _binary(left: Any, operator: str, right: Any) -> ColumnElement[bool]:
    return as_expression(left).op(operator, is_comparison=True)(as_expression(right))


def contains(left: Any, element: Any) -> ColumnElement[bool]:
    """``left @> element``: the range contains an instant or another range."""
    return _binary(left, CONTAINS_OP, element)


def contained_by(left: Any, other: Any) -> ColumnElement[bool]:
    """``left <@ other``"""
    return _binary(left, CONTAINED_BY_OP, other)


def overlaps(left: Any, other: Any) -> ColumnElement[bool]:
    """``left && other``"""
    return _binary(left, OVERLAPS_OP, other)
