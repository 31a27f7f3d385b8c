from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import Text, cast, type_coerce
from sqlalchemy.dialects.postgresql import TSTZRANGE
from sqlalchemy.types import UserDefinedType

from infrastructure.ranges import operators
from infrastructure.ranges.adapter import COLUMN_TYPE, RangeScalarAdapter, text_adapter
from infrastructure.ranges.errors import TstzRangeError
from infrastructure.ranges.tstz_range import TstzRange

logger = logging.getLogger(__name__)


class TstzRangeType(UserDefinedType):
    """Column type storing ``TstzRange`` values in a PostgreSQL ``TSTZRANGE`` column.

    Values cross the driver boundary as range literals only: parameters are
    bound as text and cast server-side, and selected columns are cast back to
    text before decoding. asyncpg and psycopg therefore never see their own
    range classes.
    """

    cache_ok = True

    def __init__(self, adapter: RangeScalarAdapter = text_adapter) -> None:
        self.adapter = adapter

    @property
    def python_type(self):
        return TstzRange

    def get_col_spec(self, **kw: Any) -> str:
        return COLUMN_TYPE

    def bind_expression(self, bindvalue):
        return cast(cast(bindvalue, Text()), TSTZRANGE())

    def column_expression(self, col):
        return type_coerce(cast(col, Text()), self)

    def bind_processor(self, dialect):
        adapter = self.adapter

        def process(value: Optional[TstzRange]) -> Optional[str]:
            return adapter.to_scalar(value)

        return process

    def result_processor(self, dialect, coltype):
        adapter = self.adapter

        def process(value: Optional[str]) -> Optional[TstzRange]:
            if value is None:
                return None
            try:
                return adapter.from_scalar(value)
            except TstzRangeError:
                logger.debug("Failed to decode %s column value %r", COLUMN_TYPE, value)
                raise

        return process

    class comparator_factory(UserDefinedType.Comparator):
        def contains(self, other: Any, **kw: Any):
            return operators.contains(self.expr, other)

        def contained_by(self, other: Any):
            return operators.contained_by(self.expr, other)

        def overlaps(self, other: Any):
            return operators.overlaps(self.expr, other)
