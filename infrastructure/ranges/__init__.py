from .adapter import (
    COLUMN_TYPE,
    TYPE_NAME,
    RangeScalarAdapter,
    TextScalarAdapter,
    extract_from_row,
    from_scalar,
    text_adapter,
    to_scalar,
)
from .bounds import Bound, BoundKind
from .errors import MalformedRangeLiteral, TstzRangeError, UnsupportedScalarShape
from .operators import CONTAINED_BY_OP, CONTAINS_OP, OVERLAPS_OP, contained_by, contains, overlaps
from .tstz_range import TstzRange

__all__ = [
    "Bound",
    "BoundKind",
    "TstzRange",
    "TstzRangeError",
    "MalformedRangeLiteral",
    "UnsupportedScalarShape",
    "RangeScalarAdapter",
    "TextScalarAdapter",
    "text_adapter",
    "to_scalar",
    "from_scalar",
    "extract_from_row",
    "TYPE_NAME",
    "COLUMN_TYPE",
    "CONTAINS_OP",
    "CONTAINED_BY_OP",
    "OVERLAPS_OP",
    "contains",
    "contained_by",
    "overlaps",
]
