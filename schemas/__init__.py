from .temporal_range import BoundModel, TstzRangeModel

__all__ = [
    "BoundModel",
    "TstzRangeModel",
]
