from .tstzrange import TstzRangeType

__all__ = ["TstzRangeType"]
