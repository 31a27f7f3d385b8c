from . import validity_windows  # noqa: F401
from .validity_windows import ValidityWindow

__all__ = [
    "validity_windows",
    "ValidityWindow",
]
