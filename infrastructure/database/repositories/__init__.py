from .validity_window_repository import ValidityWindowRepository

__all__ = [
    "ValidityWindowRepository",
]
