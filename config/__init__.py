"""
Convenience imports for configuration.

Callers use ``from config import settings`` and read the module constants.
"""

from . import settings

__all__ = ["settings"]
