"""Terminal I/O helpers."""

from .console import Console
from .size import Size

__all__ = ["Console", "Size"]
