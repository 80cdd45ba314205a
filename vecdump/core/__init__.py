"""Core types and configuration."""
from vecdump.core.types import SparseVector
from vecdump.core.config import Config

__all__ = [
    "SparseVector",
    "Config",
]
