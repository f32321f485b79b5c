"""Domain model: the composite record and fixed-width integer helpers."""

from .entities import Composite
from .value_objects import Int32, INT32_MIN, INT32_MAX, to_int32, add_int32

__all__ = [
    "Composite",
    "Int32",
    "INT32_MIN",
    "INT32_MAX",
    "to_int32",
    "add_int32"
]
