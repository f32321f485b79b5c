"""Fixed-width integer helpers."""

from dataclasses import dataclass

from ..core.exceptions import OperandRangeError, OperandTypeError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def to_int32(value: int) -> int:
    """Wrap an arbitrary Python int into the signed 32-bit range."""
    return (value + 2 ** 31) % 2 ** 32 - 2 ** 31


def add_int32(a: int, b: int) -> int:
    """Add two 32-bit integers with two's-complement wraparound."""
    return to_int32(Int32(a).value + Int32(b).value)


@dataclass(frozen=True)
class Int32:
    """Value object for a signed 32-bit integer operand."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise OperandTypeError(
                f"Operand must be an integer, got {type(self.value).__name__}",
                operand=self.value
            )
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise OperandRangeError(
                f"Operand {self.value} is outside the 32-bit range",
                operand=self.value
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
