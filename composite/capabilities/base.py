"""
Capability contracts implemented by the composite record.

Each capability is a separate interface contributing one method.
"""

from abc import ABC, abstractmethod


class CapabilityA(ABC):
    """Contract for the integer-offset capability."""

    @abstractmethod
    def method_from_a(self, parameter_in_a: int) -> int:
        """
        Offset an integer by two.

        Args:
            parameter_in_a: Signed 32-bit operand

        Returns:
            parameter_in_a + 2, wrapped to 32 bits

        Raises:
            OperandTypeError: If the operand is not an integer
            OperandRangeError: If the operand is outside the 32-bit range
        """
        pass


class CapabilityB(ABC):
    """Contract for the fixed-response capability."""

    @abstractmethod
    def method_from_b(self) -> str:
        """Return the capability's fixed response text."""
        pass
