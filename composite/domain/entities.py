"""The composite record."""

from typing import Final

from ..capabilities import CapabilityA, CapabilityB
from .value_objects import add_int32


class Composite(CapabilityA, CapabilityB):
    """Record implementing both capability contracts.

    ``__hidden_value`` is private to the instance, ``visible_value`` is public
    and ``_scoped_text`` is internal to this module. ``CONSTANT`` belongs to
    the class and is shared by every instance.
    """

    CONSTANT: Final = 989

    def __init__(self):
        self.__hidden_value = 9
        self.visible_value = 2
        self._scoped_text = "jjj"

    def int_method(self) -> int:
        return 9

    @staticmethod
    def static_int_method() -> int:
        return 54

    def method_from_a(self, parameter_in_a: int) -> int:
        """Return parameter_in_a + 2 with 32-bit wraparound."""
        return add_int32(parameter_in_a, 2)

    def method_from_b(self) -> str:
        return "methodFromBResponse"

    def __repr__(self) -> str:
        return f"Composite(visible_value={self.visible_value!r})"
