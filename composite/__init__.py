"""Composite record implementing two capability contracts."""

from .capabilities import CapabilityA, CapabilityB
from .domain import Composite
from .main import main

__version__ = "1.0.0"

__all__ = ["Composite", "CapabilityA", "CapabilityB", "main"]
