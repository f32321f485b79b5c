"""Capability contracts (interfaces) for the composite record."""

from .base import CapabilityA, CapabilityB

__all__ = ["CapabilityA", "CapabilityB"]
