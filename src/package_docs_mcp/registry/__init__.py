"""Capability registry package."""
from .models import CapabilityRecord
from .registry import CapabilityRegistry, capability_registry

__all__ = [
    "capability_registry",
    "CapabilityRecord",
    "CapabilityRegistry",
]
