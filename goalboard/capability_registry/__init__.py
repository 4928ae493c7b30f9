# Capability registry: dashboard module kinds, rendering contracts and eligibility.

from goalboard.capability_registry.models import (
    DashboardPanel,
    EligibilityContext,
    EligibilityRequirements,
    ModuleCapability,
    ModuleKind,
)
from goalboard.capability_registry.registry import CapabilityRegistry, RegistryBuilder
from goalboard.capability_registry.defaults import build_default_registry

__all__ = [
    "CapabilityRegistry",
    "DashboardPanel",
    "EligibilityContext",
    "EligibilityRequirements",
    "ModuleCapability",
    "ModuleKind",
    "RegistryBuilder",
    "build_default_registry",
]
