"""
CapabilityRegistry: immutable table of module id -> rendering contract + eligibility.

Built once at startup and injected; there is no module-level instance.
    registry = RegistryBuilder().register(ModuleKind.HABIT_TRACKER, "HabitTracker", {...}).freeze()
"""
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from goalboard.capability_registry.models import (
    DashboardPanel,
    EligibilityContext,
    EligibilityRequirements,
    ModuleCapability,
    ModuleKind,
    rejection_reason,
)
from goalboard.exceptions import ModuleNotRegisteredError
from goalboard.logger import get_logger
from goalboard.utils import unique_ordered

logger = get_logger("capability_registry")

KindLike = Union[ModuleKind, str]


def _to_kind(kind: KindLike) -> ModuleKind:
    if isinstance(kind, ModuleKind):
        return kind
    parsed = ModuleKind.parse(kind)
    if parsed is None:
        raise ModuleNotRegisteredError(str(kind))
    return parsed


def _default_title(kind: ModuleKind) -> str:
    return kind.value.replace("_", " ").title()


class RegistryBuilder:
    """Mutable staging area; freeze() hands out the read-only registry."""

    def __init__(self):
        self._entries: Dict[str, ModuleCapability] = {}

    def register(
        self,
        kind: KindLike,
        renderer_ref: str,
        default_parameters: Optional[Mapping[str, Any]] = None,
        requirements: Optional[EligibilityRequirements] = None,
        title: Optional[str] = None,
    ) -> "RegistryBuilder":
        k = _to_kind(kind)
        if k.value in self._entries:
            logger.debug(f"Re-registering capability {k.value}; last registration wins")
        self._entries[k.value] = ModuleCapability(
            kind=k,
            renderer_ref=renderer_ref,
            title=title or _default_title(k),
            default_parameters=dict(default_parameters or {}),
            requirements=requirements or EligibilityRequirements(),
        )
        return self

    def freeze(self) -> "CapabilityRegistry":
        return CapabilityRegistry.build(self._entries.values())


class CapabilityRegistry:
    """Read-only lookup of module capabilities."""

    def __init__(self, capabilities: Iterable[ModuleCapability]):
        table: Dict[str, ModuleCapability] = {}
        for cap in capabilities:
            table[cap.id] = cap
        self._capabilities = MappingProxyType(table)

    @classmethod
    def build(cls, capabilities: Iterable[ModuleCapability]) -> "CapabilityRegistry":
        """Later entries with the same id replace earlier ones."""
        return cls(capabilities)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._capabilities

    def __len__(self) -> int:
        return len(self._capabilities)

    def ids(self) -> List[str]:
        return list(self._capabilities.keys())

    def capabilities(self) -> List[ModuleCapability]:
        return list(self._capabilities.values())

    def get(self, module_id: str) -> Optional[ModuleCapability]:
        return self._capabilities.get(module_id)

    def require(self, module_id: str) -> ModuleCapability:
        cap = self._capabilities.get(module_id)
        if cap is None:
            raise ModuleNotRegisteredError(module_id)
        return cap

    def filter_eligible(self, candidate_ids: Iterable[str], context: EligibilityContext) -> List[str]:
        """
        Keep registered ids whose requirements hold for the context.
        Order preserved, duplicates dropped; exclusions are not errors.
        """
        eligible = []
        for module_id in unique_ordered(candidate_ids):
            cap = self._capabilities.get(module_id)
            if cap is None:
                logger.debug(f"Excluded {module_id}: not registered")
                continue
            reason = rejection_reason(cap.requirements, context)
            if reason is not None:
                logger.debug(f"Excluded {module_id}: {reason}")
                continue
            eligible.append(module_id)
        return eligible

    def compose_panels(self, module_ids: Iterable[str], required_ids: Iterable[str] = ()) -> List[DashboardPanel]:
        """One panel per id; unregistered ids become unavailable placeholders."""
        required = set(required_ids)
        panels = []
        for module_id in unique_ordered(module_ids):
            try:
                cap = self.require(module_id)
            except ModuleNotRegisteredError as e:
                logger.warning(e.message)
                panels.append(DashboardPanel(
                    module_id=module_id,
                    title=module_id.replace("_", " ").title(),
                    renderer_ref=None,
                    required=module_id in required,
                    available=False,
                    reason="Module not available",
                ))
                continue
            panels.append(DashboardPanel(
                module_id=module_id,
                title=cap.title,
                renderer_ref=cap.renderer_ref,
                props=dict(cap.default_parameters),
                required=module_id in required,
            ))
        return panels
