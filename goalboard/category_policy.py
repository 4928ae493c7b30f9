"""
CategoryPolicyTable: immutable lookup of goal category -> defaults and module tiers.
Source: goalboard/category_policies.yaml, loaded once at startup.
"""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from goalboard.exceptions import ConfigError, UnknownCategoryError
from goalboard.logger import get_logger
from goalboard.paths import CATEGORY_POLICIES_PATH
from goalboard.utils import unique_ordered

logger = get_logger("category_policy")


@dataclass(frozen=True)
class CategoryPolicy:
    """Static configuration for one goal category."""
    id: str
    name: str
    description: str
    default_deadline_days: int
    default_estimated_cost: int
    required_module_ids: Tuple[str, ...]
    contextual_module_ids: Tuple[str, ...] = ()
    optional_module_ids: Tuple[str, ...] = ()
    suggested_agent_ids: Tuple[str, ...] = ()
    examples: Tuple[str, ...] = field(default=(), compare=False)


def _as_tuple(value: Any, key: str, category_id: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"Category '{category_id}': '{key}' must be a list")
    return tuple(str(v) for v in value)


def _dict_to_policy(category_id: str, d: Mapping[str, Any]) -> CategoryPolicy:
    if not isinstance(d, Mapping):
        raise ConfigError(f"Category '{category_id}' must be a mapping")

    required = _as_tuple(d.get("required"), "required", category_id)
    if not required:
        raise ConfigError(f"Category '{category_id}' declares no required modules")

    try:
        deadline_days = int(d.get("default_deadline_days", 90))
        estimated_cost = int(d.get("default_estimated_cost", 0))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Category '{category_id}' has a non-numeric default: {e}")

    return CategoryPolicy(
        id=category_id,
        name=str(d.get("name", category_id)),
        description=str(d.get("description", "")),
        default_deadline_days=deadline_days,
        default_estimated_cost=estimated_cost,
        required_module_ids=required,
        contextual_module_ids=_as_tuple(d.get("contextual"), "contextual", category_id),
        optional_module_ids=_as_tuple(d.get("optional"), "optional", category_id),
        suggested_agent_ids=_as_tuple(d.get("suggested_agents"), "suggested_agents", category_id),
        examples=_as_tuple(d.get("examples"), "examples", category_id),
    )


class CategoryPolicyTable:
    """Read-only table of category policies keyed by category id."""

    def __init__(self, policies: Iterable[CategoryPolicy]):
        table: Dict[str, CategoryPolicy] = {}
        for policy in policies:
            table[policy.id] = policy
        self._policies = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CategoryPolicyTable":
        categories = data.get("categories", data) if isinstance(data, Mapping) else None
        if not isinstance(categories, Mapping) or not categories:
            raise ConfigError("Category policy data must contain a non-empty 'categories' mapping")
        return cls(_dict_to_policy(str(cid), body) for cid, body in categories.items())

    @classmethod
    def from_yaml(cls, path: Optional[Path] = None) -> "CategoryPolicyTable":
        target = Path(path) if path is not None else CATEGORY_POLICIES_PATH
        if not target.exists():
            raise ConfigError("Category policy file not found", config_path=str(target))
        try:
            with open(target, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in category policies: {e}", config_path=str(target))

        table = cls.from_mapping(data)
        logger.info(f"Loaded {len(table)} category policies from {target}")
        return table

    def __contains__(self, category: object) -> bool:
        return category in self._policies

    def __len__(self) -> int:
        return len(self._policies)

    def categories(self) -> List[str]:
        return list(self._policies.keys())

    def policies(self) -> List[CategoryPolicy]:
        return list(self._policies.values())

    def policy_for(self, category: str) -> CategoryPolicy:
        policy = self._policies.get(category)
        if policy is None:
            raise UnknownCategoryError(category, known=self.categories())
        return policy

    def modules_for(self, category: str, include_optional: bool = False) -> List[str]:
        """Required + contextual (+ optional) module ids, required first, no duplicates."""
        policy = self.policy_for(category)
        ids = list(policy.required_module_ids) + list(policy.contextual_module_ids)
        if include_optional:
            ids += list(policy.optional_module_ids)
        return unique_ordered(ids)


_default_table: Optional[CategoryPolicyTable] = None


def get_default_policy_table() -> CategoryPolicyTable:
    """Table built from the bundled YAML, loaded on first use."""
    global _default_table
    if _default_table is None:
        _default_table = CategoryPolicyTable.from_yaml()
    return _default_table
