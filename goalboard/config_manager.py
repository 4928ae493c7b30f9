"""
Configuration Manager for Goalboard.

Central place for the engine's tunable constants. Every empirical value is
declared here and can be overridden from config/runtime.yaml.

Usage:
    from goalboard.config_manager import config
    limit = config.OPTIONAL_MODULE_LIMIT
"""
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from goalboard.logger import get_logger
from goalboard.paths import CONFIG_DIR

RUNTIME_CONFIG_PATH = CONFIG_DIR / "runtime.yaml"

logger = get_logger("config")


@dataclass
class SystemConfig:
    """
    Runtime constants of the composition engine.
    """

    # === Module resolution ===

    # Number of optional modules appended to the active set on create/regenerate
    OPTIONAL_MODULE_LIMIT: int = 3

    # === Synthetic telemetry ===

    # Upper bound of the random progress draw; goals are "in progress, not done"
    PROGRESS_DRAW_MAX: float = 0.6

    # === Feasibility ===

    FEASIBILITY_BASE_SCORE: int = 75

    # === Snapshot defaults ===

    DEFAULT_USER_ID: str = "current-user"
    DEFAULT_PRIORITY: str = "medium"
    DEFAULT_STATUS: str = "planning"

    # === Legacy read path ===

    # Positional slicing of active_module_ids when a snapshot has no partition
    POSITIONAL_REQUIRED_COUNT: int = 4
    POSITIONAL_CONTEXTUAL_COUNT: int = 4


def _load_runtime_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load runtime overrides, if the file exists."""
    target = path or RUNTIME_CONFIG_PATH
    if not target.exists():
        return {}

    try:
        with open(target, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Ignoring unreadable runtime config {target}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring runtime config {target}: top level is not a mapping")
        return {}
    return data


def get_config(path: Optional[Path] = None) -> SystemConfig:
    """
    Build a config instance.

    Priority: runtime.yaml > defaults
    """
    base = SystemConfig()
    overrides = _load_runtime_config(path)
    known = {f.name for f in fields(SystemConfig)}

    for key, value in overrides.items():
        if key in known:
            setattr(base, key, value)
        else:
            logger.debug(f"Unknown runtime config key ignored: {key}")

    return base


# process-wide default instance
config = get_config()
