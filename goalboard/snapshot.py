"""
Snapshot codec: GoalSnapshot <-> plain dict, and the JSON-encoded sub-fields
(narrative, assigned_agents, module_dataset, active_module_ids,
module_partition).

decode_field() is strict; load_field() is the lenient read path that logs and
substitutes an empty value.
"""
import json
from dataclasses import asdict, fields
from typing import Any, Dict, List, Optional

from goalboard.exceptions import MalformedSnapshotFieldError
from goalboard.logger import get_logger
from goalboard.models import GoalSnapshot
from goalboard.utils import dump_json

logger = get_logger("snapshot")

# Expected decoded type per serialized field
JSON_FIELDS = {
    "narrative": dict,
    "assigned_agents": list,
    "module_dataset": dict,
    "active_module_ids": list,
    "module_partition": dict,
}

PARTITION_KEYS = ("required", "contextual", "optional")


def encode_field(value: Any) -> str:
    return dump_json(value)


def decode_field(field_name: str, raw: Optional[str]) -> Any:
    """
    Decode one serialized field.

    Raises:
        MalformedSnapshotFieldError: invalid JSON or wrong top-level type
    """
    expected = JSON_FIELDS[field_name]
    if raw is None or raw == "":
        return expected()
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedSnapshotFieldError(field_name, raw_value=str(raw), reason=str(e))
    if not isinstance(value, expected):
        raise MalformedSnapshotFieldError(
            field_name, raw_value=str(raw), reason=f"expected {expected.__name__}, got {type(value).__name__}"
        )
    return value


def load_field(snapshot: GoalSnapshot, field_name: str) -> Any:
    """Lenient decode: malformed content becomes an empty value plus a warning."""
    try:
        return decode_field(field_name, getattr(snapshot, field_name))
    except MalformedSnapshotFieldError as e:
        logger.warning(f"Goal {snapshot.id}: {e.message}; using empty value")
        return JSON_FIELDS[field_name]()


def encode_partition(required: List[str], contextual: List[str], optional: List[str]) -> str:
    return encode_field({"required": list(required), "contextual": list(contextual), "optional": list(optional)})


def load_partition(snapshot: GoalSnapshot) -> Optional[Dict[str, List[str]]]:
    """Persisted module partition, or None when absent or unusable."""
    if not snapshot.module_partition:
        return None
    partition = load_field(snapshot, "module_partition")
    if not all(isinstance(partition.get(k), list) for k in PARTITION_KEYS):
        if partition:
            logger.warning(f"Goal {snapshot.id}: module_partition incomplete; falling back to positional slicing")
        return None
    return {k: [str(m) for m in partition[k]] for k in PARTITION_KEYS}


def snapshot_to_dict(snapshot: GoalSnapshot) -> Dict[str, Any]:
    return asdict(snapshot)


def snapshot_from_dict(d: Dict[str, Any]) -> GoalSnapshot:
    """Build a snapshot from a stored record; unknown keys are ignored."""
    known = {f.name for f in fields(GoalSnapshot)}
    return GoalSnapshot(**{k: v for k, v in d.items() if k in known})
