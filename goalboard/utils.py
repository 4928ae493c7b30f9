import dataclasses
import json
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, List


def unique_ordered(ids: Iterable[str]) -> List[str]:
    """De-duplicate while keeping first-seen order."""
    seen = set()
    result = []
    for item in ids:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def json_default(o: Any) -> Any:
    """json.dumps fallback for dates, enums and dataclasses."""
    if isinstance(o, (datetime, date)):
        return o.isoformat()
    if isinstance(o, Enum):
        return o.value
    if dataclasses.is_dataclass(o) and not isinstance(o, type):
        return dataclasses.asdict(o)
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def dump_json(value: Any) -> str:
    """Compact JSON used for serialized snapshot fields."""
    return json.dumps(value, ensure_ascii=False, default=json_default)


def round_to(value: float, digits: int = 2) -> float:
    return round(float(value), digits)
