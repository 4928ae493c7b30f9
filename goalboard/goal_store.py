"""
GoalStore: persistence port for flattened goal snapshots.

Adapters:
- InMemoryGoalStore: process-local dict, used by tests and the default API
- JsonGoalStore: JSON file under the data dir (default data/goals.json)

Records are copied on the way in and out; callers never share a mutable
snapshot with the store.
"""
import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from goalboard.exceptions import GoalNotFoundError
from goalboard.logger import get_logger
from goalboard.models import GoalSnapshot
from goalboard.paths import GOAL_STORE_PATH
from goalboard.snapshot import snapshot_from_dict, snapshot_to_dict

logger = get_logger("goal_store")


class GoalStore(ABC):
    """Key-value store of GoalSnapshot records keyed by id."""

    @abstractmethod
    def get(self, goal_id: str) -> Optional[GoalSnapshot]:
        ...

    @abstractmethod
    def create(self, snapshot: GoalSnapshot) -> GoalSnapshot:
        ...

    @abstractmethod
    def update(self, snapshot: GoalSnapshot) -> GoalSnapshot:
        ...

    @abstractmethod
    def list_ids(self) -> List[str]:
        ...

    def require(self, goal_id: str) -> GoalSnapshot:
        snapshot = self.get(goal_id)
        if snapshot is None:
            raise GoalNotFoundError(goal_id)
        return snapshot


class InMemoryGoalStore(GoalStore):

    def __init__(self):
        self._records: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def get(self, goal_id: str) -> Optional[GoalSnapshot]:
        with self._lock:
            record = self._records.get(goal_id)
        return snapshot_from_dict(record) if record is not None else None

    def create(self, snapshot: GoalSnapshot) -> GoalSnapshot:
        with self._lock:
            if snapshot.id in self._records:
                raise ValueError(f"Goal already exists: {snapshot.id}")
            self._records[snapshot.id] = snapshot_to_dict(snapshot)
        return snapshot

    def update(self, snapshot: GoalSnapshot) -> GoalSnapshot:
        with self._lock:
            if snapshot.id not in self._records:
                raise GoalNotFoundError(snapshot.id)
            self._records[snapshot.id] = snapshot_to_dict(snapshot)
        return snapshot

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._records.keys())


class JsonGoalStore(GoalStore):
    """Whole-file JSON store; every write replaces the file atomically."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else GOAL_STORE_PATH
        self._records: Dict[str, dict] = {}
        self._lock = threading.Lock()
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Could not read goal store {self._path}: {e}")
            return

        goals = data.get("goals", []) if isinstance(data, dict) else data
        if not isinstance(goals, list):
            logger.warning(f"Goal store {self._path} has no goal list; starting empty")
            return
        for d in goals:
            if isinstance(d, dict) and d.get("id"):
                self._records[str(d["id"])] = d
        logger.info(f"Loaded {len(self._records)} goals from {self._path}")

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"goals": list(self._records.values())}
        fd, tmp_name = tempfile.mkstemp(prefix=".goals-", suffix=".json", dir=str(self._path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def get(self, goal_id: str) -> Optional[GoalSnapshot]:
        with self._lock:
            record = self._records.get(goal_id)
        if record is None:
            return None
        try:
            return snapshot_from_dict(record)
        except TypeError as e:
            logger.error(f"Stored goal {goal_id} is incomplete: {e}")
            return None

    def create(self, snapshot: GoalSnapshot) -> GoalSnapshot:
        with self._lock:
            if snapshot.id in self._records:
                raise ValueError(f"Goal already exists: {snapshot.id}")
            self._records[snapshot.id] = snapshot_to_dict(snapshot)
            try:
                self._save()
            except OSError:
                del self._records[snapshot.id]
                raise
        return snapshot

    def update(self, snapshot: GoalSnapshot) -> GoalSnapshot:
        with self._lock:
            if snapshot.id not in self._records:
                raise GoalNotFoundError(snapshot.id)
            previous = self._records[snapshot.id]
            self._records[snapshot.id] = snapshot_to_dict(snapshot)
            try:
                self._save()
            except OSError:
                self._records[snapshot.id] = previous
                raise
        return snapshot

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._records.keys())
