import json
import random
from dataclasses import replace
from datetime import date

import pytest

from goalboard.config_manager import SystemConfig
from goalboard.exceptions import GoalNotFoundError, MalformedSnapshotFieldError
from goalboard.goal_orchestrator import GoalOrchestrator
from goalboard.goal_store import InMemoryGoalStore, JsonGoalStore
from goalboard.models import CreateGoalRequest, GoalSnapshot
from goalboard.snapshot import decode_field, load_field, load_partition, snapshot_from_dict
from goalboard.synthesis import DataSynthesizer

FIXED_TODAY = date(2025, 1, 1)


def make_snapshot(goal_id="goal_000000000001", **kwargs):
    params = dict(
        id=goal_id,
        user_id="current-user",
        title="Read 12 books",
        description="",
        category="reading",
        priority="medium",
        status="planning",
        estimated_cost=300,
        current_saved=0,
        target_date="2025-12-31",
        feasibility_score=90,
    )
    params.update(kwargs)
    return GoalSnapshot(**params)


# === InMemoryGoalStore ===

def test_memory_store_crud():
    store = InMemoryGoalStore()
    snap = make_snapshot()
    store.create(snap)
    assert store.get(snap.id) == snap
    assert store.list_ids() == [snap.id]

    store.update(replace(snap, current_saved=150))
    assert store.get(snap.id).current_saved == 150


def test_memory_store_duplicate_create_rejected():
    store = InMemoryGoalStore()
    store.create(make_snapshot())
    with pytest.raises(ValueError):
        store.create(make_snapshot())


def test_memory_store_update_missing():
    with pytest.raises(GoalNotFoundError):
        InMemoryGoalStore().update(make_snapshot())


def test_require_missing():
    with pytest.raises(GoalNotFoundError) as exc:
        InMemoryGoalStore().require("goal_nope")
    assert exc.value.goal_id == "goal_nope"


# === JsonGoalStore ===

def test_json_store_persists_across_instances(tmp_path):
    path = tmp_path / "goals.json"
    store = JsonGoalStore(path)
    snap = make_snapshot(module_partition='{"required": [], "contextual": [], "optional": []}')
    store.create(snap)

    reopened = JsonGoalStore(path)
    assert reopened.get(snap.id) == snap

    data = json.loads(path.read_text(encoding="utf-8"))
    assert [g["id"] for g in data["goals"]] == [snap.id]


def test_json_store_leaves_no_temp_files(tmp_path):
    store = JsonGoalStore(tmp_path / "goals.json")
    snap = make_snapshot()
    store.create(snap)
    store.update(replace(snap, status="in_progress"))
    assert sorted(p.name for p in tmp_path.iterdir()) == ["goals.json"]


def test_json_store_unreadable_file_starts_empty(tmp_path):
    path = tmp_path / "goals.json"
    path.write_text("{broken", encoding="utf-8")
    assert JsonGoalStore(path).list_ids() == []


def test_json_store_ignores_unknown_keys(tmp_path):
    path = tmp_path / "goals.json"
    record = dict(make_snapshot().__dict__, legacy_field="x")
    path.write_text(json.dumps({"goals": [record]}), encoding="utf-8")
    assert JsonGoalStore(path).get(record["id"]).title == "Read 12 books"


def test_orchestrator_on_json_store(tmp_path, policies, registry):
    path = tmp_path / "goals.json"

    def orchestrator():
        return GoalOrchestrator(
            policies,
            registry,
            JsonGoalStore(path),
            synthesizer=DataSynthesizer(registry, rng=random.Random(5), today=lambda: FIXED_TODAY),
            config=SystemConfig(),
            today=lambda: FIXED_TODAY,
        )

    created = orchestrator().create_goal(CreateGoalRequest(
        title="Save $5000 for emergency fund", description="", category="savings",
    ))
    loaded = orchestrator().get_goal_with_dashboard(created.id)
    assert loaded.snapshot == created.snapshot
    assert loaded.module_dataset == created.module_dataset


# === Snapshot fields ===

def test_decode_field_strict():
    assert decode_field("assigned_agents", '["financial"]') == ["financial"]
    assert decode_field("module_dataset", None) == {}
    with pytest.raises(MalformedSnapshotFieldError):
        decode_field("module_dataset", "{oops")
    with pytest.raises(MalformedSnapshotFieldError):
        decode_field("active_module_ids", '{"a": 1}')


def test_load_field_lenient():
    snap = make_snapshot(assigned_agents="not json")
    assert load_field(snap, "assigned_agents") == []


def test_load_partition():
    assert load_partition(make_snapshot()) is None
    assert load_partition(make_snapshot(module_partition='{"required": ["a"]}')) is None
    full = make_snapshot(module_partition='{"required": ["a"], "contextual": [], "optional": ["b"]}')
    assert load_partition(full) == {"required": ["a"], "contextual": [], "optional": ["b"]}


def test_snapshot_from_dict_drops_unknown_keys():
    d = dict(make_snapshot().__dict__, extra=1)
    assert snapshot_from_dict(d) == make_snapshot()
