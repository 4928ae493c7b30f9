import json
from dataclasses import replace
from datetime import date, timedelta

import pytest

from goalboard.estimation.rules import MAX_DURATION_DAYS
from goalboard.exceptions import InvalidProgressError, UnknownCategoryError
from goalboard.models import CreateGoalRequest, GoalStatus


def savings_request(**kwargs):
    params = dict(title="Save $5000 for emergency fund", description="", category="savings")
    params.update(kwargs)
    return CreateGoalRequest(**params)


# === create_goal ===

def test_create_savings_goal(orchestrator, store):
    goal = orchestrator.create_goal(savings_request())
    s = goal.snapshot

    assert s.id.startswith("goal_") and len(s.id) == len("goal_") + 12
    assert s.estimated_cost == 5000
    assert s.target_date == "2025-06-30"
    assert s.status == "planning"
    assert s.priority == "medium"
    assert s.user_id == "current-user"
    assert s.created_at == s.updated_at == "2025-01-01T09:30:00"
    assert 0 <= s.current_saved <= 5000 * 0.6

    for module_id in ("simple_savings_tracker", "financial_calculator", "completion_meter", "agent_info"):
        assert module_id in goal.dashboard_components
    assert goal.dashboard_components[:4] == [
        "simple_savings_tracker", "financial_calculator", "progress_chart", "agent_info",
    ]
    assert set(goal.module_dataset) == set(goal.dashboard_components)
    assert store.get(s.id) == s


def test_create_active_set_is_required_plus_eligible_extras(orchestrator):
    goal = orchestrator.create_goal(savings_request())
    est = goal.estimation
    assert est.required_modules == [
        "simple_savings_tracker", "financial_calculator", "progress_chart", "agent_info",
    ]
    assert est.contextual_modules == ["completion_meter", "milestone_timeline", "budget_breakdown"]
    assert est.optional_modules == ["expense_tracker", "habit_tracker", "task_manager"]
    assert goal.dashboard_components == (
        est.required_modules + est.contextual_modules + est.optional_modules
    )


def test_required_modules_bypass_eligibility(orchestrator):
    # investment_tracker asks for a cost of at least 1000
    goal = orchestrator.create_goal(CreateGoalRequest(
        title="Invest $500 in index funds", description="", category="investment",
    ))
    assert goal.snapshot.estimated_cost == 500
    assert goal.dashboard_components[0] == "investment_tracker"
    assert "investment_tracker" in goal.module_dataset


def test_create_dataset_shares_one_timeline(orchestrator):
    goal = orchestrator.create_goal(savings_request())
    calc = goal.module_dataset["financial_calculator"]
    saved = goal.snapshot.current_saved
    assert calc["currentSaved"] == saved
    assert goal.module_dataset["simple_savings_tracker"]["currentAmount"] == saved


def test_create_habits_goal_respects_floor(orchestrator):
    goal = orchestrator.create_goal(CreateGoalRequest(
        title="Meditate for 10 days", description="", category="habits",
    ))
    assert goal.estimation.duration_days == 66
    assert goal.snapshot.target_date == "2025-03-08"


@pytest.mark.parametrize("title, category, timeframe", [
    ("Master the violin in 10000 years", "skill_development", None),
    ("Tidy the garage", "general", "99999999999 days"),
])
def test_create_caps_huge_durations(orchestrator, store, title, category, timeframe):
    goal = orchestrator.create_goal(CreateGoalRequest(
        title=title, description="", category=category, user_timeframe=timeframe,
    ))
    assert goal.estimation.duration_days == MAX_DURATION_DAYS
    expected = (date(2025, 1, 1) + timedelta(days=MAX_DURATION_DAYS)).isoformat()
    assert goal.snapshot.target_date == expected
    assert store.get(goal.id) == goal.snapshot


def test_create_unknown_category_writes_nothing(orchestrator, store):
    with pytest.raises(UnknownCategoryError):
        orchestrator.create_goal(CreateGoalRequest(title="Jump", description="", category="skydiving"))
    assert store.list_ids() == []


def test_create_keeps_user_hints(orchestrator):
    goal = orchestrator.create_goal(savings_request(
        user_location="London", user_budget=8000.0, user_timeframe="6 months", priority="high",
    ))
    s = goal.snapshot
    assert s.priority == "high"
    assert s.user_location == "London"
    assert s.user_budget == 8000.0
    assert s.estimated_cost == 7000
    assert s.user_timeframe == "6 months"


def test_partition_is_persisted(orchestrator):
    goal = orchestrator.create_goal(savings_request())
    partition = json.loads(goal.snapshot.module_partition)
    assert partition["required"] == goal.estimation.required_modules
    assert partition["contextual"] == goal.estimation.contextual_modules


def test_payload_is_json_serializable(orchestrator):
    goal = orchestrator.create_goal(savings_request())
    payload = goal.to_dict()
    json.dumps(payload)
    assert payload["estimation"]["target_date"] == "2025-06-30"
    assert [p["module_id"] for p in payload["panels"]] == goal.dashboard_components


# === get_goal_with_dashboard ===

def test_get_round_trips_create(orchestrator):
    created = orchestrator.create_goal(savings_request())
    loaded = orchestrator.get_goal_with_dashboard(created.id)

    assert loaded.snapshot == created.snapshot
    assert loaded.dashboard_components == created.dashboard_components
    assert loaded.module_dataset == created.module_dataset
    assert loaded.estimation.required_modules == created.estimation.required_modules
    assert loaded.estimation.contextual_modules == created.estimation.contextual_modules
    assert loaded.estimation.narrative == created.estimation.narrative
    assert loaded.estimation.suggested_agents == ["financial"]


def test_get_missing_returns_none(orchestrator):
    assert orchestrator.get_goal_with_dashboard("goal_doesnotexist") is None


def test_get_tolerates_malformed_fields(orchestrator, store):
    created = orchestrator.create_goal(savings_request())
    store.update(replace(created.snapshot, module_dataset="{not json", narrative="[1, 2]"))

    loaded = orchestrator.get_goal_with_dashboard(created.id)
    assert loaded.module_dataset == {}
    assert loaded.estimation.narrative.specific == ""
    assert loaded.dashboard_components == created.dashboard_components


def test_get_without_partition_slices_positionally(orchestrator, store):
    created = orchestrator.create_goal(savings_request())
    store.update(replace(created.snapshot, module_partition=None))

    loaded = orchestrator.get_goal_with_dashboard(created.id)
    active = created.dashboard_components
    assert loaded.estimation.required_modules == active[:4]
    assert loaded.estimation.contextual_modules == active[4:8]
    assert loaded.estimation.optional_modules == active[8:]


def test_get_placeholder_panel_for_unknown_module(orchestrator, store):
    created = orchestrator.create_goal(savings_request())
    active = created.dashboard_components + ["hologram_widget"]
    store.update(replace(created.snapshot, active_module_ids=json.dumps(active)))

    loaded = orchestrator.get_goal_with_dashboard(created.id)
    placeholder = loaded.panels[-1]
    assert placeholder.module_id == "hologram_widget"
    assert placeholder.available is False


# === update_goal_progress ===

def test_update_progress_scenario(orchestrator, store):
    created = orchestrator.create_goal(CreateGoalRequest(
        title="Save $8000 for a car", description="", category="savings",
    ))
    updated = orchestrator.update_goal_progress(created.id, 0.5)

    assert updated.snapshot.current_saved == 4000
    assert updated.snapshot.status == GoalStatus.IN_PROGRESS.value
    assert updated.module_dataset["financial_calculator"]["currentSaved"] == 4000
    assert updated.module_dataset["financial_calculator"]["remainingAmount"] == 4000
    assert store.get(created.id).current_saved == 4000


def test_update_progress_complete(orchestrator):
    created = orchestrator.create_goal(savings_request())
    updated = orchestrator.update_goal_progress(created.id, 1.0)
    assert updated.snapshot.status == GoalStatus.COMPLETED.value
    assert updated.snapshot.current_saved == 5000
    assert updated.module_dataset["financial_calculator"]["daysRemaining"] == 0


def test_update_progress_zero_keeps_planning(orchestrator):
    created = orchestrator.create_goal(savings_request())
    assert orchestrator.update_goal_progress(created.id, 0).snapshot.status == "planning"


@pytest.mark.parametrize("bad", [-0.1, 1.5, float("nan"), "half", True, None])
def test_update_progress_rejects_invalid(orchestrator, store, bad):
    created = orchestrator.create_goal(savings_request())
    before = store.get(created.id)
    with pytest.raises(InvalidProgressError):
        orchestrator.update_goal_progress(created.id, bad)
    assert store.get(created.id) == before


def test_update_progress_missing_goal(orchestrator):
    assert orchestrator.update_goal_progress("goal_missing", 0.3) is None


# === regenerate_goal_data ===

def test_regenerate_keeps_saved_amount(orchestrator):
    created = orchestrator.create_goal(savings_request())
    orchestrator.update_goal_progress(created.id, 0.5)

    regenerated = orchestrator.regenerate_goal_data(created.id)
    s = regenerated.snapshot
    assert s.current_saved == 2500
    assert s.estimated_cost == 5000
    assert s.created_at == created.snapshot.created_at
    assert regenerated.module_dataset["financial_calculator"]["currentSaved"] == 2500
    assert regenerated.dashboard_components == created.dashboard_components


def test_regenerate_picks_up_new_clock(policies, registry, store, synthesizer):
    from goalboard.goal_orchestrator import GoalOrchestrator

    clock = {"today": date(2025, 1, 1)}
    orch = GoalOrchestrator(policies, registry, store, synthesizer=synthesizer, today=lambda: clock["today"])
    created = orch.create_goal(savings_request())
    clock["today"] = date(2025, 2, 1)

    regenerated = orch.regenerate_goal_data(created.id)
    assert regenerated.snapshot.target_date == "2025-07-31"


def test_regenerate_missing_goal(orchestrator):
    assert orchestrator.regenerate_goal_data("goal_missing") is None


# === list_goals ===

def test_list_goals(orchestrator):
    a = orchestrator.create_goal(savings_request())
    b = orchestrator.create_goal(CreateGoalRequest(title="Read 12 books", description="", category="reading"))
    ids = [s.id for s in orchestrator.list_goals()]
    assert ids == [a.id, b.id]
