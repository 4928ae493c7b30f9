import json
import random
from datetime import date, timedelta

import pytest

from goalboard.capability_registry import ModuleKind, RegistryBuilder
from goalboard.config_manager import SystemConfig
from goalboard.exceptions import ConfigError
from goalboard.models import GoalContext
from goalboard.synthesis import DataSynthesizer
from goalboard.synthesis.generators import GENERATORS
from goalboard.synthesis.timeline import build_timeline, clamp_progress

TODAY = date(2025, 1, 1)
TARGET = TODAY + timedelta(days=180)

ALL_MODULES = [k.value for k in ModuleKind]


def savings_goal():
    return GoalContext(title="Save $5000 for emergency fund", description="", category="savings")


def make_synth(registry, seed=7, generators=None):
    return DataSynthesizer(
        registry,
        rng=random.Random(seed),
        today=lambda: TODAY,
        generators=generators,
        config=SystemConfig(),
    )


# === Timeline ===

def test_timeline_explicit_progress():
    tl = build_timeline(TODAY, TARGET, random.Random(1), progress=0.5)
    assert tl.total_days == 180
    assert tl.elapsed_days == 90
    assert tl.days_remaining == 90
    assert tl.percent_complete == 50
    assert tl.start_date == TODAY - timedelta(days=90)
    assert tl.projected_completion == TARGET


def test_timeline_clamps_progress():
    assert build_timeline(TODAY, TARGET, random.Random(1), progress=1.7).progress_fraction == 1.0
    assert build_timeline(TODAY, TARGET, random.Random(1), progress=-0.2).progress_fraction == 0.0
    assert clamp_progress(0.25) == 0.25


def test_timeline_drawn_progress_in_range():
    rng = random.Random(3)
    for _ in range(50):
        tl = build_timeline(TODAY, TARGET, rng, draw_max=0.6)
        assert 0.0 <= tl.progress_fraction <= 0.6
        assert tl.days_remaining == tl.total_days - tl.elapsed_days


def test_timeline_past_target_has_no_remaining_days():
    tl = build_timeline(TODAY, TODAY - timedelta(days=10), random.Random(1), progress=0.5)
    assert tl.total_days == 0
    assert tl.days_remaining == 0


# === Synthesis ===

def test_every_module_produces_serializable_record_for_every_category(policies, registry):
    synth = make_synth(registry)
    for category in policies.categories():
        goal = GoalContext(title=f"A {category} goal", description="daily work", category=category)
        result = synth.synthesize(goal, 5000, TARGET, ALL_MODULES, agents=("financial", "weather"))
        assert set(result.dataset) == set(ALL_MODULES), category
        assert result.failed_modules == {}, category
        json.dumps(result.dataset)


def test_days_remaining_shared_across_modules(registry):
    synth = make_synth(registry)
    modules = [
        "financial_calculator",
        "debt_payoff_tracker",
        "progress_dashboard",
        "calendar_widget",
        "travel_dashboard",
    ]
    result = synth.synthesize(savings_goal(), 5000, TARGET, modules, progress=0.25)
    remaining = {result.dataset[m]["daysRemaining"] for m in modules}
    assert remaining == {result.timeline.days_remaining}
    assert result.timeline.days_remaining == 135


def test_completion_dates_agree_across_modules(registry):
    modules = ["financial_calculator", "debt_payoff_tracker", "calendar_widget"]
    result = make_synth(registry).synthesize(savings_goal(), 5000, TARGET, modules, progress=0.5)
    d = result.dataset
    assert d["financial_calculator"]["projectedCompletion"] == TARGET.isoformat()
    assert d["debt_payoff_tracker"]["payoffDate"] == TARGET.isoformat()
    assert d["calendar_widget"]["targetDate"] == TARGET.isoformat()
    assert d["calendar_widget"]["allEvents"][-1]["date"] == TARGET.isoformat()


def test_completed_milestones_lie_in_the_past(registry):
    modules = ["milestone_timeline", "smart_action_timeline"]
    result = make_synth(registry).synthesize(savings_goal(), 5000, TARGET, modules, progress=0.5)
    entries = [
        (m["date"], m["completed"]) for m in result.dataset["milestone_timeline"]["milestones"]
    ] + [
        (a["dueDate"], a["completed"]) for a in result.dataset["smart_action_timeline"]["actions"]
    ]
    assert any(done for _, done in entries)
    assert any(not done for _, done in entries)
    for due, done in entries:
        if done:
            assert due <= TODAY.isoformat()
        else:
            assert due >= TODAY.isoformat()


@pytest.mark.parametrize("progress, expected", [(0.0, 15), (0.2, 32), (0.8, 83), (1.0, 100)])
def test_efficiency_score_tracks_progress(registry, progress, expected):
    result = make_synth(registry).synthesize(
        savings_goal(), 5000, TARGET, ["progress_dashboard"], progress=progress
    )
    metrics = {m["label"]: m["value"] for m in result.dataset["progress_dashboard"]["keyMetrics"]}
    assert metrics["Efficiency Score"] == expected


def test_saved_amount_follows_progress(registry):
    synth = make_synth(registry)
    result = synth.synthesize(
        savings_goal(),
        5000,
        TARGET,
        ["financial_calculator", "simple_savings_tracker", "completion_meter"],
        progress=0.5,
    )
    calc = result.dataset["financial_calculator"]
    assert calc["targetAmount"] == 5000
    assert calc["currentSaved"] == 2500
    assert calc["remainingAmount"] == 2500
    assert result.dataset["simple_savings_tracker"]["currentAmount"] == 2500
    assert result.dataset["completion_meter"]["currentProgress"] == 50
    assert result.current_saved(5000) == 2500


def test_same_seed_same_dataset(registry):
    a = make_synth(registry, seed=11).synthesize(savings_goal(), 5000, TARGET, ALL_MODULES)
    b = make_synth(registry, seed=11).synthesize(savings_goal(), 5000, TARGET, ALL_MODULES)
    assert a.timeline == b.timeline
    assert a.dataset == b.dataset


def test_unknown_and_unregistered_ids_are_skipped():
    registry = RegistryBuilder().register(ModuleKind.TASK_MANAGER, "TaskManager").freeze()
    synth = make_synth(registry)
    result = synth.synthesize(savings_goal(), 5000, TARGET, ["task_manager", "habit_tracker", "hologram"])
    assert list(result.dataset) == ["task_manager"]


def test_generator_failure_is_isolated(registry):
    def broken(ctx):
        raise ZeroDivisionError("boom")

    generators = dict(GENERATORS)
    generators[ModuleKind.HABIT_TRACKER] = broken
    synth = make_synth(registry, generators=generators)

    result = synth.synthesize(savings_goal(), 5000, TARGET, ["habit_tracker", "task_manager"])
    assert result.dataset["habit_tracker"]["status"] == "unavailable"
    assert "ZeroDivisionError" in result.dataset["habit_tracker"]["reason"]
    assert "habit_tracker" in result.failed_modules
    assert "task_manager" not in result.failed_modules
    assert result.dataset["task_manager"]["totalCount"] == len(result.dataset["task_manager"]["tasks"])


def test_incomplete_generator_table_rejected(registry):
    generators = dict(GENERATORS)
    generators.pop(ModuleKind.CAREER_DASHBOARD)
    with pytest.raises(ConfigError):
        make_synth(registry, generators=generators)


def test_agent_info_lists_given_agents(registry):
    result = make_synth(registry).synthesize(
        savings_goal(), 5000, TARGET, ["agent_info"], agents=("financial",)
    )
    agents = result.dataset["agent_info"]["activeAgents"]
    assert [a["id"] for a in agents] == ["financial"]
