from datetime import date, timedelta

import pytest

from goalboard.estimation import EstimationEngine, describe_timeframe
from goalboard.estimation.rules import MAX_DURATION_DAYS, parse_duration_days, parse_money
from goalboard.exceptions import UnknownCategoryError
from goalboard.models import ComplexityTier, GoalContext


def ctx(title, category="general", description="", **kwargs):
    return GoalContext(title=title, description=description, category=category, **kwargs)


# === Parsing helpers ===

@pytest.mark.parametrize("text, expected", [
    ("save $5000 for emergency fund", 5000),
    ("trip for $1,200", 1200),
    ("need $5k quickly", 5000),
    ("about $2.5k", 2500),
    ("first $300 then $900", 300),
    ("no amount here", None),
])
def test_parse_money(text, expected):
    assert parse_money(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("in 3 months", 90),
    ("within 2 weeks", 14),
    ("10 days", 10),
    ("1 year", 365),
    ("someday", None),
    (None, None),
])
def test_parse_duration_days(text, expected):
    assert parse_duration_days(text) == expected


@pytest.mark.parametrize("text", ["200 years", "99999999999 days", "9" * 5000 + " weeks"])
def test_parse_duration_days_is_capped(text):
    assert parse_duration_days(text) == MAX_DURATION_DAYS


# === Cost ===

def test_cost_defaults_to_policy(engine):
    assert engine.estimate_cost(ctx("Tidy the garage")) == 500


def test_cost_explicit_amount_overrides_default(engine):
    assert engine.estimate_cost(ctx("Save $5000 for emergency fund", "savings")) == 5000
    assert engine.estimate_cost(ctx("Trip to Lisbon for $1,200", "travel")) == 1200
    assert engine.estimate_cost(ctx("Emergency fund of $5k", "savings")) == 5000


def test_cost_modifiers_are_cumulative(engine):
    assert engine.estimate_cost(ctx("Luxury spa retreat", "wellness")) == 2250
    # 500 * 1.5 * 0.7
    assert engine.estimate_cost(ctx("Luxury on a budget")) == 525


def test_cost_location_first_match(engine):
    assert engine.estimate_cost(ctx("Tidy the garage", user_location="Tokyo, Japan")) == 700
    assert engine.estimate_cost(ctx("Tidy the garage", user_location="Bangkok, Thailand")) == 300
    assert engine.estimate_cost(ctx("Tidy the garage", user_location="Lisbon")) == 500


def test_cost_category_floors(engine):
    assert engine.estimate_cost(ctx("Grow a $2000 portfolio", "investment")) == 10000
    assert engine.estimate_cost(ctx("Backpack across Europe for $800", "travel")) == 3000
    assert engine.estimate_cost(ctx("Launch a bakery for $1000", "business")) == 5000


def test_cost_is_at_least_one(engine):
    assert engine.estimate_cost(ctx("Cheap thing for $0.5")) >= 1


# === Duration ===

def test_duration_defaults_to_policy(engine):
    assert engine.estimate_duration_days(ctx("Save for a rainy day", "savings")) == 180


def test_duration_explicit_in_content(engine):
    assert engine.estimate_duration_days(ctx("Learn guitar in 3 months", "skill_development")) == 90


def test_duration_falls_back_to_user_timeframe(engine):
    assert engine.estimate_duration_days(ctx("Tidy the garage", user_timeframe="2 weeks")) == 14
    assert engine.estimate_duration_days(ctx("Tidy the garage in 10 days", user_timeframe="2 weeks")) == 10


def test_duration_habits_floor(engine):
    assert engine.estimate_duration_days(ctx("Meditate for 10 days", "habits")) == 66
    assert engine.estimate_duration_days(ctx("Meditate every morning", "habits")) == 90


def test_duration_language_fluency_floor(engine):
    assert engine.estimate_duration_days(ctx("Become fluent in Spanish in 6 months", "language")) == 365


def test_duration_fitness_overrides(engine):
    assert engine.estimate_duration_days(ctx("Run a 5k", "fitness")) == 90
    assert engine.estimate_duration_days(ctx("Run a 5k then a marathon", "fitness")) == 180


def test_duration_modifiers(engine):
    assert engine.estimate_duration_days(ctx("Master chess")) == 135
    assert engine.estimate_duration_days(ctx("Basic knitting in 10 days")) == 7


def test_target_date_uses_clock(engine):
    assert engine.estimate_target_date(ctx("Save for a rainy day", "savings")) == date(2025, 6, 30)


def test_huge_durations_are_capped(engine):
    violin = ctx("Master the violin in 10000 years", "skill_development")
    assert engine.estimate_duration_days(violin) == MAX_DURATION_DAYS
    assert engine.estimate_target_date(violin) == date(2025, 1, 1) + timedelta(days=MAX_DURATION_DAYS)

    garage = ctx("Tidy the garage", user_timeframe="99999999999 days")
    assert engine.estimate_duration_days(garage) == MAX_DURATION_DAYS
    assert engine.estimate(garage).duration_days == MAX_DURATION_DAYS


# === Complexity and modules ===

def test_complexity_tiers(engine):
    assert engine.assess_complexity(ctx("Master chess")) == ComplexityTier.COMPLEX
    assert engine.assess_complexity(ctx("Basic knitting")) == ComplexityTier.SIMPLE
    assert engine.assess_complexity(ctx("Simple but advanced")) == ComplexityTier.COMPLEX
    assert engine.assess_complexity(ctx("Tidy the garage")) == ComplexityTier.MODERATE


def test_contextual_modules_add_keyword_triggers(engine):
    selected = engine.select_contextual_modules(ctx("Save money daily", "savings"))
    assert selected[:2] == ["completion_meter", "milestone_timeline"]
    assert "budget_breakdown" in selected
    assert "streak_counter" in selected


def test_contextual_modules_idempotent(engine):
    c = ctx("Build a daily habit to save money", "habits")
    first = engine.select_contextual_modules(c)
    assert engine.select_contextual_modules(c) == first
    assert len(first) == len(set(first))


def test_estimate_partitions_are_disjoint(engine):
    est = engine.estimate(ctx("Save $5000 for emergency fund", "savings"))
    required, contextual, optional = (
        set(est.required_modules), set(est.contextual_modules), set(est.optional_modules)
    )
    assert not required & contextual
    assert not required & optional
    assert not contextual & optional
    assert est.required_modules[0] == "simple_savings_tracker"
    assert "budget_breakdown" in est.contextual_modules
    assert "budget_breakdown" not in est.optional_modules


def test_estimate_full_result(engine):
    est = engine.estimate(ctx("Save $5000 for emergency fund", "savings"))
    assert est.estimated_cost == 5000
    assert est.duration_days == 180
    assert est.target_date == date(2025, 6, 30)
    assert est.timeframe_label == "6 months"
    assert est.complexity == ComplexityTier.MODERATE
    assert est.suggested_agents == ["financial"]
    assert est.narrative.specific == "Save $5000 for emergency fund"
    assert est.narrative.time_bound == "Target completion: 2025-06-30"
    assert "180 day" in est.narrative.achievable
    assert est.to_dict()["complexity"] == "moderate"


def test_estimate_unknown_category(engine):
    with pytest.raises(UnknownCategoryError):
        engine.estimate(ctx("Jump out of a plane", "skydiving"))


def test_generate_narrative_counts_from_today(policies):
    engine = EstimationEngine(policies, today=lambda: date(2025, 1, 1))
    narrative = engine.generate_narrative(ctx("Read 12 books", "reading"), date(2025, 1, 31))
    assert narrative.achievable.startswith("Based on 30 day")
    assert "books" in narrative.measurable


@pytest.mark.parametrize("days, label", [
    (-3, "Overdue"),
    (0, "Today"),
    (1, "Tomorrow"),
    (5, "5 days"),
    (10, "2 weeks"),
    (90, "3 months"),
    (180, "6 months"),
    (730, "2 years"),
])
def test_describe_timeframe(days, label):
    assert describe_timeframe(days) == label
