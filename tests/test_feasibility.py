import pytest

from goalboard.feasibility import budget_adjustment, feasibility_score, timeframe_adjustment
from goalboard.models import ComplexityTier


@pytest.mark.parametrize("days, expected", [
    (30, -10),
    (89, 0),
    (150, 0),
    (180, 10),
    (540, 10),
    (720, 0),
    (721, -5),
])
def test_timeframe_adjustment(days, expected):
    assert timeframe_adjustment(days) == expected


@pytest.mark.parametrize("budget, cost, expected", [
    (None, 5000, 0),
    (0, 5000, 0),
    (10000, 5000, 15),
    (5000, 5000, 10),
    (3500, 5000, 5),
    (2000, 5000, -5),
    (500, 5000, -15),
])
def test_budget_adjustment(budget, cost, expected):
    assert budget_adjustment(budget, cost) == expected


def test_savings_goal_score():
    assert feasibility_score(180, 5000, ComplexityTier.MODERATE, "savings") == 98


def test_habits_goal_score():
    assert feasibility_score(90, 100, ComplexityTier.MODERATE, "habits") == 90


def test_long_complex_business_score():
    assert feasibility_score(730, 10000, ComplexityTier.COMPLEX, "business") == 60


def test_budget_shifts_score():
    funded = feasibility_score(180, 5000, ComplexityTier.MODERATE, "general", user_budget=8000)
    underfunded = feasibility_score(180, 5000, ComplexityTier.MODERATE, "general", user_budget=1000)
    assert funded == 100
    assert underfunded == 75


def test_score_is_clamped():
    assert feasibility_score(180, 5000, ComplexityTier.SIMPLE, "habits", user_budget=50000, base=100) == 100
    assert feasibility_score(30, 5000, ComplexityTier.COMPLEX, "business", user_budget=1, base=0) == 0
