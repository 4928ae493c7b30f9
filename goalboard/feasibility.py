"""
Feasibility score: 0-100 heuristic of how achievable an estimation looks.
"""
import math
from typing import Optional, Tuple

from goalboard.models import ComplexityTier

# (minimum budget/cost ratio, adjustment), checked top to bottom
BUDGET_BANDS: Tuple[Tuple[float, int], ...] = (
    (1.5, 15),
    (1.0, 10),
    (0.7, 5),
    (0.4, -5),
)
UNDERFUNDED_ADJUSTMENT = -15

COMPLEXITY_ADJUSTMENTS = {
    ComplexityTier.SIMPLE: 10,
    ComplexityTier.MODERATE: 5,
    ComplexityTier.COMPLEX: -5,
}

CATEGORY_ADJUSTMENTS = {
    "habits": 10,
    "reading": 10,
    "savings": 8,
    "fitness": 5,
    "travel": 3,
    "education": 0,
    "business": -5,
}


def timeframe_adjustment(duration_days: int) -> int:
    months = math.ceil(duration_days / 30)
    if months < 3:
        return -10
    if months > 24:
        return -5
    if 6 <= months <= 18:
        return 10
    return 0


def budget_adjustment(user_budget: Optional[float], estimated_cost: int) -> int:
    if not user_budget or estimated_cost <= 0:
        return 0
    ratio = user_budget / estimated_cost
    for threshold, adjustment in BUDGET_BANDS:
        if ratio >= threshold:
            return adjustment
    return UNDERFUNDED_ADJUSTMENT


def feasibility_score(
    duration_days: int,
    estimated_cost: int,
    complexity: ComplexityTier,
    category: str,
    user_budget: Optional[float] = None,
    base: int = 75,
) -> int:
    score = base
    score += timeframe_adjustment(duration_days)
    score += budget_adjustment(user_budget, estimated_cost)
    score += COMPLEXITY_ADJUSTMENTS.get(complexity, 0)
    score += CATEGORY_ADJUSTMENTS.get(category, 0)
    return max(0, min(100, int(round(score))))
