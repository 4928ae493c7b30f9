"""
Keyword rule tables for the estimation engine.

Each table is an ordered tuple; rules are evaluated top to bottom against the
lowercased goal content (title + description). Matching is plain substring
containment, the same way for every table.
"""
import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from goalboard.models import ComplexityTier


def contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


# === Cost ===

# "$1,200", "$5k", "$2.5k"; the first token wins
MONEY_PATTERN = re.compile(r"\$(\d[\d,]*(?:\.\d+)?)(k)?", re.IGNORECASE)


@dataclass(frozen=True)
class MultiplierRule:
    keywords: Tuple[str, ...]
    factor: float


COST_MODIFIERS: Tuple[MultiplierRule, ...] = (
    MultiplierRule(("luxury", "premium", "high-end"), 1.5),
    MultiplierRule(("budget", "cheap", "affordable"), 0.7),
)

# Matched against user_location, first hit wins
LOCATION_MULTIPLIERS: Tuple[MultiplierRule, ...] = (
    MultiplierRule(("san francisco", "new york", "london", "tokyo"), 1.4),
    MultiplierRule(("canada", "australia", "germany", "france"), 1.2),
    MultiplierRule(("mexico", "india", "thailand", "philippines"), 0.6),
)


@dataclass(frozen=True)
class CategoryCostRule:
    """floor raises the cost to at least the value; factor multiplies it."""
    category: str
    keywords: Tuple[str, ...]
    floor: Optional[int] = None
    factor: Optional[float] = None

    def apply(self, cost: float) -> float:
        if self.floor is not None:
            cost = max(cost, self.floor)
        if self.factor is not None:
            cost *= self.factor
        return cost


CATEGORY_COST_RULES: Tuple[CategoryCostRule, ...] = (
    CategoryCostRule("investment", ("portfolio", "wealth"), floor=10000),
    CategoryCostRule("travel", ("europe", "asia"), floor=3000),
    CategoryCostRule("travel", ("week",), factor=0.8),
    CategoryCostRule("travel", ("month",), factor=2.0),
    CategoryCostRule("business", ("startup", "launch"), floor=5000),
)


def parse_money(text: str) -> Optional[float]:
    """Amount of the first currency token, or None."""
    match = MONEY_PATTERN.search(text or "")
    if not match:
        return None
    try:
        amount = float(match.group(1).replace(",", ""))
    except ValueError:
        return None
    if match.group(2):
        amount *= 1000
    if not math.isfinite(amount):
        return None
    return amount


# === Duration ===

DURATION_PATTERN = re.compile(r"(\d+)\s*(day|week|month|year)s?", re.IGNORECASE)

UNIT_DAYS = {"day": 1, "week": 7, "month": 30, "year": 365}

# Upper bound on any derived duration, about 100 years
MAX_DURATION_DAYS = 36500

DURATION_MODIFIERS: Tuple[MultiplierRule, ...] = (
    MultiplierRule(("master", "expert", "advanced"), 1.5),
    MultiplierRule(("basic", "beginner", "simple"), 0.7),
)


@dataclass(frozen=True)
class CategoryDurationRule:
    """
    Applied after the multipliers. floor raises the day count; override
    replaces it. An empty keyword tuple matches any content.
    """
    category: str
    keywords: Tuple[str, ...]
    floor: Optional[int] = None
    override: Optional[int] = None

    def matches(self, category: str, content: str) -> bool:
        if category != self.category:
            return False
        return not self.keywords or contains_any(content, self.keywords)

    def apply(self, days: float) -> float:
        if self.override is not None:
            return float(self.override)
        if self.floor is not None:
            return max(days, self.floor)
        return days


# Only the first matching rule applies; marathon wins over 5k
CATEGORY_DURATION_RULES: Tuple[CategoryDurationRule, ...] = (
    CategoryDurationRule("habits", (), floor=66),
    CategoryDurationRule("language", ("fluent", "conversational"), floor=365),
    CategoryDurationRule("fitness", ("marathon",), override=180),
    CategoryDurationRule("fitness", ("5k",), override=90),
)


def parse_duration_days(text: Optional[str]) -> Optional[int]:
    """Day count of the first '<N> <unit>' token, or None."""
    match = DURATION_PATTERN.search(text or "")
    if not match:
        return None
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > len(str(MAX_DURATION_DAYS)):
        return MAX_DURATION_DAYS
    return min(int(digits) * UNIT_DAYS[match.group(2).lower()], MAX_DURATION_DAYS)


# === Complexity ===

# Checked in order; the complex tier wins over the simple tier
COMPLEXITY_RULES: Tuple[Tuple[ComplexityTier, Tuple[str, ...]], ...] = (
    (ComplexityTier.COMPLEX, ("master", "expert", "advanced", "complex")),
    (ComplexityTier.SIMPLE, ("basic", "simple", "easy", "beginner")),
)


# === Contextual modules ===

CONTEXTUAL_TRIGGERS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("habit",), "habit_tracker"),
    (("money", "save", "cost"), "budget_breakdown"),
    (("daily", "weekly"), "streak_counter"),
)
