"""
EstimationEngine: free-text goal context -> cost, target date, complexity,
module tiers and SMART narrative.

Deterministic for a given clock; no randomness and no I/O.
"""
import math
from datetime import date, timedelta
from typing import Callable, List, Optional

from goalboard.category_policy import CategoryPolicy, CategoryPolicyTable
from goalboard.estimation import rules
from goalboard.estimation.narrative import build_narrative
from goalboard.logger import get_logger
from goalboard.models import ComplexityTier, Estimation, GoalContext, SmartNarrative
from goalboard.utils import unique_ordered

logger = get_logger("estimation")


def describe_timeframe(days: int) -> str:
    """Human label for a day count until the target date."""
    if days < 0:
        return "Overdue"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days < 7:
        return f"{days} days"
    if days < 30:
        return f"{math.ceil(days / 7)} weeks"
    if days < 365:
        return f"{math.ceil(days / 30)} months"
    return f"{math.ceil(days / 365)} years"


class EstimationEngine:
    """
    Derives an Estimation from a GoalContext and its category policy.

    Args:
        policies: category policy table
        today: clock returning the current date; injectable for tests
    """

    def __init__(self, policies: CategoryPolicyTable, today: Optional[Callable[[], date]] = None):
        self.policies = policies
        self.today = today or date.today

    # === Stages ===

    def estimate_cost(self, context: GoalContext, policy: Optional[CategoryPolicy] = None) -> int:
        policy = policy or self.policies.policy_for(context.category)
        content = context.content
        cost = float(policy.default_estimated_cost)

        explicit = rules.parse_money(content)
        if explicit is not None and explicit > 0:
            cost = explicit

        for rule in rules.COST_MODIFIERS:
            if rules.contains_any(content, rule.keywords):
                cost *= rule.factor

        cost *= self._location_multiplier(context.user_location)

        for rule in rules.CATEGORY_COST_RULES:
            if rule.category == context.category and rules.contains_any(content, rule.keywords):
                cost = rule.apply(cost)

        if not math.isfinite(cost):
            cost = float(policy.default_estimated_cost)
        return max(1, int(round(cost)))

    def estimate_duration_days(self, context: GoalContext, policy: Optional[CategoryPolicy] = None) -> int:
        policy = policy or self.policies.policy_for(context.category)
        content = context.content
        days = float(policy.default_deadline_days)

        explicit = rules.parse_duration_days(content)
        if explicit is None:
            explicit = rules.parse_duration_days((context.user_timeframe or "").lower())
        if explicit is not None:
            days = float(explicit)

        for rule in rules.DURATION_MODIFIERS:
            if rules.contains_any(content, rule.keywords):
                days *= rule.factor

        for rule in rules.CATEGORY_DURATION_RULES:
            if rule.matches(context.category, content):
                days = rule.apply(days)
                break

        return max(1, min(rules.MAX_DURATION_DAYS, int(round(days))))

    def estimate_target_date(self, context: GoalContext, policy: Optional[CategoryPolicy] = None) -> date:
        return self.today() + timedelta(days=self.estimate_duration_days(context, policy))

    def assess_complexity(self, context: GoalContext) -> ComplexityTier:
        content = context.content
        for tier, keywords in rules.COMPLEXITY_RULES:
            if rules.contains_any(content, keywords):
                return tier
        return ComplexityTier.MODERATE

    def select_contextual_modules(self, context: GoalContext, policy: Optional[CategoryPolicy] = None) -> List[str]:
        """Policy contextual list plus keyword-triggered modules. Never removes."""
        policy = policy or self.policies.policy_for(context.category)
        content = context.content
        selected = list(policy.contextual_module_ids)
        for keywords, module_id in rules.CONTEXTUAL_TRIGGERS:
            if rules.contains_any(content, keywords):
                selected.append(module_id)
        return unique_ordered(selected)

    def generate_narrative(self, context: GoalContext, target_date: date) -> SmartNarrative:
        return build_narrative(context, (target_date - self.today()).days, target_date)

    # === Composition ===

    def estimate(self, context: GoalContext) -> Estimation:
        """
        Full estimation for a context.

        Raises:
            UnknownCategoryError: category absent from the policy table
        """
        policy = self.policies.policy_for(context.category)

        cost = self.estimate_cost(context, policy)
        duration_days = self.estimate_duration_days(context, policy)
        target_date = self.today() + timedelta(days=duration_days)

        required = list(policy.required_module_ids)
        contextual = [m for m in self.select_contextual_modules(context, policy) if m not in required]
        optional = [m for m in policy.optional_module_ids if m not in required and m not in contextual]

        estimation = Estimation(
            estimated_cost=cost,
            target_date=target_date,
            duration_days=duration_days,
            timeframe_label=describe_timeframe(duration_days),
            complexity=self.assess_complexity(context),
            required_modules=required,
            contextual_modules=contextual,
            optional_modules=optional,
            suggested_agents=list(policy.suggested_agent_ids),
            narrative=build_narrative(context, duration_days, target_date),
        )
        logger.info(
            f"Estimated '{context.title}' ({context.category}): cost={cost}, "
            f"days={duration_days}, complexity={estimation.complexity.value}"
        )
        return estimation

    @staticmethod
    def _location_multiplier(location: Optional[str]) -> float:
        if not location:
            return 1.0
        lowered = location.lower()
        for rule in rules.LOCATION_MULTIPLIERS:
            if rules.contains_any(lowered, rule.keywords):
                return rule.factor
        return 1.0
