"""
Capability registry models: module kinds, eligibility rules and dashboard panels.
Dataclasses for asdict() compatibility with the HTTP layer.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ModuleKind(str, Enum):
    """Closed set of dashboard module variants."""
    FINANCIAL_CALCULATOR = "financial_calculator"
    SMART_ACTION_TIMELINE = "smart_action_timeline"
    PROGRESS_DASHBOARD = "progress_dashboard"
    AGENT_INFO = "agent_info"
    BUDGET_BREAKDOWN = "budget_breakdown"
    EXPENSE_TRACKER = "expense_tracker"
    DEBT_PAYOFF_TRACKER = "debt_payoff_tracker"
    CURRENCY_CONVERTER = "currency_converter"
    CALENDAR_WIDGET = "calendar_widget"
    PROJECT_TIMELINE = "project_timeline"
    HABIT_TRACKER = "habit_tracker"
    STREAK_COUNTER = "streak_counter"
    MOOD_TRACKER = "mood_tracker"
    TRAVEL_DASHBOARD = "travel_dashboard"
    LEARNING_DASHBOARD = "learning_dashboard"
    BUSINESS_DASHBOARD = "business_dashboard"
    HEALTH_DASHBOARD = "health_dashboard"
    WEATHER_WIDGET = "weather_widget"
    DOCUMENT_CHECKLIST = "document_checklist"
    RESOURCE_LIBRARY = "resource_library"
    INVESTMENT_TRACKER = "investment_tracker"
    SKILL_ASSESSMENT = "skill_assessment"
    WORKOUT_TRACKER = "workout_tracker"
    READING_TRACKER = "reading_tracker"
    CAREER_DASHBOARD = "career_dashboard"
    MILESTONE_TIMELINE = "milestone_timeline"
    TASK_MANAGER = "task_manager"
    PROGRESS_CHART = "progress_chart"
    COMPLETION_METER = "completion_meter"
    SIMPLE_SAVINGS_TRACKER = "simple_savings_tracker"
    WEIGHT_TRACKER = "weight_tracker"

    @classmethod
    def parse(cls, module_id: str) -> Optional["ModuleKind"]:
        """Kind for a raw id, or None for strings outside the enum."""
        try:
            return cls(module_id)
        except ValueError:
            return None


@dataclass(frozen=True)
class EligibilityRequirements:
    """
    Conditions a goal must meet for a module to be surfaced.
    Empty tuples and None mean "no constraint".
    """
    goal_categories: Tuple[str, ...] = ()
    agents: Tuple[str, ...] = ()
    min_estimated_cost: Optional[int] = None
    requires_deadline: Optional[bool] = None


@dataclass(frozen=True)
class EligibilityContext:
    goal_category: str
    present_agents: Tuple[str, ...] = ()
    estimated_cost: int = 0
    has_deadline: bool = True


def rejection_reason(req: EligibilityRequirements, ctx: EligibilityContext) -> Optional[str]:
    """First failed requirement as text, None when the context is eligible."""
    if req.goal_categories and ctx.goal_category not in req.goal_categories:
        return f"category '{ctx.goal_category}' not in {list(req.goal_categories)}"
    if req.agents and not any(a in ctx.present_agents for a in req.agents):
        return f"none of agents {list(req.agents)} present"
    if req.min_estimated_cost is not None and ctx.estimated_cost < req.min_estimated_cost:
        return f"estimated cost {ctx.estimated_cost} below {req.min_estimated_cost}"
    if req.requires_deadline is not None and req.requires_deadline != ctx.has_deadline:
        return "deadline presence mismatch"
    return None


@dataclass(frozen=True)
class ModuleCapability:
    kind: ModuleKind
    renderer_ref: str
    title: str
    default_parameters: Dict[str, Any] = field(default_factory=dict, hash=False)
    requirements: EligibilityRequirements = field(default_factory=EligibilityRequirements)

    @property
    def id(self) -> str:
        return self.kind.value

    def is_eligible(self, ctx: EligibilityContext) -> bool:
        return rejection_reason(self.requirements, ctx) is None

    def to_dict(self) -> Dict[str, Any]:
        req = self.requirements
        return {
            "id": self.id,
            "title": self.title,
            "renderer_ref": self.renderer_ref,
            "default_parameters": dict(self.default_parameters),
            "requirements": {
                "goal_categories": list(req.goal_categories),
                "agents": list(req.agents),
                "min_estimated_cost": req.min_estimated_cost,
                "requires_deadline": req.requires_deadline,
            },
        }


@dataclass
class DashboardPanel:
    """One rendered slot of a dashboard; unavailable panels are placeholders."""
    module_id: str
    title: str
    renderer_ref: Optional[str]
    props: Dict[str, Any] = field(default_factory=dict)
    required: bool = False
    available: bool = True
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "module_id": self.module_id,
            "title": self.title,
            "renderer_ref": self.renderer_ref,
            "props": dict(self.props),
            "required": self.required,
            "available": self.available,
            "reason": self.reason,
        }
