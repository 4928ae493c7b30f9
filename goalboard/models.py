"""
Core Data Models for Goalboard.
Defines the request context, the derived estimation and the persisted snapshot.
"""
from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional


class ComplexityTier(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class GoalPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GoalStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    PAUSED = "paused"


@dataclass(frozen=True)
class GoalContext:
    """Free-text goal plus optional user hints. Request-scoped."""
    title: str
    description: str
    category: str
    user_location: Optional[str] = None
    user_budget: Optional[float] = None
    user_timeframe: Optional[str] = None
    user_experience: Optional[str] = None

    @property
    def content(self) -> str:
        """Lowercased title + description, the text every keyword rule scans."""
        return f"{self.title or ''} {self.description or ''}".lower()


@dataclass
class CreateGoalRequest:
    """Inbound payload of create_goal."""
    title: str
    description: str
    category: str
    priority: str = GoalPriority.MEDIUM.value
    user_location: Optional[str] = None
    user_budget: Optional[float] = None
    user_timeframe: Optional[str] = None
    user_experience: Optional[str] = None
    user_id: Optional[str] = None

    def to_context(self) -> GoalContext:
        return GoalContext(
            title=self.title,
            description=self.description or "",
            category=self.category,
            user_location=self.user_location,
            user_budget=self.user_budget,
            user_timeframe=self.user_timeframe,
            user_experience=self.user_experience,
        )


@dataclass
class SmartNarrative:
    """The five SMART-goal text fields."""
    specific: str = ""
    measurable: str = ""
    achievable: str = ""
    relevant: str = ""
    time_bound: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SmartNarrative":
        data = data or {}
        return cls(
            specific=str(data.get("specific", "")),
            measurable=str(data.get("measurable", "")),
            achievable=str(data.get("achievable", "")),
            relevant=str(data.get("relevant", "")),
            time_bound=str(data.get("time_bound", "")),
        )


@dataclass
class Estimation:
    """Derived plan for a goal."""
    estimated_cost: int
    target_date: date
    duration_days: int
    timeframe_label: str
    complexity: ComplexityTier
    required_modules: List[str] = field(default_factory=list)
    contextual_modules: List[str] = field(default_factory=list)
    optional_modules: List[str] = field(default_factory=list)
    suggested_agents: List[str] = field(default_factory=list)
    narrative: SmartNarrative = field(default_factory=SmartNarrative)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "estimated_cost": self.estimated_cost,
            "target_date": self.target_date.isoformat(),
            "duration_days": self.duration_days,
            "timeframe_label": self.timeframe_label,
            "complexity": self.complexity.value,
            "required_modules": list(self.required_modules),
            "contextual_modules": list(self.contextual_modules),
            "optional_modules": list(self.optional_modules),
            "suggested_agents": list(self.suggested_agents),
            "narrative": self.narrative.to_dict(),
        }


@dataclass
class GoalSnapshot:
    """
    Flattened, persisted goal record.
    Sub-objects are stored as JSON strings; see goalboard.snapshot.
    """
    id: str
    user_id: str
    title: str
    description: str
    category: str
    priority: str
    status: str
    estimated_cost: int
    current_saved: int
    target_date: str  # ISO date
    feasibility_score: int
    narrative: str = "{}"
    assigned_agents: str = "[]"
    module_dataset: str = "{}"
    active_module_ids: str = "[]"
    module_partition: Optional[str] = None
    user_location: Optional[str] = None
    user_budget: Optional[float] = None
    user_timeframe: Optional[str] = None
    user_experience: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_context(self) -> GoalContext:
        return GoalContext(
            title=self.title,
            description=self.description,
            category=self.category,
            user_location=self.user_location,
            user_budget=self.user_budget,
            user_timeframe=self.user_timeframe,
            user_experience=self.user_experience,
        )


@dataclass
class GoalWithDashboard:
    """A snapshot together with its decoded dashboard payload."""
    snapshot: GoalSnapshot
    dashboard_components: List[str]
    module_dataset: Dict[str, Any]
    estimation: Estimation
    panels: List[Any] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.snapshot.id

    def to_dict(self) -> Dict[str, Any]:
        goal = asdict(self.snapshot)
        goal["dashboard_components"] = list(self.dashboard_components)
        goal["module_dataset"] = self.module_dataset
        goal["estimation"] = self.estimation.to_dict()
        goal["panels"] = [p.to_dict() for p in self.panels]
        return goal
