"""
Default capability set: one entry per ModuleKind.

RENDERERS and TITLES must cover every kind; build_default_registry() refuses to
start otherwise.
"""
from typing import Any, Dict, Mapping

from goalboard.capability_registry.models import EligibilityRequirements, ModuleKind
from goalboard.capability_registry.registry import CapabilityRegistry, RegistryBuilder
from goalboard.exceptions import ConfigError
from goalboard.logger import get_logger

logger = get_logger("capability_registry.defaults")

K = ModuleKind

RENDERERS: Dict[ModuleKind, str] = {
    K.FINANCIAL_CALCULATOR: "FinancialCalculator",
    K.SMART_ACTION_TIMELINE: "SmartActionTimeline",
    K.PROGRESS_DASHBOARD: "ProgressDashboard",
    K.AGENT_INFO: "AgentInfoPanel",
    K.BUDGET_BREAKDOWN: "BudgetBreakdown",
    K.EXPENSE_TRACKER: "ExpenseTracker",
    K.DEBT_PAYOFF_TRACKER: "DebtPayoffTracker",
    K.CURRENCY_CONVERTER: "CurrencyConverter",
    K.CALENDAR_WIDGET: "CalendarWidget",
    K.PROJECT_TIMELINE: "ProjectTimeline",
    K.HABIT_TRACKER: "HabitTracker",
    K.STREAK_COUNTER: "StreakCounter",
    K.MOOD_TRACKER: "MoodTracker",
    K.TRAVEL_DASHBOARD: "TravelDashboard",
    K.LEARNING_DASHBOARD: "LearningDashboard",
    K.BUSINESS_DASHBOARD: "BusinessDashboard",
    K.HEALTH_DASHBOARD: "HealthDashboard",
    K.WEATHER_WIDGET: "WeatherWidget",
    K.DOCUMENT_CHECKLIST: "DocumentChecklist",
    K.RESOURCE_LIBRARY: "ResourceLibrary",
    K.INVESTMENT_TRACKER: "InvestmentTracker",
    K.SKILL_ASSESSMENT: "SkillAssessment",
    K.WORKOUT_TRACKER: "WorkoutTracker",
    K.READING_TRACKER: "ReadingTracker",
    K.CAREER_DASHBOARD: "CareerDashboard",
    K.MILESTONE_TIMELINE: "MilestoneTimeline",
    K.TASK_MANAGER: "TaskManager",
    K.PROGRESS_CHART: "ProgressChart",
    K.COMPLETION_METER: "CompletionMeter",
    K.SIMPLE_SAVINGS_TRACKER: "SimpleSavingsTracker",
    K.WEIGHT_TRACKER: "WeightTracker",
}

TITLES: Dict[ModuleKind, str] = {
    K.FINANCIAL_CALCULATOR: "Financial Calculator",
    K.SMART_ACTION_TIMELINE: "Smart Action Timeline",
    K.PROGRESS_DASHBOARD: "Progress Dashboard",
    K.AGENT_INFO: "AI Agents",
    K.BUDGET_BREAKDOWN: "Budget Breakdown",
    K.EXPENSE_TRACKER: "Expense Tracker",
    K.DEBT_PAYOFF_TRACKER: "Debt Payoff",
    K.CURRENCY_CONVERTER: "Currency Converter",
    K.CALENDAR_WIDGET: "Calendar",
    K.PROJECT_TIMELINE: "Project Timeline",
    K.HABIT_TRACKER: "Habit Tracker",
    K.STREAK_COUNTER: "Streak Counter",
    K.MOOD_TRACKER: "Mood Journal",
    K.TRAVEL_DASHBOARD: "Travel Planning",
    K.LEARNING_DASHBOARD: "Learning Path",
    K.BUSINESS_DASHBOARD: "Business Metrics",
    K.HEALTH_DASHBOARD: "Health Tracking",
    K.WEATHER_WIDGET: "Weather Forecast",
    K.DOCUMENT_CHECKLIST: "Document Checklist",
    K.RESOURCE_LIBRARY: "Resources",
    K.INVESTMENT_TRACKER: "Investment Portfolio",
    K.SKILL_ASSESSMENT: "Skill Assessment",
    K.WORKOUT_TRACKER: "Workout Log",
    K.READING_TRACKER: "Reading Progress",
    K.CAREER_DASHBOARD: "Career Progress",
    K.MILESTONE_TIMELINE: "Milestone Timeline",
    K.TASK_MANAGER: "Task Manager",
    K.PROGRESS_CHART: "Progress Chart",
    K.COMPLETION_METER: "Completion Meter",
    K.SIMPLE_SAVINGS_TRACKER: "Simple Savings Tracker",
    K.WEIGHT_TRACKER: "Weight Tracker",
}

# Kinds without an entry render with no parameters
DEFAULT_PARAMETERS: Dict[ModuleKind, Dict[str, Any]] = {
    K.FINANCIAL_CALCULATOR: {
        "showDailyView": True, "showWeeklyView": True,
        "showMonthlyView": True, "allowManualUpdate": True,
    },
    K.SMART_ACTION_TIMELINE: {"showTimeline": True, "allowEdit": True},
    K.PROGRESS_DASHBOARD: {"showChart": True, "showMeter": True},
    K.AGENT_INFO: {"showApiUsage": True, "showAgentStatus": True, "showRecommendations": True},
    K.BUDGET_BREAKDOWN: {"chartType": "pie", "showCategories": True, "allowEdit": True},
    K.HABIT_TRACKER: {"showCalendar": True, "showStreaks": True},
    K.STREAK_COUNTER: {"animated": True, "showCelebration": True},
    K.MOOD_TRACKER: {"showCalendar": True, "showInsights": True},
    K.EXPENSE_TRACKER: {"showCategories": True, "allowEdit": True, "showChart": True},
    K.DEBT_PAYOFF_TRACKER: {"strategy": "avalanche", "showProgress": True},
    K.CURRENCY_CONVERTER: {"showFavorites": True, "showChart": True},
    K.CALENDAR_WIDGET: {"showUpcoming": True, "allowEdit": True},
    K.PROJECT_TIMELINE: {"view": "weeks", "showProgress": True, "allowEdit": True},
    K.MILESTONE_TIMELINE: {"showProgress": True, "allowEdit": True},
    K.TASK_MANAGER: {"showCompleted": True, "allowEdit": True},
    K.PROGRESS_CHART: {"chartType": "line", "showGrid": True},
    K.COMPLETION_METER: {"animated": True, "showPercentage": True},
    K.SIMPLE_SAVINGS_TRACKER: {"showChart": True, "allowEdit": True},
    K.LEARNING_DASHBOARD: {"showProgressChart": True, "showSkillRadar": True, "showStudyTime": True},
    K.HEALTH_DASHBOARD: {"showWeightChart": True, "showWorkoutLog": True, "showSleepTracker": True},
    K.BUSINESS_DASHBOARD: {"showRevenueChart": True, "showCustomerMetrics": True, "showKPIs": True},
    K.INVESTMENT_TRACKER: {
        "showPortfolioBreakdown": True, "showPerformanceChart": True,
        "showRebalancing": True, "allowTransactions": True,
    },
    K.RESOURCE_LIBRARY: {"allowAddResources": True, "showCommunityRatings": True, "showProgress": True},
    K.DOCUMENT_CHECKLIST: {"allowEdit": True, "showProgress": True, "showUpload": True},
    K.CAREER_DASHBOARD: {
        "showApplications": True, "showNetworking": True,
        "showSkills": True, "showProgress": True,
    },
    K.WEATHER_WIDGET: {"showForecast": True, "showHourly": True, "showAlerts": True, "compact": False},
    K.SKILL_ASSESSMENT: {"showProgress": True, "showRecommendations": True, "allowEdit": True},
    K.WORKOUT_TRACKER: {"showTimer": True, "showHistory": True, "showProgress": True, "allowEdit": True},
    K.READING_TRACKER: {
        "showProgress": True, "showStatistics": True,
        "showRecommendations": True, "allowEdit": True,
    },
    K.WEIGHT_TRACKER: {"showChart": True, "allowEdit": True},
}

R = EligibilityRequirements

REQUIREMENTS: Dict[ModuleKind, EligibilityRequirements] = {
    K.BUDGET_BREAKDOWN: R(min_estimated_cost=1),
    K.TRAVEL_DASHBOARD: R(goal_categories=("travel",), agents=("travel", "weather")),
    K.LEARNING_DASHBOARD: R(goal_categories=("language", "education", "skill_development")),
    K.HEALTH_DASHBOARD: R(goal_categories=("weight_loss", "fitness", "wellness")),
    K.BUSINESS_DASHBOARD: R(goal_categories=("business", "career")),
    K.INVESTMENT_TRACKER: R(goal_categories=("investment", "financial"), min_estimated_cost=1000),
    K.RESOURCE_LIBRARY: R(goal_categories=("education", "language", "skill_development", "career")),
    K.DOCUMENT_CHECKLIST: R(goal_categories=("travel", "business", "immigration", "education", "legal")),
    K.CAREER_DASHBOARD: R(goal_categories=("career",)),
    K.WEATHER_WIDGET: R(goal_categories=("travel", "fitness", "outdoor"), agents=("weather",)),
    K.SKILL_ASSESSMENT: R(goal_categories=("career", "education", "skill_development")),
    K.WORKOUT_TRACKER: R(goal_categories=("fitness", "weight_loss", "wellness")),
    K.READING_TRACKER: R(goal_categories=("education", "personal_development", "reading")),
    K.WEIGHT_TRACKER: R(goal_categories=("weight_loss", "fitness", "wellness")),
}


def assert_exhaustive(table: Mapping[ModuleKind, Any], name: str) -> None:
    """Raise ConfigError when a ModuleKind has no entry in table."""
    missing = [k.value for k in ModuleKind if k not in table]
    if missing:
        raise ConfigError(f"{name} has no entry for: {', '.join(missing)}")


def build_default_registry() -> CapabilityRegistry:
    assert_exhaustive(RENDERERS, "RENDERERS")
    assert_exhaustive(TITLES, "TITLES")

    builder = RegistryBuilder()
    for kind in ModuleKind:
        builder.register(
            kind,
            RENDERERS[kind],
            DEFAULT_PARAMETERS.get(kind, {}),
            requirements=REQUIREMENTS.get(kind),
            title=TITLES[kind],
        )
    registry = builder.freeze()
    logger.info(f"Capability registry ready with {len(registry)} modules")
    return registry
