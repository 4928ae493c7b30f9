"""
SMART narrative templates, keyed by goal category.
"""
from datetime import date

from goalboard.models import GoalContext, SmartNarrative

DEFAULT_MEASURABLE = "Track daily progress, complete milestones, measure key performance indicators"
DEFAULT_RELEVANT = "For personal growth and life improvement"

MEASURABLE_TEMPLATES = {
    "fitness": "Track workouts, weight, body measurements, strength gains",
    "language": "Complete courses, practice daily, track vocabulary growth, take proficiency tests",
    "savings": "Save specific amount monthly, track expenses, monitor account balance",
    "reading": "Track books completed, pages read, reading time, comprehension notes",
}

RELEVANT_TEMPLATES = {
    "fitness": "For improved health, confidence, and physical well-being",
    "language": "For career advancement, travel, and cultural enrichment",
    "savings": "For financial security, emergency preparedness, and future opportunities",
    "investment": "For long-term wealth building and financial independence",
    "travel": "For cultural experiences, personal growth, and life memories",
    "business": "For financial independence, career growth, and personal fulfillment",
    "career": "For professional advancement, skill development, and increased earning potential",
    "education": "For knowledge expansion, career opportunities, and personal development",
}


def build_narrative(context: GoalContext, duration_days: int, target_date: date) -> SmartNarrative:
    return SmartNarrative(
        specific=context.title,
        measurable=MEASURABLE_TEMPLATES.get(context.category, DEFAULT_MEASURABLE),
        achievable=f"Based on {duration_days} day timeline and available resources",
        relevant=RELEVANT_TEMPLATES.get(context.category, DEFAULT_RELEVANT),
        time_bound=f"Target completion: {target_date.isoformat()}",
    )
