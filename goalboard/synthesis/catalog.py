"""
Static content for synthetic module data.

Every table is keyed by goal category with a "default" entry used for
categories without their own content.
"""
from typing import Any, Dict, List, Mapping

DEFAULT = "default"


def for_category(table: Mapping[str, List[Any]], category: str) -> List[Any]:
    return list(table.get(category) or table[DEFAULT])


SAMPLE_TASKS: Dict[str, List[Dict[str, str]]] = {
    "fitness": [
        {"title": "Plan weekly workout schedule", "description": "Create a balanced routine", "priority": "high", "category": "Planning"},
        {"title": "Track daily calories", "description": "Monitor nutritional intake", "priority": "medium", "category": "Tracking"},
        {"title": "Join local gym", "description": "Research and sign up for gym membership", "priority": "high", "category": "Setup"},
        {"title": "Buy workout equipment", "description": "Purchase necessary gear", "priority": "low", "category": "Equipment"},
    ],
    "savings": [
        {"title": "Set up automatic savings transfer", "description": "Automate monthly savings", "priority": "high", "category": "Setup"},
        {"title": "Review monthly expenses", "description": "Track spending patterns", "priority": "medium", "category": "Analysis"},
        {"title": "Research high-yield savings accounts", "description": "Find better interest rates", "priority": "low", "category": "Research"},
    ],
    DEFAULT: [
        {"title": "Define project scope", "description": "Clarify goals and requirements", "priority": "high", "category": "Planning"},
        {"title": "Create action plan", "description": "Break down into manageable steps", "priority": "high", "category": "Planning"},
        {"title": "Gather necessary resources", "description": "Collect tools and materials", "priority": "medium", "category": "Preparation"},
        {"title": "Set up tracking system", "description": "Monitor progress effectively", "priority": "medium", "category": "Setup"},
    ],
}

BUDGET_SPLITS: Dict[str, List[Dict[str, Any]]] = {
    "travel": [
        {"name": "Transportation", "percentage": 0.4, "color": "#3B82F6"},
        {"name": "Accommodation", "percentage": 0.3, "color": "#10B981"},
        {"name": "Food & Dining", "percentage": 0.2, "color": "#F59E0B"},
        {"name": "Activities", "percentage": 0.1, "color": "#8B5CF6"},
    ],
    "fitness": [
        {"name": "Gym Membership", "percentage": 0.5, "color": "#3B82F6"},
        {"name": "Equipment", "percentage": 0.3, "color": "#10B981"},
        {"name": "Supplements", "percentage": 0.15, "color": "#F59E0B"},
        {"name": "Coaching", "percentage": 0.05, "color": "#8B5CF6"},
    ],
    DEFAULT: [
        {"name": "Primary Expense", "percentage": 0.6, "color": "#3B82F6"},
        {"name": "Supporting Costs", "percentage": 0.25, "color": "#10B981"},
        {"name": "Miscellaneous", "percentage": 0.15, "color": "#F59E0B"},
    ],
}

EXPENSE_CATEGORIES: Dict[str, List[str]] = {
    "travel": ["Transportation", "Accommodation", "Food", "Activities"],
    "fitness": ["Gym", "Equipment", "Supplements", "Coaching"],
    "education": ["Courses", "Books", "Materials", "Certification"],
    DEFAULT: ["Materials", "Tools", "Services", "Miscellaneous"],
}

EXPENSE_DESCRIPTIONS: Dict[str, List[str]] = {
    "travel": ["Flight booking", "Hotel reservation", "Restaurant meal", "Tour ticket"],
    "fitness": ["Gym membership", "Protein powder", "Workout gear", "Personal trainer"],
    "education": ["Online course", "Technical book", "Study materials", "Exam fee"],
    DEFAULT: ["Project expense", "Resource purchase", "Service fee", "Equipment"],
}

RECENT_ACTIVITY: Dict[str, List[str]] = {
    "fitness": ["Completed 45min cardio workout", "Logged daily weight", "Updated meal plan"],
    "savings": ["Made monthly savings transfer", "Reviewed bank statements", "Updated budget spreadsheet"],
    "education": ["Completed Chapter 3", "Submitted assignment", "Attended virtual lecture"],
    DEFAULT: ["Updated progress log", "Completed daily tasks", "Reviewed milestones"],
}

NEXT_ACTIONS: Dict[str, List[str]] = {
    "fitness": ["Schedule next workout session", "Meal prep for the week", "Update fitness tracker"],
    "savings": ["Review this month's expenses", "Research investment options", "Update savings goal"],
    "education": ["Start next course module", "Practice exercises", "Schedule study time"],
    DEFAULT: ["Review current progress", "Plan next phase", "Update timeline"],
}

SMART_ACTIONS: Dict[str, List[Dict[str, str]]] = {
    "fitness": [
        {"title": "Create workout schedule", "description": "Plan weekly exercise routine", "priority": "high", "estimatedTime": "1 hour"},
        {"title": "Track nutrition", "description": "Log daily meals and calories", "priority": "medium", "estimatedTime": "15 min/day"},
        {"title": "Monitor progress", "description": "Weekly weigh-ins and measurements", "priority": "medium", "estimatedTime": "10 minutes"},
        {"title": "Adjust routine", "description": "Modify based on progress", "priority": "low", "estimatedTime": "30 minutes"},
    ],
    DEFAULT: [
        {"title": "Initial planning", "description": "Define scope and requirements", "priority": "high", "estimatedTime": "2 hours"},
        {"title": "Resource gathering", "description": "Collect necessary materials", "priority": "high", "estimatedTime": "1 hour"},
        {"title": "Implementation", "description": "Execute the main work", "priority": "high", "estimatedTime": "10+ hours"},
        {"title": "Review and adjust", "description": "Evaluate and optimize", "priority": "medium", "estimatedTime": "1 hour"},
    ],
}

HABITS: Dict[str, List[Dict[str, Any]]] = {
    "fitness": [
        {"name": "Daily workout", "target": 5},
        {"name": "Steps walked", "target": 10000},
        {"name": "Water intake", "target": 8},
    ],
    "education": [
        {"name": "Study time", "target": 2},
        {"name": "Practice problems", "target": 10},
        {"name": "Reading", "target": 1},
    ],
    DEFAULT: [
        {"name": "Goal review", "target": 1},
        {"name": "Planning time", "target": 30},
        {"name": "Progress update", "target": 1},
    ],
}

SKILLS: Dict[str, List[Dict[str, Any]]] = {
    "education": [
        {"name": "JavaScript", "startLevel": 4, "targetLevel": 8, "category": "Programming"},
        {"name": "React", "startLevel": 3, "targetLevel": 7, "category": "Frontend"},
        {"name": "Node.js", "startLevel": 2, "targetLevel": 6, "category": "Backend"},
    ],
    "language": [
        {"name": "Speaking", "startLevel": 3, "targetLevel": 8, "category": "Oral"},
        {"name": "Listening", "startLevel": 4, "targetLevel": 8, "category": "Comprehension"},
        {"name": "Writing", "startLevel": 2, "targetLevel": 7, "category": "Written"},
    ],
    DEFAULT: [
        {"name": "Core Skill", "startLevel": 3, "targetLevel": 7, "category": "Primary"},
        {"name": "Supporting Skill", "startLevel": 4, "targetLevel": 6, "category": "Secondary"},
    ],
}

MILESTONES: Dict[str, List[Dict[str, str]]] = {
    "fitness": [
        {"title": "Initial Assessment", "description": "Baseline fitness measurements", "category": "Assessment"},
        {"title": "First Month Complete", "description": "Consistency established", "category": "Habit"},
        {"title": "Strength Gains", "description": "Noticeable improvement in performance", "category": "Progress"},
        {"title": "Goal Achievement", "description": "Target fitness level reached", "category": "Completion"},
    ],
    "savings": [
        {"title": "Budget Established", "description": "Monthly savings plan created", "category": "Planning"},
        {"title": "First Quarter Saved", "description": "25% of goal amount saved", "category": "Progress"},
        {"title": "Halfway Point", "description": "50% of goal amount saved", "category": "Progress"},
        {"title": "Goal Achieved", "description": "Full savings target reached", "category": "Completion"},
    ],
    DEFAULT: [
        {"title": "Planning Complete", "description": "Initial setup and planning finished", "category": "Planning"},
        {"title": "First Phase Done", "description": "Initial implementation completed", "category": "Progress"},
        {"title": "Midpoint Review", "description": "Progress evaluation and adjustments", "category": "Review"},
        {"title": "Final Achievement", "description": "Goal successfully completed", "category": "Completion"},
    ],
}

PROJECT_PHASES: Dict[str, List[Dict[str, str]]] = {
    "business": [
        {"name": "Market Research", "description": "Analyze target market and competition"},
        {"name": "Business Planning", "description": "Develop business model and strategy"},
        {"name": "Product Development", "description": "Build minimum viable product"},
        {"name": "Launch & Marketing", "description": "Go to market and acquire customers"},
        {"name": "Growth & Scale", "description": "Optimize operations and expand"},
    ],
    "education": [
        {"name": "Foundation Learning", "description": "Master basic concepts and principles"},
        {"name": "Practical Application", "description": "Apply knowledge through projects"},
        {"name": "Advanced Topics", "description": "Explore complex subject areas"},
        {"name": "Certification Prep", "description": "Prepare for final assessment"},
    ],
    DEFAULT: [
        {"name": "Preparation", "description": "Gather resources and plan approach"},
        {"name": "Implementation", "description": "Execute main work and activities"},
        {"name": "Optimization", "description": "Refine and improve results"},
        {"name": "Completion", "description": "Final review and goal achievement"},
    ],
}

RESOURCES: Dict[str, List[Dict[str, str]]] = {
    "education": [
        {"title": "JavaScript Fundamentals Course", "type": "Course", "url": "#", "category": "Programming"},
        {"title": "React Documentation", "type": "Article", "url": "#", "category": "Framework"},
        {"title": "Clean Code Book", "type": "Book", "url": "#", "category": "Best Practices"},
        {"title": "Coding Interview Prep", "type": "Video", "url": "#", "category": "Career"},
    ],
    "fitness": [
        {"title": "Beginner Workout Guide", "type": "Article", "url": "#", "category": "Training"},
        {"title": "Nutrition Basics", "type": "Video", "url": "#", "category": "Diet"},
        {"title": "Fitness Tracking App", "type": "Tool", "url": "#", "category": "Tracking"},
        {"title": "Meal Planning Guide", "type": "Book", "url": "#", "category": "Nutrition"},
    ],
    DEFAULT: [
        {"title": "Getting Started Guide", "type": "Article", "url": "#", "category": "Basics"},
        {"title": "Best Practices Video", "type": "Video", "url": "#", "category": "Tips"},
        {"title": "Reference Manual", "type": "Book", "url": "#", "category": "Reference"},
        {"title": "Progress Tracker", "type": "Tool", "url": "#", "category": "Tools"},
    ],
}

RESOURCE_TYPES = ["Articles", "Videos", "Books", "Courses", "Tools"]

# due_in_days is relative to the synthesis date
DOCUMENTS: Dict[str, List[Dict[str, Any]]] = {
    "immigration": [
        {"name": "Passport", "required": True, "due_in_days": 30, "category": "Identity", "description": "Valid passport with 6+ months validity"},
        {"name": "Birth Certificate", "required": True, "due_in_days": 45, "category": "Identity", "description": "Official birth certificate copy"},
        {"name": "Police Clearance", "required": True, "due_in_days": 60, "category": "Background", "description": "Criminal background check"},
        {"name": "Medical Exam", "required": True, "due_in_days": 90, "category": "Health", "description": "Immigration medical examination"},
    ],
    "travel": [
        {"name": "Travel Insurance", "required": True, "due_in_days": 14, "category": "Insurance", "description": "Comprehensive travel coverage"},
        {"name": "Visa Application", "required": True, "due_in_days": 30, "category": "Documentation", "description": "Tourist/visitor visa"},
        {"name": "Hotel Bookings", "required": False, "due_in_days": 21, "category": "Accommodation", "description": "Confirmed hotel reservations"},
    ],
    DEFAULT: [
        {"name": "Initial Documentation", "required": True, "due_in_days": 7, "category": "Setup", "description": "Basic required documents"},
        {"name": "Supporting Materials", "required": False, "due_in_days": 21, "category": "Optional", "description": "Additional helpful documents"},
    ],
}

AGENT_NAMES: Dict[str, str] = {
    "financial": "Financial Advisor AI",
    "health": "Health Coach AI",
    "learning": "Learning Assistant AI",
    "travel": "Travel Planner AI",
    "business": "Business Advisor AI",
    "research": "Research Assistant AI",
    "weather": "Weather Assistant AI",
}

# (min, span) for the monthly API usage draw
AGENT_USAGE: Dict[str, tuple] = {
    "financial": (20, 50),
    "health": (15, 40),
    "learning": (25, 60),
    "travel": (10, 30),
    "business": (20, 45),
    "research": (15, 35),
    "weather": (5, 20),
}

INVESTMENT_HOLDINGS = [
    {"symbol": "VTI", "name": "Total Stock Market ETF", "allocation": 40},
    {"symbol": "VTIAX", "name": "International Stock ETF", "allocation": 30},
    {"symbol": "BND", "name": "Total Bond Market ETF", "allocation": 30},
]

RISK_LEVELS = (
    (("conservative", "safe"), "Conservative"),
    (("aggressive", "growth"), "Aggressive"),
)

CURRENCIES = ["USD", "EUR", "GBP", "JPY", "CAD", "AUD"]

WEATHER_CONDITIONS = ["Sunny", "Cloudy", "Rainy", "Partly Cloudy"]

WORKOUT_TYPES = ["Cardio", "Strength", "Yoga", "HIIT"]

DESTINATIONS = ["japan", "europe", "asia", "italy", "france", "spain", "thailand", "india"]

COMPLETION_SEGMENTS = [
    ("Planning", "#10B981"),
    ("Execution", "#3B82F6"),
    ("Refinement", "#8B5CF6"),
    ("Completion", "#F59E0B"),
]

LEARNING_SKILLS = [
    {"skill": "JavaScript", "base": 6, "gain": 3},
    {"skill": "React", "base": 5, "gain": 4},
    {"skill": "Node.js", "base": 4, "gain": 3},
]

CAREER_APPLICATIONS = [
    {"company": "TechCorp Inc", "position": "Senior Developer", "status": "Pending"},
    {"company": "StartupXYZ", "position": "Full Stack Engineer", "status": "Interview"},
    {"company": "BigTech Co", "position": "Software Engineer", "status": "Rejected"},
]

CAREER_SKILL_GAPS = ["Cloud Architecture", "Machine Learning", "DevOps"]
