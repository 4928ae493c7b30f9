"""
Per-module synthetic data generators.

Each generator maps a GenerationContext to the record shape its renderer
expects. Progress and elapsed time are read from ctx.timeline only; random
noise comes from ctx.rng only. Record keys are camelCase to match the
rendering contract.
"""
from dataclasses import dataclass, field
from datetime import date, timedelta
from random import Random
from typing import Any, Callable, Dict, List, Tuple

from goalboard.capability_registry.models import ModuleKind
from goalboard.models import GoalContext
from goalboard.synthesis import catalog
from goalboard.synthesis.timeline import ProgressTimeline
from goalboard.utils import round_to

Record = Dict[str, Any]


@dataclass
class GenerationContext:
    goal: GoalContext
    estimated_cost: int
    timeline: ProgressTimeline
    rng: Random
    agents: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def category(self) -> str:
        return self.goal.category

    @property
    def today(self) -> date:
        return self.timeline.today

    @property
    def progress(self) -> float:
        return self.timeline.progress_fraction

    @property
    def current_saved(self) -> int:
        return int(round(self.estimated_cost * self.progress))

    def days_ago(self, n: int) -> str:
        return (self.today - timedelta(days=n)).isoformat()

    def days_from_now(self, n: float) -> str:
        return (self.today + timedelta(days=int(round(n)))).isoformat()

    def plan_date(self, offset: float) -> str:
        """Date offset days after the plan started."""
        return self.timeline.date_at(offset).isoformat()

    def noise(self, low: float, high: float) -> float:
        return self.rng.uniform(low, high)


def _month_label(d: date) -> str:
    return d.strftime("%b")


# === Core ===

def agent_info(ctx: GenerationContext) -> Record:
    agent_ids = list(ctx.agents) or ["research"]
    active = []
    for agent_id in agent_ids:
        low, span = catalog.AGENT_USAGE.get(agent_id, (10, 30))
        active.append({
            "id": agent_id,
            "name": catalog.AGENT_NAMES.get(agent_id, f"{agent_id.title()} AI"),
            "status": "active",
            "apiUsage": low + ctx.rng.randrange(span),
            "lastActive": ctx.days_ago(ctx.rng.randrange(2)),
        })
    return {
        "activeAgents": active,
        "totalApiCalls": 50 + ctx.rng.randrange(200),
        "costThisMonth": round_to(ctx.noise(5, 20)),
    }


def task_manager(ctx: GenerationContext) -> Record:
    tasks = catalog.for_category(catalog.SAMPLE_TASKS, ctx.category)
    completed = int(len(tasks) * ctx.progress)
    return {
        "tasks": [
            {
                "id": f"task-{i}",
                "title": t["title"],
                "description": t["description"],
                "completed": i < completed,
                "priority": t["priority"],
                "dueDate": ctx.days_from_now(ctx.rng.randrange(1, 31)),
                "category": t["category"],
            }
            for i, t in enumerate(tasks)
        ],
        "completedCount": completed,
        "totalCount": len(tasks),
        "overdueTasks": ctx.rng.randrange(3),
    }


def completion_meter(ctx: GenerationContext) -> Record:
    p = ctx.progress
    segments = []
    for i, (label, color) in enumerate(catalog.COMPLETION_SEGMENTS):
        value = min(100.0, max(0.0, (p - 0.25 * i) * 400))
        segments.append({"label": label, "value": round_to(value), "color": color})
    return {
        "currentProgress": ctx.timeline.percent_complete,
        "targetProgress": 100,
        "progressSegments": segments,
    }


# === Financial ===

def financial_calculator(ctx: GenerationContext) -> Record:
    cost = ctx.estimated_cost
    daily = cost / ctx.timeline.total_days if ctx.timeline.total_days else float(cost)
    saved = ctx.current_saved
    return {
        "targetAmount": cost,
        "currentSaved": saved,
        "remainingAmount": cost - saved,
        "dailyNeeded": round_to(daily),
        "weeklyNeeded": round_to(daily * 7),
        "monthlyNeeded": round_to(daily * 30),
        "daysRemaining": ctx.timeline.days_remaining,
        "projectedCompletion": ctx.timeline.projected_completion.isoformat(),
    }


def simple_savings_tracker(ctx: GenerationContext) -> Record:
    cost = ctx.estimated_cost
    return {
        "goalAmount": cost,
        "currentAmount": ctx.current_saved,
        "progressPercentage": ctx.timeline.percent_complete,
        "monthlyContributions": [
            {
                "month": _month_label(ctx.today - timedelta(days=(5 - i) * 30)),
                "amount": int(round(cost / 12 * ctx.noise(0.8, 1.2))),
            }
            for i in range(6)
        ],
    }


def budget_breakdown(ctx: GenerationContext) -> Record:
    cost = ctx.estimated_cost
    return {
        "totalBudget": cost,
        "categories": [
            {
                "name": c["name"],
                "allocated": int(round(cost * c["percentage"])),
                "spent": int(round(cost * c["percentage"] * ctx.noise(0.3, 0.7))),
                "color": c["color"],
            }
            for c in catalog.for_category(catalog.BUDGET_SPLITS, ctx.category)
        ],
    }


def expense_tracker(ctx: GenerationContext) -> Record:
    daily_average = ctx.estimated_cost / 365
    categories = catalog.for_category(catalog.EXPENSE_CATEGORIES, ctx.category)
    descriptions = catalog.for_category(catalog.EXPENSE_DESCRIPTIONS, ctx.category)

    expenses = []
    for i in range(min(30, ctx.timeline.elapsed_days)):
        if ctx.rng.random() > 0.3:
            expenses.append({
                "date": ctx.days_ago(i),
                "amount": round_to(daily_average * ctx.noise(0.5, 1.5)),
                "category": ctx.rng.choice(categories),
                "description": ctx.rng.choice(descriptions),
            })

    totals: Dict[str, float] = {}
    for e in expenses:
        totals[e["category"]] = totals.get(e["category"], 0.0) + e["amount"]
    top = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)[:3]

    return {
        "recentExpenses": expenses[:10],
        "totalThisMonth": round_to(sum(e["amount"] for e in expenses)),
        "avgDailySpend": round_to(daily_average),
        "topCategories": [{"name": name, "amount": round_to(amount)} for name, amount in top],
    }


def _risk_level(content: str) -> str:
    for keywords, label in catalog.RISK_LEVELS:
        if any(k in content for k in keywords):
            return label
    return "Moderate"


def investment_tracker(ctx: GenerationContext) -> Record:
    value = ctx.current_saved
    return_rate = ctx.noise(0.05, 0.20)
    return {
        "portfolioValue": value,
        "targetValue": ctx.estimated_cost,
        "totalReturn": int(round(value * return_rate)),
        "ytdReturn": round_to(return_rate * 100, 1),
        "monthlyContribution": int(round(ctx.estimated_cost / 24)),
        "riskLevel": _risk_level(ctx.goal.content),
        "topHoldings": [
            dict(h, value=round_to(value * h["allocation"] / 100))
            for h in catalog.INVESTMENT_HOLDINGS
        ],
    }


def debt_payoff_tracker(ctx: GenerationContext) -> Record:
    debt = ctx.estimated_cost
    paid = ctx.current_saved
    months = max(1.0, ctx.timeline.total_days / 30)
    return {
        "originalDebt": debt,
        "currentBalance": debt - paid,
        "totalPaid": paid,
        "monthlyPayment": int(round(debt / months)),
        "payoffDate": ctx.timeline.projected_completion.isoformat(),
        "daysRemaining": ctx.timeline.days_remaining,
        "interestSaved": int(round(debt * 0.15 * ctx.progress)),
    }


def currency_converter(ctx: GenerationContext) -> Record:
    return {
        "baseCurrency": "USD",
        "targetCurrency": "EUR",
        "exchangeRate": round_to(ctx.noise(0.85, 0.95), 4),
        "supportedCurrencies": list(catalog.CURRENCIES),
        "lastUpdated": ctx.today.isoformat(),
        "isPlaceholder": True,
    }


# === Progress ===

def progress_chart(ctx: GenerationContext) -> Record:
    points = min(30, ctx.timeline.elapsed_days)
    data = []
    for i in range(points):
        share = i / points
        data.append({
            "date": ctx.days_ago(points - i - 1),
            "progress": int(round(share * ctx.progress * 100)),
            "target": int(round(share * 100)),
        })
    return {
        "data": data,
        "currentProgress": ctx.timeline.percent_complete,
        "trend": "increasing" if ctx.progress > 0.5 else "steady",
    }


def milestone_timeline(ctx: GenerationContext) -> Record:
    milestones = catalog.for_category(catalog.MILESTONES, ctx.category)
    n = len(milestones)
    step = ctx.timeline.total_days / n
    return {
        "milestones": [
            {
                "id": f"milestone-{i}",
                "title": m["title"],
                "description": m["description"],
                "date": ctx.plan_date(step * i),
                "completed": i / n < ctx.progress,
                "category": m["category"],
            }
            for i, m in enumerate(milestones)
        ],
    }


def progress_dashboard(ctx: GenerationContext) -> Record:
    pct = ctx.timeline.percent_complete
    efficiency = int(round(15 + 85 * ctx.progress))
    return {
        "overallProgress": pct,
        "timeElapsed": pct,
        "daysRemaining": ctx.timeline.days_remaining,
        "keyMetrics": [
            {"label": "Completion Rate", "value": f"{pct}%", "trend": "up"},
            {"label": "Days Remaining", "value": ctx.timeline.days_remaining, "trend": "down"},
            {"label": "Efficiency Score", "value": efficiency, "trend": "up"},
        ],
        "recentActivity": [
            {"action": action, "timestamp": ctx.days_ago(ctx.rng.randrange(7))}
            for action in catalog.for_category(catalog.RECENT_ACTIVITY, ctx.category)[:3]
        ],
        "nextActions": catalog.for_category(catalog.NEXT_ACTIONS, ctx.category),
    }


def smart_action_timeline(ctx: GenerationContext) -> Record:
    actions = catalog.for_category(catalog.SMART_ACTIONS, ctx.category)
    n = len(actions)
    step = ctx.timeline.total_days / n
    return {
        "actions": [
            {
                "id": f"action-{i}",
                "title": a["title"],
                "description": a["description"],
                "dueDate": ctx.plan_date(step * i),
                "completed": i / n < ctx.progress,
                "priority": a["priority"],
                "estimatedTime": a["estimatedTime"],
            }
            for i, a in enumerate(actions)
        ],
    }


# === Tracking ===

def habit_tracker(ctx: GenerationContext) -> Record:
    tracking_days = min(30, ctx.timeline.elapsed_days)
    habits = []
    for i, h in enumerate(catalog.for_category(catalog.HABITS, ctx.category)):
        habits.append({
            "id": f"habit-{i}",
            "name": h["name"],
            "target": h["target"],
            "current": int(h["target"] * ctx.noise(0.6, 0.9)),
            "streak": ctx.rng.randrange(tracking_days) if tracking_days else 0,
            "completionRate": int(round(ctx.noise(60, 90))),
        })
    return {
        "habits": habits,
        "overallCompletionRate": int(round(ctx.noise(65, 90))),
    }


def streak_counter(ctx: GenerationContext) -> Record:
    elapsed = ctx.timeline.elapsed_days
    longest = int(elapsed * 0.8)
    return {
        "currentStreak": int(longest * ctx.noise(0.7, 1.0)),
        "longestStreak": longest,
        "totalActiveDays": int(elapsed * (0.6 + ctx.progress * 0.3)),
        "streakHistory": [
            {"date": ctx.days_ago(6 - i), "active": ctx.rng.random() > 0.2}
            for i in range(7)
        ],
    }


def mood_tracker(ctx: GenerationContext) -> Record:
    days = min(30, ctx.timeline.elapsed_days)
    moods = [
        {
            "date": ctx.days_ago(days - i - 1),
            "mood": ctx.rng.randint(1, 5),
            "energy": ctx.rng.randint(1, 5),
            "motivation": ctx.rng.randint(1, 5),
        }
        for i in range(days)
    ]
    average = round_to(sum(m["mood"] for m in moods) / len(moods), 1) if moods else 0.0
    return {
        "recentMoods": moods,
        "averageMood": average,
        "moodTrend": "improving" if ctx.rng.random() > 0.5 else "stable",
    }


def skill_assessment(ctx: GenerationContext) -> Record:
    skills = catalog.for_category(catalog.SKILLS, ctx.category)
    p = ctx.progress
    start_avg = sum(s["startLevel"] for s in skills) / len(skills)
    return {
        "skills": [
            {
                "name": s["name"],
                "currentLevel": int(round(s["startLevel"] + (s["targetLevel"] - s["startLevel"]) * p)),
                "targetLevel": s["targetLevel"],
                "progress": ctx.timeline.percent_complete,
                "category": s["category"],
            }
            for s in skills
        ],
        "overallSkillLevel": int(round(start_avg + p * 3)),
        "recommendedFocus": ctx.rng.choice(skills)["name"],
    }


def reading_tracker(ctx: GenerationContext) -> Record:
    target_books = 52 if ctx.category == "reading" else 12
    books_read = int(target_books * ctx.progress)
    return {
        "booksRead": books_read,
        "targetBooks": target_books,
        "pagesRead": books_read * 250 + ctx.rng.randrange(100),
        "targetPages": target_books * 250,
        "averageRating": round_to(ctx.noise(3.5, 5.0), 1),
        "readingStreak": min(ctx.timeline.elapsed_days, 10 + ctx.rng.randrange(50)),
        "currentBook": {
            "title": "Sample Book Title",
            "author": "Sample Author",
            "progress": ctx.rng.randrange(101),
            "genre": "Non-fiction",
        },
        "monthlyGoal": -(-target_books // 12),
        "monthlyProgress": int(target_books / 12 * ctx.progress),
    }


def workout_tracker(ctx: GenerationContext) -> Record:
    workouts = int(ctx.timeline.elapsed_days * 0.6)
    return {
        "workoutsThisMonth": min(workouts, 30),
        "targetWorkouts": 20,
        "totalWorkouts": workouts,
        "averageIntensity": round_to(ctx.noise(6, 9), 1),
        "caloriesBurned": int(workouts * ctx.noise(200, 400)),
        "favoriteWorkout": "Cardio",
        "recentWorkouts": [
            {
                "date": ctx.days_ago(i),
                "type": ctx.rng.choice(catalog.WORKOUT_TYPES),
                "duration": int(round(ctx.noise(30, 90))),
                "calories": int(round(ctx.noise(150, 450))),
            }
            for i in range(min(7, workouts))
        ],
    }


def _weight_series(ctx: GenerationContext, start: float, total_loss: float) -> List[Record]:
    current = start - ctx.progress * total_loss
    return [
        {"date": ctx.days_ago(6 - i), "weight": round_to(current + ctx.noise(-1, 1), 1)}
        for i in range(7)
    ]


def weight_tracker(ctx: GenerationContext) -> Record:
    start, target = 170.0, 155.0
    current = start - ctx.progress * (start - target)
    return {
        "startWeight": start,
        "currentWeight": round_to(current, 1),
        "targetWeight": target,
        "weightLost": round_to(start - current, 1),
        "percentToGoal": ctx.timeline.percent_complete,
        "unit": "lbs",
        "entries": _weight_series(ctx, start, start - target),
    }


# === Planning ===

def calendar_widget(ctx: GenerationContext) -> Record:
    count = 5
    step = ctx.timeline.total_days / count
    events = [
        {
            "id": f"event-{i}",
            "title": f"Milestone {i}",
            "date": ctx.days_from_now(step * i),
            "type": "milestone",
            "description": f"Important milestone checkpoint {i}",
        }
        for i in range(1, count + 1)
    ]
    return {
        "targetDate": ctx.timeline.target_date.isoformat(),
        "daysRemaining": ctx.timeline.days_remaining,
        "upcomingEvents": events[:3],
        "allEvents": events,
    }


def project_timeline(ctx: GenerationContext) -> Record:
    phases = catalog.for_category(catalog.PROJECT_PHASES, ctx.category)
    n = len(phases)
    step = ctx.timeline.total_days / n
    records = []
    for i, phase in enumerate(phases):
        phase_progress = max(0.0, min(1.0, ctx.progress * n - i))
        if phase_progress == 1:
            status = "completed"
        elif phase_progress > 0:
            status = "in-progress"
        else:
            status = "pending"
        records.append({
            "id": f"phase-{i}",
            "name": phase["name"],
            "description": phase["description"],
            "startDate": ctx.plan_date(step * i),
            "endDate": ctx.plan_date(step * (i + 1)),
            "progress": int(round(phase_progress * 100)),
            "status": status,
        })
    return {"phases": records}


def resource_library(ctx: GenerationContext) -> Record:
    resources = catalog.for_category(catalog.RESOURCES, ctx.category)
    return {
        "totalResources": len(resources),
        "categories": list(catalog.RESOURCE_TYPES),
        "resources": [
            dict(
                r,
                id=f"resource-{i}",
                rating=round_to(ctx.noise(3.5, 5.0), 1),
                accessed=ctx.rng.random() > 0.7,
            )
            for i, r in enumerate(resources)
        ],
        "recentlyAdded": resources[:3],
    }


def document_checklist(ctx: GenerationContext) -> Record:
    docs = catalog.for_category(catalog.DOCUMENTS, ctx.category)
    completed = int(len(docs) * ctx.progress)
    records = [
        {
            "id": f"doc-{i}",
            "name": d["name"],
            "required": d["required"],
            "completed": i < completed,
            "dueDate": (ctx.today + timedelta(days=d["due_in_days"])).isoformat(),
            "category": d["category"],
            "description": d["description"],
        }
        for i, d in enumerate(docs)
    ]
    upcoming = [
        r for r, d in zip(records, docs)
        if not r["completed"] and d["due_in_days"] < 30
    ]
    return {
        "documents": records,
        "completedCount": completed,
        "totalCount": len(records),
        "upcomingDeadlines": upcoming,
    }


def weather_widget(ctx: GenerationContext) -> Record:
    return {
        "currentWeather": {
            "location": ctx.goal.user_location or "Current Location",
            "temperature": int(round(ctx.noise(15, 35))),
            "condition": ctx.rng.choice(catalog.WEATHER_CONDITIONS),
            "humidity": int(round(ctx.noise(40, 80))),
            "windSpeed": int(round(ctx.noise(5, 20))),
        },
        "forecast": [
            {
                "date": (ctx.today + timedelta(days=i + 1)).isoformat(),
                "high": int(round(ctx.noise(18, 33))),
                "low": int(round(ctx.noise(10, 20))),
                "condition": ctx.rng.choice(catalog.WEATHER_CONDITIONS),
            }
            for i in range(5)
        ],
        "isPlaceholder": True,
    }


# === Specialized dashboards ===

def travel_dashboard(ctx: GenerationContext) -> Record:
    content = ctx.goal.content
    destinations = [d.title() for d in catalog.DESTINATIONS if d in content] or ["Destination TBD"]
    splits = catalog.for_category(catalog.BUDGET_SPLITS, "travel")
    return {
        "destinations": destinations,
        "tripBudget": ctx.estimated_cost,
        "savedSoFar": ctx.current_saved,
        "departureDate": ctx.timeline.target_date.isoformat(),
        "daysRemaining": ctx.timeline.days_remaining,
        "budgetBreakdown": [
            {"name": s["name"], "amount": int(round(ctx.estimated_cost * s["percentage"]))}
            for s in splits
        ],
        "flightOptions": [],
        "isPlaceholder": True,
    }


def health_dashboard(ctx: GenerationContext) -> Record:
    p = ctx.progress
    return {
        "currentWeight": int(round(170 - p * 15)),
        "targetWeight": 155,
        "weightLoss": int(round(p * 15)),
        "workoutsThisWeek": ctx.rng.randint(1, 6),
        "caloriesBurned": int(2000 * p + ctx.noise(0, 500)),
        "sleepAverage": round_to(ctx.noise(7, 8), 1),
        "waterIntake": int(round(ctx.noise(6, 10))),
        "healthScore": int(round(70 + p * 25)),
        "vitals": {
            "heartRate": int(round(ctx.noise(65, 85))),
            "bloodPressure": f"{int(round(ctx.noise(110, 130)))}/{int(round(ctx.noise(70, 85)))}",
            "steps": int(ctx.noise(6000, 12000)),
        },
        "weeklyProgress": [
            dict(entry, workoutMinutes=int(ctx.noise(30, 90)) if ctx.rng.random() > 0.3 else 0)
            for entry in _weight_series(ctx, 170.0, 15.0)
        ],
    }


def learning_dashboard(ctx: GenerationContext) -> Record:
    p = ctx.progress
    elapsed = ctx.timeline.elapsed_days
    return {
        "coursesEnrolled": 3,
        "coursesCompleted": int(3 * p),
        "totalLearningHours": int(elapsed * 0.5 + ctx.noise(0, elapsed * 0.3)),
        "skillsImproved": int(5 + p * 10),
        "certificationsEarned": int(p * 3),
        "currentCourse": {
            "name": "Advanced JavaScript Concepts",
            "progress": ctx.timeline.percent_complete,
            "nextLesson": "Async/Await Patterns",
            "timeRemaining": "2.5 hours",
        },
        "skillProgress": [
            {"skill": s["skill"], "level": int(round(s["base"] + p * s["gain"])), "maxLevel": 10}
            for s in catalog.LEARNING_SKILLS
        ],
        "weeklyStudyTime": [
            {
                "date": ctx.days_ago(6 - i),
                "minutes": int(ctx.noise(30, 150)) if ctx.rng.random() > 0.2 else 0,
            }
            for i in range(7)
        ],
    }


def business_dashboard(ctx: GenerationContext) -> Record:
    p = ctx.progress
    target_revenue = int(round(ctx.estimated_cost * 0.1))
    revenue = int(round(ctx.estimated_cost * 0.1 * p))
    customers = int(50 + p * 150)
    conversion = round_to(2 + p * 3, 1)
    pct = ctx.timeline.percent_complete
    return {
        "monthlyRevenue": revenue,
        "targetRevenue": target_revenue,
        "totalCustomers": customers,
        "newCustomersThisMonth": int(10 + p * 20),
        "conversionRate": conversion,
        "avgOrderValue": int(round(revenue / max(1, customers))),
        "profitMargin": round_to(15 + p * 10, 1),
        "businessGoals": [
            {"metric": "Revenue", "current": revenue, "target": target_revenue, "progress": pct},
            {"metric": "Customers", "current": customers, "target": 200, "progress": pct},
            {"metric": "Conversion", "current": conversion, "target": 5, "progress": pct},
        ],
        "revenueHistory": [
            {
                "month": _month_label(ctx.today - timedelta(days=(5 - i) * 30)),
                "revenue": int(round(revenue * (0.6 + i * 0.1 + ctx.noise(0, 0.2)))),
            }
            for i in range(6)
        ],
    }


def career_dashboard(ctx: GenerationContext) -> Record:
    p = ctx.progress
    applications = catalog.CAREER_APPLICATIONS[: int(p * 5) + 1]
    return {
        "jobApplications": int(5 + p * 15),
        "interviewsScheduled": int(p * 5),
        "networkingConnections": int(10 + p * 20),
        "skillCertifications": int(p * 3),
        "portfolioProjects": int(2 + p * 3),
        "linkedinViews": int(50 + p * 100 + ctx.noise(0, 50)),
        "careerScore": int(round(60 + p * 30)),
        "applicationStatus": [
            dict(a, appliedDate=ctx.days_ago(10 + 5 * i)) for i, a in enumerate(applications)
        ],
        "skillGaps": catalog.CAREER_SKILL_GAPS[: max(1, 3 - int(p * 3))],
        "upcomingEvents": [
            {"type": "Interview", "company": "TechCorp", "date": (ctx.today + timedelta(days=3)).isoformat()},
            {"type": "Networking Event", "event": "Tech Meetup", "date": (ctx.today + timedelta(days=7)).isoformat()},
        ],
    }


Generator = Callable[[GenerationContext], Record]

K = ModuleKind

GENERATORS: Dict[ModuleKind, Generator] = {
    K.AGENT_INFO: agent_info,
    K.TASK_MANAGER: task_manager,
    K.COMPLETION_METER: completion_meter,
    K.FINANCIAL_CALCULATOR: financial_calculator,
    K.SIMPLE_SAVINGS_TRACKER: simple_savings_tracker,
    K.BUDGET_BREAKDOWN: budget_breakdown,
    K.EXPENSE_TRACKER: expense_tracker,
    K.INVESTMENT_TRACKER: investment_tracker,
    K.DEBT_PAYOFF_TRACKER: debt_payoff_tracker,
    K.CURRENCY_CONVERTER: currency_converter,
    K.PROGRESS_CHART: progress_chart,
    K.MILESTONE_TIMELINE: milestone_timeline,
    K.PROGRESS_DASHBOARD: progress_dashboard,
    K.SMART_ACTION_TIMELINE: smart_action_timeline,
    K.HABIT_TRACKER: habit_tracker,
    K.STREAK_COUNTER: streak_counter,
    K.MOOD_TRACKER: mood_tracker,
    K.SKILL_ASSESSMENT: skill_assessment,
    K.READING_TRACKER: reading_tracker,
    K.WORKOUT_TRACKER: workout_tracker,
    K.WEIGHT_TRACKER: weight_tracker,
    K.CALENDAR_WIDGET: calendar_widget,
    K.PROJECT_TIMELINE: project_timeline,
    K.RESOURCE_LIBRARY: resource_library,
    K.DOCUMENT_CHECKLIST: document_checklist,
    K.WEATHER_WIDGET: weather_widget,
    K.TRAVEL_DASHBOARD: travel_dashboard,
    K.HEALTH_DASHBOARD: health_dashboard,
    K.LEARNING_DASHBOARD: learning_dashboard,
    K.BUSINESS_DASHBOARD: business_dashboard,
    K.CAREER_DASHBOARD: career_dashboard,
}
