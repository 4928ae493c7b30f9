from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from goalboard.exceptions import InvalidProgressError, UnknownCategoryError
from goalboard.goal_orchestrator import GoalOrchestrator, build_default_orchestrator
from goalboard.logger import get_logger
from goalboard.models import CreateGoalRequest

logger = get_logger("api.goals")

router = APIRouter()

_orchestrator: Optional[GoalOrchestrator] = None


def get_orchestrator() -> GoalOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = build_default_orchestrator()
    return _orchestrator


class CreateGoalBody(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    category: str
    priority: Optional[str] = None
    user_location: Optional[str] = None
    user_budget: Optional[float] = Field(default=None, ge=0)
    user_timeframe: Optional[str] = None
    user_experience: Optional[str] = None
    user_id: Optional[str] = None


class ProgressBody(BaseModel):
    # range is checked by the orchestrator so the error carries its hint
    progress: float


@router.post("/", status_code=201)
def create_goal(body: CreateGoalBody) -> Dict[str, Any]:
    orchestrator = get_orchestrator()
    request = CreateGoalRequest(
        title=body.title,
        description=body.description,
        category=body.category,
        priority=body.priority or orchestrator.config.DEFAULT_PRIORITY,
        user_location=body.user_location,
        user_budget=body.user_budget,
        user_timeframe=body.user_timeframe,
        user_experience=body.user_experience,
        user_id=body.user_id,
    )
    try:
        goal = orchestrator.create_goal(request)
    except UnknownCategoryError as e:
        raise HTTPException(status_code=400, detail=e.get_user_message())
    return goal.to_dict()


@router.get("/categories")
def list_categories() -> Dict[str, List[Dict[str, Any]]]:
    policies = get_orchestrator().policies
    return {
        "categories": [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "default_deadline_days": p.default_deadline_days,
                "default_estimated_cost": p.default_estimated_cost,
                "required": list(p.required_module_ids),
                "contextual": list(p.contextual_module_ids),
                "optional": list(p.optional_module_ids),
                "suggested_agents": list(p.suggested_agent_ids),
                "examples": list(p.examples),
            }
            for p in policies.policies()
        ]
    }


@router.get("/modules")
def list_modules() -> Dict[str, List[Dict[str, Any]]]:
    registry = get_orchestrator().registry
    return {"modules": [cap.to_dict() for cap in registry.capabilities()]}


@router.get("/")
def list_goals() -> Dict[str, List[Dict[str, Any]]]:
    return {
        "goals": [
            {
                "id": s.id,
                "title": s.title,
                "category": s.category,
                "status": s.status,
                "estimated_cost": s.estimated_cost,
                "current_saved": s.current_saved,
                "target_date": s.target_date,
                "feasibility_score": s.feasibility_score,
            }
            for s in get_orchestrator().list_goals()
        ]
    }


@router.get("/{goal_id}")
def get_goal(goal_id: str) -> Dict[str, Any]:
    goal = get_orchestrator().get_goal_with_dashboard(goal_id)
    if goal is None:
        raise HTTPException(status_code=404, detail=f"Goal not found: {goal_id}")
    return goal.to_dict()


@router.post("/{goal_id}/progress")
def update_progress(goal_id: str, body: ProgressBody) -> Dict[str, Any]:
    try:
        goal = get_orchestrator().update_goal_progress(goal_id, body.progress)
    except InvalidProgressError as e:
        raise HTTPException(status_code=422, detail=e.get_user_message())
    if goal is None:
        raise HTTPException(status_code=404, detail=f"Goal not found: {goal_id}")
    return goal.to_dict()


@router.post("/{goal_id}/regenerate")
def regenerate_goal(goal_id: str) -> Dict[str, Any]:
    try:
        goal = get_orchestrator().regenerate_goal_data(goal_id)
    except UnknownCategoryError as e:
        raise HTTPException(status_code=400, detail=e.get_user_message())
    if goal is None:
        raise HTTPException(status_code=404, detail=f"Goal not found: {goal_id}")
    logger.info(f"Regenerated goal {goal_id} via API")
    return goal.to_dict()
