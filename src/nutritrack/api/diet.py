"""Goal and meal recommendation endpoints."""

from fastapi import APIRouter, Depends, Query, status

from nutritrack.api.deps import get_container, require_user
from nutritrack.api.schemas import GoalRequest, serialize_goal, serialize_recommendation
from nutritrack.containers import AppContainer
from nutritrack.services.tokens import TokenClaims

router = APIRouter(prefix="/api/diet", tags=["diet"])


@router.get("/goals")
async def nutritional_goals(
    _: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the goal labels users can pick from."""
    return {"success": True, "data": container.goal_service.nutritional_goals()}


@router.get("/goal")
async def get_goal(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's goal, or null when none is set."""
    goal = container.goal_service.get_goal(claims.user_id)
    return {"success": True, "data": serialize_goal(goal) if goal else None}


@router.post("/goal", status_code=status.HTTP_201_CREATED)
async def save_goal(
    body: GoalRequest,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Replace the caller's goal."""
    goal = container.goal_service.save_goal(
        claims.user_id, body.nutritional_goal, body.exercise_level
    )
    return {
        "success": True,
        "message": "Goal saved successfully",
        "data": serialize_goal(goal),
    }


@router.get("/recommendations")
async def recommendations(
    nutritional_goal: str | None = Query(default=None, alias="nutritionalGoal"),
    exercise_level: str | None = Query(default=None, alias="exerciseLevel"),
    _: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return up to eight meals for a goal and exercise level."""
    meals = container.recommendation_service.recommend(nutritional_goal, exercise_level)
    return {"success": True, "data": [serialize_recommendation(meal) for meal in meals]}
