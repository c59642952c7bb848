"""Exercise logging endpoints, restricted to patients."""

from fastapi import APIRouter, Depends, Query, status

from nutritrack.api.deps import get_container, require_patient
from nutritrack.api.schemas import ExerciseLogRequest, serialize_exercise_log
from nutritrack.containers import AppContainer
from nutritrack.domain.errors import NotFoundError
from nutritrack.services.tokens import TokenClaims

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(
    period: str = Query(default="all", alias="filter"),
    claims: TokenClaims = Depends(require_patient),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's exercise logs and calories burned for a period."""
    history = container.exercise_log_service.list_exercises(claims.user_id, period)
    return {
        "success": True,
        "data": {
            "exercises": [serialize_exercise_log(log) for log in history.logs],
            "totalCalories": history.total_calories,
        },
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_exercise(
    body: ExerciseLogRequest,
    claims: TokenClaims = Depends(require_patient),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Record an exercise session."""
    log_id = container.exercise_log_service.add_exercise(
        user_id=claims.user_id,
        activity_type=body.activity_type,
        duration=body.duration,
        date=body.date,
        calories_burned=body.calories_burned,
    )
    return {
        "success": True,
        "message": "Exercise logged successfully",
        "data": {"exerciseLogId": log_id},
    }


@router.delete("/{log_id}")
async def delete_exercise(
    log_id: str,
    claims: TokenClaims = Depends(require_patient),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete one of the caller's exercise logs."""
    if not container.exercise_log_service.delete_exercise(log_id, claims.user_id):
        raise NotFoundError(
            "Exercise log not found or you do not have permission to delete it"
        )
    return {"success": True, "message": "Exercise log deleted successfully"}
