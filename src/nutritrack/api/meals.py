"""Meal catalog and meal logging endpoints."""

from fastapi import APIRouter, Depends

from nutritrack.api.deps import get_container, require_user
from nutritrack.api.schemas import (
    MealLogRequest,
    serialize_catalog_meal,
    serialize_meal_log,
)
from nutritrack.containers import AppContainer
from nutritrack.services.tokens import TokenClaims

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.get("/meals")
async def list_meals(
    _: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the meal catalog."""
    meals = container.catalog_service.list_meals()
    return {"success": True, "data": [serialize_catalog_meal(meal) for meal in meals]}


@router.get("/dailylimit")
async def daily_limit(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's daily calorie limit."""
    limit = container.goal_service.daily_limit(claims.user_id)
    return {"success": True, "data": {"dailyLimit": limit}}


@router.post("/log")
async def log_meal(
    body: MealLogRequest,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a meal; ``warnings`` is only present when something was flagged."""
    result = container.meal_log_service.add_meal(
        user_id=claims.user_id,
        meal_id=body.meal_id,
        meal_type=body.meal_type,
        date=body.date,
    )
    response: dict[str, object] = {
        "success": True,
        "data": {
            "mealLogged": True,
            "mealLogId": result.log_id,
            "totalCalories": result.total_calories,
            "dailyLimit": result.daily_limit,
        },
    }
    if result.warnings:
        response["warnings"] = result.warnings
    return response


@router.get("/logs/{date}")
async def logs_for_day(
    date: str,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's meal logs for a day."""
    day_logs = container.meal_log_service.list_meals_for_day(claims.user_id, date)
    return {
        "success": True,
        "data": {
            "logs": [serialize_meal_log(view) for view in day_logs.logs],
            "totalCalories": day_logs.total_calories,
        },
    }


@router.delete("/logs/{log_id}")
async def delete_meal_log(
    log_id: str,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete one of the caller's meal logs."""
    deletion = container.meal_log_service.delete_meal(log_id, claims.user_id)
    return {
        "success": True,
        "message": "Meal log deleted successfully",
        "data": {
            "deleted": deletion.deleted,
            "totalCalories": deletion.total_calories,
        },
    }
