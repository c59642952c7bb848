"""Patient health profile endpoints."""

from fastapi import APIRouter, Depends

from nutritrack.api.deps import get_container, require_patient
from nutritrack.api.schemas import HealthProfileRequest, serialize_health_profile
from nutritrack.containers import AppContainer
from nutritrack.services.tokens import TokenClaims

router = APIRouter(prefix="/api/patient", tags=["patient"])


@router.get("/profile")
async def get_profile(
    claims: TokenClaims = Depends(require_patient),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's name, email and body measurements."""
    user = container.user_service.get_health_profile(claims.user_id)
    return {
        "success": True,
        "user": {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "height": user.height,
            "weight": user.weight,
        },
    }


@router.put("/profile")
async def update_profile(
    body: HealthProfileRequest,
    claims: TokenClaims = Depends(require_patient),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update height and/or weight; BMI is recomputed."""
    user = container.user_service.update_health_profile(
        claims.user_id, height=body.height, weight=body.weight
    )
    return {
        "success": True,
        "message": "Profile updated successfully",
        "data": {"user": serialize_health_profile(user)},
    }
