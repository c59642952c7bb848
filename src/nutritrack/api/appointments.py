"""Dietician appointment endpoints."""

from fastapi import APIRouter, Depends, status

from nutritrack.api.deps import get_container, require_user
from nutritrack.api.schemas import (
    AppointmentRequest,
    serialize_appointment,
    serialize_dietician,
)
from nutritrack.containers import AppContainer
from nutritrack.services.tokens import TokenClaims

router = APIRouter(prefix="/api/appointments", tags=["appointments"])


@router.get("/dieticians")
async def list_dieticians(
    _: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return bookable dieticians."""
    dieticians = container.appointment_service.list_dieticians()
    return {
        "success": True,
        "data": {"dieticians": [serialize_dietician(item) for item in dieticians]},
    }


@router.get("/user")
async def list_appointments(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's appointments."""
    views = container.appointment_service.list_appointments(claims.user_id)
    return {
        "success": True,
        "data": {"appointments": [serialize_appointment(view) for view in views]},
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def schedule_appointment(
    body: AppointmentRequest,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Book an appointment slot."""
    view = container.appointment_service.schedule(
        claims.user_id, body.dietician_id, body.date, body.time
    )
    return {
        "success": True,
        "message": "Appointment scheduled successfully",
        "data": {"appointment": serialize_appointment(view)},
    }


@router.delete("/{appointment_id}")
async def cancel_appointment(
    appointment_id: str,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Cancel one of the caller's appointments."""
    container.appointment_service.cancel(appointment_id, claims.user_id)
    return {"success": True, "message": "Appointment cancelled successfully"}
