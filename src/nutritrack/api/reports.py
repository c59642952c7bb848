"""Calorie report endpoint."""

from fastapi import APIRouter, Depends, Query

from nutritrack.api.deps import get_container, require_user
from nutritrack.api.schemas import serialize_report
from nutritrack.containers import AppContainer
from nutritrack.domain.errors import ValidationError
from nutritrack.services.tokens import TokenClaims

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/generate")
async def generate_report(
    report_type: str | None = Query(default=None, alias="reportType"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return per-day intake and burn with summary statistics."""
    if not report_type or not start_date or not end_date:
        raise ValidationError("Report type, startDate, and endDate are required")
    report = container.aggregator.range_summary(claims.user_id, start_date, end_date)
    return {"success": True, "data": serialize_report(report_type, report)}
