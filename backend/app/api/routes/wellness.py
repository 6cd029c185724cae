"""Wellness check-in API routes."""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.schemas.wellness import WellnessCheckInRequest, WellnessCheckInResponse, WellnessInput
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.wellness_engine import calculate_wellness

router = APIRouter()


@router.post("/wellness/check-in", response_model=WellnessCheckInResponse, tags=["wellness"])
def wellness_check_in(payload: WellnessCheckInRequest, request: Request) -> WellnessCheckInResponse:
    """Score a daily check-in and return the planner mode it implies."""
    request_id = getattr(request.state, "request_id", None)
    with trace("wellness.check_in", metadata={"route": "/wellness/check-in"}, request_id=request_id):
        result = calculate_wellness(WellnessInput(**payload.model_dump()))

    log_metric("wellness.score", result.score, metadata={"level": result.level})
    log_metric("wellness.light_mode", 1 if result.mode == "light" else 0)
    return WellnessCheckInResponse(**result.model_dump(), request_id=request_id or "")
