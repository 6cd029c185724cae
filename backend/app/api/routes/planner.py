"""Seven-day planner API routes."""
from __future__ import annotations

from time import perf_counter
from typing import Any, Dict

from fastapi import APIRouter, Request

from app.api.schemas.planner import PlanRequest, PlanResponse
from app.api.schemas.wellness import WellnessInput
from app.core.clock import local_today
from app.core.config import settings
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.planner_engine import generate_plan, overflow_dates
from app.services.wellness_engine import calculate_wellness

router = APIRouter()


@router.post("/planner/plan", response_model=PlanResponse, tags=["planner"])
def build_plan(payload: PlanRequest, request: Request) -> PlanResponse:
    """Allocate the submitted tasks across the next seven days."""
    request_id = getattr(request.state, "request_id", None)
    start = perf_counter()

    wellness = None
    mode = payload.mode
    if mode is None and payload.wellness is not None:
        wellness = calculate_wellness(WellnessInput(**payload.wellness.model_dump()))
        mode = wellness.mode
    mode = mode or "normal"
    hours_per_day = payload.hours_per_day or settings.default_hours_per_day

    metadata: Dict[str, Any] = {
        "route": "/planner/plan",
        "mode": mode,
        "hours_per_day": hours_per_day,
        "task_count": len(payload.tasks),
    }
    with trace("planner.generate", metadata=metadata, request_id=request_id) as span:
        days = generate_plan(payload.tasks, mode, hours_per_day, today=local_today())
        overloaded = overflow_dates(days)
        if span:
            try:
                span.update(metadata={**metadata, "overflow_days": len(overloaded)})
            except Exception:  # pragma: no cover
                pass

    scheduled = sum(len(day.tasks) for day in days)
    latency_ms = (perf_counter() - start) * 1000
    log_metric("planner.scheduled_count", scheduled, metadata={"mode": mode})
    log_metric("planner.overflow_days", len(overloaded), metadata={"mode": mode})
    log_metric("planner.latency_ms", latency_ms, metadata={"mode": mode})

    return PlanResponse(
        mode=mode,
        days=days,
        scheduled_count=scheduled,
        overflow_dates=overloaded,
        wellness=wellness,
        request_id=request_id or "",
    )
