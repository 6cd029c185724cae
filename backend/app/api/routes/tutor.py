"""AI tutor API routes."""
from __future__ import annotations

from time import perf_counter

from fastapi import APIRouter, HTTPException, Request, status

from app.api.schemas.tutor import TutorRequest, TutorResponse
from app.core.clock import local_today
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.tutor_engine import EmptyPromptError, generate_tutor_content

router = APIRouter()


@router.post("/tutor/generate", response_model=TutorResponse, tags=["tutor"])
def generate_tutor(payload: TutorRequest, request: Request) -> TutorResponse:
    """Generate explanation, flashcards, quiz and a study plan for a prompt."""
    request_id = getattr(request.state, "request_id", None)
    start = perf_counter()
    metadata = {
        "route": "/tutor/generate",
        "mode": payload.mode,
        "prompt_length": len(payload.prompt),
        "task_count": len(payload.tasks),
    }
    with trace("tutor.generate", metadata=metadata, request_id=request_id):
        try:
            output = generate_tutor_content(
                payload.prompt,
                mode=payload.mode,
                include_planner_context=payload.include_planner_context,
                tasks=payload.tasks,
                today=local_today(),
            )
        except EmptyPromptError as exc:
            log_metric("tutor.generate.rejected", 1, metadata={"reason": "empty_prompt"})
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    latency_ms = (perf_counter() - start) * 1000
    log_metric("tutor.generate.success", 1, metadata={"mode": output.mode, "confidence": output.confidence})
    log_metric("tutor.generate.latency_ms", latency_ms, metadata={"mode": output.mode})
    return TutorResponse(**output.model_dump(), request_id=request_id or "")
