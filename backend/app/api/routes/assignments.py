"""Assignment inbox API routes."""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.schemas.assignment import AssignmentParseRequest, AssignmentParseResponse
from app.core.clock import local_now
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.assignment_parser import parse_assignment_text

router = APIRouter()


@router.post("/assignments/parse", response_model=AssignmentParseResponse, tags=["assignments"])
def parse_assignments(payload: AssignmentParseRequest, request: Request) -> AssignmentParseResponse:
    """Extract draft tasks from pasted text. Drafts are not persisted here."""
    request_id = getattr(request.state, "request_id", None)
    text = payload.text.strip()
    with trace(
        "assignments.parse",
        metadata={"route": "/assignments/parse", "text_length": len(text)},
        request_id=request_id,
    ):
        tasks = parse_assignment_text(text, now=local_now())

    log_metric("assignments.parse.count", len(tasks))
    log_metric("assignments.parse.with_deadline", sum(1 for task in tasks if task.deadline))
    return AssignmentParseResponse(tasks=tasks, count=len(tasks), request_id=request_id or "")
