"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import assignments, dashboard, planner, tutor, wellness
from app.core.config import settings
from app.core.logging import configure_logging
from app.observability.client import flush_opik, init_opik

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_opik()
    logger.info("%s started (timezone=%s)", settings.app_name, settings.timezone)
    yield
    flush_opik()


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def attach_request_id(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


app.include_router(wellness.router)
app.include_router(planner.router)
app.include_router(assignments.router)
app.include_router(tutor.router)
app.include_router(dashboard.router)
