"""Opik client bootstrap."""
from __future__ import annotations

import logging

import opik

from app.core.config import settings

logger = logging.getLogger(__name__)

_client: opik.Opik | None = None
_initialized = False


def init_opik() -> opik.Opik | None:
    """Create the Opik client once when tracing is enabled."""
    global _client, _initialized
    if _initialized:
        return _client
    _initialized = True

    if not settings.opik_enabled:
        logger.info("Opik tracing disabled (OPIK_ENABLED=false)")
        return None

    try:
        _client = opik.Opik(
            project_name=settings.opik_project,
            workspace=settings.opik_workspace,
            api_key=settings.opik_api_key,
        )
    except Exception:  # pragma: no cover - depends on remote configuration
        logger.warning("Failed to initialise Opik client; tracing disabled", exc_info=True)
        _client = None
    else:
        logger.info("Opik tracing enabled (project=%s)", settings.opik_project)
    return _client


def get_opik_client() -> opik.Opik | None:
    if not _initialized:
        return init_opik()
    return _client


def flush_opik() -> None:
    client = get_opik_client()
    if client is None:
        return
    try:
        client.flush()
    except Exception:  # pragma: no cover - network bound
        logger.warning("Opik flush failed", exc_info=True)
