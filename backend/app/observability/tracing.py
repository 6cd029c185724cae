"""Tracing context manager backed by Opik when available."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Any, Dict, Iterator, Optional

from app.observability import client as opik_client

logger = logging.getLogger(__name__)


@contextmanager
def trace(
    name: str,
    metadata: Optional[Dict[str, Any]] = None,
    user_id: Optional[str] = None,
    request_id: Optional[str] = None,
) -> Iterator[Any]:
    """
    Wrap a unit of work in a trace.

    Yields the Opik trace object (or None when tracing is off) so callers can attach
    extra metadata with ``span.update(metadata=...)``. Exceptions raised inside the
    block propagate unchanged; tracing errors are logged and ignored.
    """
    payload = dict(metadata or {})
    if user_id:
        payload.setdefault("user_id", user_id)
    if request_id:
        payload.setdefault("request_id", request_id)

    span = None
    client = opik_client.get_opik_client()
    if client is not None:
        try:
            span = client.trace(name=name, metadata=payload)
        except Exception:  # pragma: no cover - remote failure
            logger.warning("Could not open trace %s", name, exc_info=True)
            span = None

    start = perf_counter()
    try:
        yield span
    finally:
        duration_ms = (perf_counter() - start) * 1000
        logger.debug("trace %s finished in %.2fms (request_id=%s)", name, duration_ms, request_id or "-")
        if span is not None:
            try:
                span.end()
            except Exception:  # pragma: no cover - remote failure
                logger.warning("Could not close trace %s", name, exc_info=True)
