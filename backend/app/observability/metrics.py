"""Lightweight metric emission via structured log lines."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("app.metrics")


def log_metric(name: str, value: float | int, metadata: Optional[Dict[str, Any]] = None) -> None:
    """Emit a single metric data point."""
    try:
        tags = json.dumps(metadata or {}, default=str, sort_keys=True)
    except (TypeError, ValueError):
        tags = "{}"
    logger.info("metric name=%s value=%s tags=%s", name, value, tags)
