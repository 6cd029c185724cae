"""Helpers for reading the current date in the configured timezone."""
from __future__ import annotations

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import settings

logger = logging.getLogger(__name__)


def get_timezone(tz_name: str | None = None) -> ZoneInfo:
    """Return a ZoneInfo for the name (or the configured timezone), falling back to UTC."""
    name = tz_name or settings.timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; falling back to UTC", name)
        return ZoneInfo("UTC")


def local_now(tz_name: str | None = None) -> datetime:
    """Return a naive datetime for the current wall-clock time in the timezone."""
    return datetime.now(get_timezone(tz_name)).replace(tzinfo=None)


def local_today(tz_name: str | None = None) -> date:
    return local_now(tz_name).date()
