"""Keyword-driven extraction of draft tasks from pasted assignment text."""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import List, Optional, Tuple

from app.api.schemas.assignment import ParsedTask

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 3
DEFAULT_HOURS = 1.5

_MONTH_PATTERN = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

DEADLINE_PATTERN = re.compile(
    r"\b(?:due|by|deadline|submit|before)\s*:?\s*"
    rf"({_MONTH_PATTERN}\.? \d{{1,2}}(?:st|nd|rd|th)?(?:,?\s*\d{{4}})?|\d{{1,2}}/\d{{1,2}}(?:/\d{{2,4}})?)\b",
    re.IGNORECASE,
)

HIGH_PRIORITY_PATTERN = re.compile(r"\b(exam|final|midterm|important|urgent|critical)\b", re.IGNORECASE)
LOW_PRIORITY_PATTERN = re.compile(r"\b(optional|extra credit|bonus|review)\b", re.IGNORECASE)

# first match wins
HOURS_RULES: Tuple[Tuple[re.Pattern, float], ...] = (
    (re.compile(r"\b(essay|paper|report|project)\b", re.IGNORECASE), 4.0),
    (re.compile(r"\b(reading|read|review)\b", re.IGNORECASE), 1.0),
    (re.compile(r"\b(problem set|problems|exercises|worksheet)\b", re.IGNORECASE), 2.0),
    (re.compile(r"\b(quiz|test|exam)\b", re.IGNORECASE), 3.0),
    (re.compile(r"\b(presentation|slides)\b", re.IGNORECASE), 2.5),
)

LIST_MARKER_PATTERN = re.compile(r"^[\d.\-*•>]+\s*")
TRAILING_PUNCTUATION_PATTERN = re.compile(r"[,;:\-]+$")

_MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_NAMED_DATE_PATTERN = re.compile(r"^([a-z]+)\.? (\d{1,2})(?:st|nd|rd|th)?(?:,?\s*(\d{4}))?$", re.IGNORECASE)
_NUMERIC_DATE_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?$")


def parse_assignment_text(text: str, *, now: Optional[datetime] = None) -> List[ParsedTask]:
    """
    Turn pasted syllabus or LMS text into draft tasks, one per meaningful line.

    Deadlines, priority and effort come from keyword rules. When no line yields a task
    every non-blank line becomes a plain medium-priority draft instead.
    """
    reference = now or datetime.now()
    lines = [line for line in (text or "").split("\n") if line.strip()]
    tasks: List[ParsedTask] = []

    for line in lines:
        trimmed = line.strip()
        if len(trimmed) < MIN_LINE_LENGTH:
            continue

        deadline_match = DEADLINE_PATTERN.search(trimmed)
        deadline = _parse_deadline(deadline_match.group(1), reference) if deadline_match else None

        title = trimmed
        if deadline_match:
            title = (trimmed[: deadline_match.start()] + trimmed[deadline_match.end():]).strip()
        title = strip_list_marker(title)
        title = TRAILING_PUNCTUATION_PATTERN.sub("", title).strip()
        if not title:
            continue

        tasks.append(
            ParsedTask(
                title=title,
                deadline=deadline,
                priority=classify_priority(trimmed),
                estimated_hours=estimate_hours(trimmed),
                course=None,
            )
        )

    if not tasks and lines:
        logger.debug("No structured tasks found in %d lines; using line fallback", len(lines))
        return [_fallback_task(line) for line in lines]

    return tasks


def classify_priority(line: str) -> str:
    if HIGH_PRIORITY_PATTERN.search(line):
        return "high"
    if LOW_PRIORITY_PATTERN.search(line):
        return "low"
    return "medium"


def estimate_hours(line: str) -> float:
    for pattern, hours in HOURS_RULES:
        if pattern.search(line):
            return hours
    return DEFAULT_HOURS


def strip_list_marker(value: str) -> str:
    return LIST_MARKER_PATTERN.sub("", value).strip()


def _fallback_task(line: str) -> ParsedTask:
    trimmed = line.strip()
    return ParsedTask(
        title=strip_list_marker(trimmed) or trimmed,
        deadline=None,
        priority="medium",
        estimated_hours=DEFAULT_HOURS,
        course=None,
    )


def _parse_deadline(raw: str, reference: datetime) -> Optional[str]:
    """Return an ISO datetime string for the captured date text, or None when invalid."""
    raw = raw.strip()
    year: Optional[int] = None

    named = _NAMED_DATE_PATTERN.match(raw)
    if named:
        month = _MONTHS.get(named.group(1)[:3].lower())
        if month is None:
            return None
        day = int(named.group(2))
        if named.group(3):
            year = int(named.group(3))
    else:
        numeric = _NUMERIC_DATE_PATTERN.match(raw)
        if not numeric:
            return None
        month = int(numeric.group(1))
        day = int(numeric.group(2))
        if numeric.group(3):
            year = int(numeric.group(3))
            if year < 100:
                year += 2000

    try:
        parsed = datetime(year or reference.year, month, day)
    except ValueError:
        logger.debug("Discarding invalid deadline %r", raw)
        return None
    return parsed.isoformat()
