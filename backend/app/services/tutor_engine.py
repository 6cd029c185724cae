"""Deterministic study-content generator with planner-aware follow-ups."""
from __future__ import annotations

import logging
import re
from collections import Counter
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence

from app.api.schemas.task import Task
from app.api.schemas.tutor import FlashcardItem, QuizItem, StudyStep, TutorOutput
from app.services.tutor_templates import DISTRACTOR_TEMPLATES, MODE_LIMITS, STOP_WORDS, TEMPLATE_LIBRARY

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "Study Topic"
KEYWORD_LIMIT = 8
MIN_SENTENCE_LENGTH = 10
MIN_REVERSE_MATCH_LENGTH = 4
HIGH_CONFIDENCE_WORDS = 18
MAX_CONTEXT_SIGNALS = 4
MAX_FOLLOW_UPS = 6


class EmptyPromptError(ValueError):
    """Raised when the tutor is asked to generate content for a blank prompt."""


def generate_tutor_content(
    prompt: str,
    mode: str = "explain",
    include_planner_context: bool = True,
    tasks: Optional[Sequence[Task]] = None,
    *,
    today: Optional[date] = None,
) -> TutorOutput:
    """
    Build explanation, flashcards, quiz and a study plan for a topic prompt.

    Known topics use the hand-authored template library; anything else is synthesised
    from the prompt's own sentences and keywords. When planner context is enabled the
    open tasks are scored for relevance and the best match is woven into the output.
    """
    cleaned = (prompt or "").strip()
    if not cleaned:
        raise EmptyPromptError("Please enter a topic or question.")

    if mode not in MODE_LIMITS:
        logger.warning("Unknown tutor mode %r; using explain", mode)
        mode = "explain"
    task_list = list(tasks or [])

    template = match_template(cleaned)
    topic = template["topic"] if template else extract_topic(cleaned)
    keywords = extract_keywords(cleaned)

    if template:
        logger.debug("Tutor prompt matched template %s", template["key"])
        summary = template["summary"]
        explanation = list(template["explanation"])
        key_points = list(template["key_points"])
        flashcards = [FlashcardItem(**card) for card in template["flashcards"]]
        quiz = [QuizItem(**item) for item in template["quiz"]]
    else:
        summary = _generic_summary(topic, keywords)
        explanation = _generic_explanation(topic, extract_sentences(cleaned), keywords)
        key_points = _generic_key_points(topic, keywords, explanation)
        flashcards = [_flashcard_from_point(topic, point) for point in key_points]
        quiz = [_quiz_from_point(topic, point, idx) for idx, point in enumerate(key_points)]

    related: List[Task] = []
    context_signals: List[str] = []
    if include_planner_context and task_list:
        related = rank_related_tasks(task_list, topic, keywords, today=today or date.today())
        context_signals = _context_signals(task_list, related)

    limits = MODE_LIMITS[mode]
    explanation = explanation[: limits["explanation"]]
    key_points = key_points[: limits["key_points"]]
    flashcards = flashcards[: limits["flashcards"]]
    quiz = quiz[: limits["quiz"]]

    if related:
        key_points.insert(
            0,
            f'Prioritize "{related[0].title}" while reviewing {topic}; '
            "it is the highest-impact related task right now.",
        )

    confidence = "high" if template or len(cleaned.split()) > HIGH_CONFIDENCE_WORDS else "medium"

    return TutorOutput(
        topic=topic,
        mode=mode,
        summary=summary,
        explanation=dedupe(explanation, limits["explanation"]),
        key_points=dedupe(key_points, len(key_points)),
        flashcards=flashcards,
        quiz=quiz,
        study_plan=_study_plan(topic, mode, related),
        follow_up_prompts=_follow_up_prompts(topic, mode, related),
        context_signals=context_signals,
        confidence=confidence,
    )


def normalize(value: str) -> str:
    lowered = (value or "").lower()
    return re.sub(r"\s+", " ", re.sub(r"[^a-z0-9\s]", " ", lowered)).strip()


def title_case(value: str) -> str:
    return " ".join(word[0].upper() + word[1:].lower() for word in value.split() if word)


def match_template(prompt: str) -> Optional[Dict[str, Any]]:
    normalized_prompt = normalize(prompt)
    if not normalized_prompt:
        return None
    for template in TEMPLATE_LIBRARY:
        candidates = [normalize(value) for value in (template["key"], template["topic"], *template["aliases"])]
        for candidate in candidates:
            if not candidate:
                continue
            if candidate in normalized_prompt:
                return template
            if len(normalized_prompt) >= MIN_REVERSE_MATCH_LENGTH and normalized_prompt in candidate:
                return template
    return None


def extract_topic(prompt: str) -> str:
    first_line = prompt.strip().split("\n")[0]
    compact = " ".join(first_line.split())
    if not compact:
        return DEFAULT_TOPIC

    clause = next((part.strip() for part in re.split(r"[.!?]", compact) if part.strip()), compact)
    tokens = clause.split()
    if len(tokens) <= 8:
        return title_case(clause)
    return title_case(" ".join(tokens[:6]))


def extract_keywords(prompt: str, limit: int = KEYWORD_LIMIT) -> List[str]:
    counts: Counter = Counter(
        word for word in normalize(prompt).split(" ") if len(word) >= 3 and word not in STOP_WORDS
    )
    # most_common keeps first-seen order for equal counts
    return [word for word, _ in counts.most_common(limit)]


def extract_sentences(text: str) -> List[str]:
    parts = (part.strip() for part in re.split(r"[.!?]+", text))
    return [part for part in parts if len(part) > MIN_SENTENCE_LENGTH]


def dedupe(values: Iterable[str], limit: int) -> List[str]:
    seen: set[str] = set()
    output: List[str] = []
    for raw in values:
        value = raw.strip()
        if not value:
            continue
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        output.append(value)
        if len(output) >= limit:
            break
    return output


def deadline_weight(deadline: Optional[date], today: date) -> int:
    if deadline is None:
        return 0
    if deadline < today:
        return 3
    if deadline == today:
        return 4
    days_left = (deadline - today).days
    if days_left <= 2:
        return 3
    if days_left <= 5:
        return 2
    return 1


def score_task_relevance(task: Task, topic: str, keywords: Sequence[str], today: date) -> int:
    haystack = normalize(
        " ".join([task.title, task.description or "", task.course or "", task.source_text or ""])
    )
    score = 0
    for part in normalize(topic).split(" "):
        if len(part) > 2 and part in haystack:
            score += 2
    for keyword in keywords:
        if keyword in haystack:
            score += 1
    if task.priority == "high":
        score += 2
    score += deadline_weight(task.deadline, today)
    return score


def rank_related_tasks(tasks: Iterable[Task], topic: str, keywords: Sequence[str], *, today: date) -> List[Task]:
    """Return open tasks with a positive relevance score, best first."""
    scored = [
        (score_task_relevance(task, topic, keywords, today), task)
        for task in tasks
        if task.status != "completed"
    ]
    scored = [entry for entry in scored if entry[0] > 0]
    scored.sort(key=lambda entry: entry[0], reverse=True)
    return [task for _, task in scored]


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def _context_signals(tasks: Sequence[Task], related: Sequence[Task]) -> List[str]:
    active = [task for task in tasks if task.status != "completed"]
    high_priority = [task for task in active if task.priority == "high"]
    dated = sorted((task for task in active if task.deadline), key=lambda task: task.deadline)

    signals = [f"{_plural(len(active), 'active planner task')} detected."]
    if high_priority:
        signals.append(f"{_plural(len(high_priority), 'high-priority task')} should stay in your study loop.")
    if dated:
        signals.append(f"Nearest deadline: {dated[0].deadline.isoformat()}.")
    if related:
        signals.append(f'Most relevant task: "{related[0].title}".')
    return dedupe(signals, MAX_CONTEXT_SIGNALS)


def _generic_summary(topic: str, keywords: Sequence[str]) -> str:
    if not keywords:
        return (
            f"{topic} can be learned faster by combining concept understanding, active recall, "
            "and short assessment loops."
        )
    highlighted = ", ".join(keywords[:3])
    return (
        f"{topic} should be studied through core ideas like {highlighted}, then reinforced "
        "with flashcards and targeted quiz practice."
    )


def _generic_explanation(topic: str, sentences: Sequence[str], keywords: Sequence[str]) -> List[str]:
    from_prompt = [sentence if sentence.endswith(".") else f"{sentence}." for sentence in sentences[:3]]
    scaffold = [
        f"{topic} is easier to master when you separate definitions, mechanism, and application.",
        "Focus on causal relationships first, then memorize key terms and exceptions.",
        "Use short recall cycles: explain from memory, verify, and correct weak spots.",
        "Translate each concept into one practical example to improve retention.",
    ]
    if keywords:
        scaffold.insert(0, f"Your prompt suggests emphasis on: {', '.join(keywords[:4])}.")
    return dedupe([*from_prompt, *scaffold], 7)


def _generic_key_points(topic: str, keywords: Sequence[str], explanation: Sequence[str]) -> List[str]:
    points = [
        f"Define {topic} in one sentence before studying details.",
        "Identify the highest-yield terms and formulas that are frequently tested.",
        "Connect each key idea to one example and one common mistake.",
        "Review with active recall instead of passive rereading.",
    ]
    for keyword in keywords[:5]:
        points.append(f'Clarify how "{keyword}" contributes to the full picture of {topic}.')
    for sentence in explanation[:3]:
        points.append(sentence[:-1] if sentence.endswith(".") else sentence)
    return dedupe(points, 10)


def _flashcard_from_point(topic: str, point: str) -> FlashcardItem:
    return FlashcardItem(
        front=f"Explain this idea in {topic}: {point}",
        back=f"{point}. Keep your answer concise, then add one concrete example.",
    )


def _quiz_from_point(topic: str, point: str, index: int) -> QuizItem:
    correct_index = index % 4
    options = [f"{template}." for template in DISTRACTOR_TEMPLATES[:3]]
    options.insert(correct_index, point)
    return QuizItem(
        question=f"Which statement best matches a core principle of {topic}?",
        options=options,
        correct_index=correct_index,
        rationale=f'The correct choice reflects the key point: "{point}".',
    )


def _study_plan(topic: str, mode: str, related: Sequence[Task]) -> List[StudyStep]:
    steps = [
        StudyStep(
            title="Concept Warm-up",
            duration_mins=12,
            detail=f"Write a one-paragraph explanation of {topic} from memory before checking notes.",
        ),
        StudyStep(
            title="Deep Review",
            duration_mins=25,
            detail="Map core definitions, mechanisms, and edge cases in a compact outline.",
        ),
        StudyStep(
            title="Active Recall",
            duration_mins=18,
            detail="Cover your notes and answer flashcards out loud until recall is stable.",
        ),
        StudyStep(
            title="Check Understanding",
            duration_mins=15,
            detail="Complete a short quiz and analyze every mistake by cause.",
        ),
    ]
    if mode == "exam_prep":
        steps.insert(
            3,
            StudyStep(
                title="Exam Simulation",
                duration_mins=30,
                detail="Solve timed questions without notes and track weak categories.",
            ),
        )
    if related:
        steps.append(
            StudyStep(
                title="Task Transfer",
                duration_mins=20,
                detail=f'Apply today\'s review directly to: "{related[0].title}". '
                "Ship one concrete output before stopping.",
            )
        )
    return steps


def _follow_up_prompts(topic: str, mode: str, related: Sequence[Task]) -> List[str]:
    prompts = [
        f"Give me harder quiz questions on {topic}.",
        f"Create a 10-minute review sprint for {topic}.",
        f"Explain {topic} with one real-world analogy.",
        f"Which mistakes should I avoid in {topic} exams?",
    ]
    if mode != "flashcards":
        prompts.append(f"Generate 12 flashcards for {topic} with concise answers.")
    if mode != "quiz":
        prompts.append(f"Turn {topic} into a short quiz with answer rationales.")
    if related:
        prompts.append(f'Connect {topic} to my task "{related[0].title}" and propose execution steps.')
    return dedupe(prompts, MAX_FOLLOW_UPS)
