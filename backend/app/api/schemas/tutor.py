"""Schemas for generated tutor content."""
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from app.api.schemas.task import Task

TutorMode = Literal["explain", "flashcards", "quiz", "exam_prep"]
TutorConfidence = Literal["high", "medium"]


class FlashcardItem(BaseModel):
    front: str
    back: str


class QuizItem(BaseModel):
    question: str
    options: List[str]
    correct_index: int
    rationale: str


class StudyStep(BaseModel):
    title: str
    duration_mins: int
    detail: str


class TutorOutput(BaseModel):
    topic: str
    mode: TutorMode
    summary: str
    explanation: List[str] = Field(default_factory=list)
    key_points: List[str] = Field(default_factory=list)
    flashcards: List[FlashcardItem] = Field(default_factory=list)
    quiz: List[QuizItem] = Field(default_factory=list)
    study_plan: List[StudyStep] = Field(default_factory=list)
    follow_up_prompts: List[str] = Field(default_factory=list)
    context_signals: List[str] = Field(default_factory=list)
    confidence: TutorConfidence


class TutorRequest(BaseModel):
    prompt: str = Field(..., max_length=4000)
    mode: TutorMode = "explain"
    include_planner_context: bool = True
    tasks: List[Task] = Field(default_factory=list)


class TutorResponse(TutorOutput):
    request_id: str
