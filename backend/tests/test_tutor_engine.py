from datetime import date, timedelta

import pytest

from app.api.schemas.task import Task
from app.services.tutor_engine import (
    EmptyPromptError,
    deadline_weight,
    extract_keywords,
    extract_topic,
    generate_tutor_content,
    match_template,
)

TODAY = date(2026, 3, 2)


def test_blank_prompt_is_rejected():
    with pytest.raises(EmptyPromptError):
        generate_tutor_content("   ")


def test_known_topic_uses_template():
    output = generate_tutor_content("Explain photosynthesis for my biology class", today=TODAY)
    assert output.topic == "Photosynthesis"
    assert output.confidence == "high"
    assert output.mode == "explain"
    assert len(output.explanation) == 5
    assert len(output.key_points) == 6
    assert len(output.flashcards) == 5
    assert len(output.quiz) == 3
    assert output.quiz[0].options[output.quiz[0].correct_index] == "Thylakoid membrane"


def test_alias_matches_template():
    assert match_template("what is inertia?")["topic"] == "Newton's Laws of Motion"
    assert match_template("ww2 turning points")["topic"] == "World War II"
    assert match_template("sin") is None


def test_mode_caps_apply():
    quiz = generate_tutor_content("photosynthesis", mode="quiz", today=TODAY)
    assert len(quiz.quiz) == 3
    assert len(quiz.flashcards) == 4
    assert len(quiz.explanation) == 4

    cards = generate_tutor_content("photosynthesis", mode="flashcards", today=TODAY)
    assert len(cards.explanation) == 3
    assert len(cards.quiz) == 2
    assert all("flashcards" not in prompt.lower() for prompt in cards.follow_up_prompts)


def test_generic_prompt_builds_content_from_keywords():
    output = generate_tutor_content("Explain the basics of organic chemistry reactions", today=TODAY)
    assert output.topic == "Explain The Basics Of Organic Chemistry Reactions"
    assert output.confidence == "medium"
    assert "explain, basics, organic" in output.summary
    assert output.explanation[0] == "Explain the basics of organic chemistry reactions."
    assert len(output.key_points) == 6
    assert len(output.flashcards) == 5
    assert len(output.quiz) == 3
    for index, item in enumerate(output.quiz):
        assert item.correct_index == index % 4
        assert len(item.options) == 4
        assert item.options[item.correct_index] == output.key_points[index]


def test_long_prompt_raises_confidence():
    prompt = " ".join(["cellular"] + ["respiration"] * 19)
    assert generate_tutor_content(prompt, today=TODAY).confidence == "high"


def test_related_task_is_woven_into_output():
    tasks = [
        Task(id="t1", title="Photosynthesis lab report", priority="high", deadline=TODAY + timedelta(days=1)),
        Task(id="t2", title="Pay rent"),
        Task(id="t3", title="Photosynthesis worksheet", status="completed"),
    ]
    output = generate_tutor_content("photosynthesis", tasks=tasks, today=TODAY)
    assert output.key_points[0].startswith('Prioritize "Photosynthesis lab report"')
    assert len(output.key_points) == 7
    assert output.study_plan[-1].title == "Task Transfer"
    assert output.context_signals == [
        "2 active planner tasks detected.",
        "1 high-priority task should stay in your study loop.",
        f"Nearest deadline: {(TODAY + timedelta(days=1)).isoformat()}.",
        'Most relevant task: "Photosynthesis lab report".',
    ]


def test_planner_context_can_be_disabled():
    tasks = [Task(id="t1", title="Photosynthesis lab report", priority="high")]
    output = generate_tutor_content("photosynthesis", include_planner_context=False, tasks=tasks, today=TODAY)
    assert output.context_signals == []
    assert not output.key_points[0].startswith("Prioritize")
    assert output.study_plan[-1].title == "Check Understanding"


def test_exam_prep_adds_simulation_step():
    output = generate_tutor_content("newton laws", mode="exam_prep", today=TODAY)
    assert [step.title for step in output.study_plan] == [
        "Concept Warm-up",
        "Deep Review",
        "Active Recall",
        "Exam Simulation",
        "Check Understanding",
    ]


def test_unknown_mode_falls_back_to_explain():
    assert generate_tutor_content("photosynthesis", mode="podcast", today=TODAY).mode == "explain"


def test_helpers():
    assert extract_topic("Cell division. Mitosis and meiosis") == "Cell Division"
    assert extract_keywords("The cell and the cell wall") == ["cell", "wall"]
    assert deadline_weight(None, TODAY) == 0
    assert deadline_weight(TODAY, TODAY) == 4
    assert deadline_weight(TODAY - timedelta(days=1), TODAY) == 3
    assert deadline_weight(TODAY + timedelta(days=4), TODAY) == 2
    assert deadline_weight(TODAY + timedelta(days=9), TODAY) == 1


def test_topic_skips_empty_leading_clauses():
    assert extract_topic("...cell respiration basics") == "Cell Respiration Basics"
    assert extract_topic("?!") == "?!"
