from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from daily_quiz.models import Difficulty, Question, QuestionPool  # noqa: E402


def make_question(qid: str, difficulty: Difficulty | str) -> Question:
    return Question(
        id=qid,
        text=f"Question {qid}?",
        options={"A": "one", "B": "two", "C": "three", "D": "four"},
        correct="A",
        difficulty=Difficulty(difficulty),
    )


def make_pool(easy: int, medium: int, hard: int) -> QuestionPool:
    questions: List[Question] = []
    questions += [make_question(f"E{i}", Difficulty.EASY) for i in range(1, easy + 1)]
    questions += [make_question(f"M{i}", Difficulty.MEDIUM) for i in range(1, medium + 1)]
    questions += [make_question(f"H{i}", Difficulty.HARD) for i in range(1, hard + 1)]
    return QuestionPool.of(questions)


@pytest.fixture
def example_pool() -> QuestionPool:
    """4 Easy, 5 Medium, 25 Hard."""
    return make_pool(4, 5, 25)


@pytest.fixture
def roomy_pool() -> QuestionPool:
    return make_pool(10, 12, 40)


@pytest.fixture
def short_easy_pool() -> QuestionPool:
    """Only 2 Easy questions against a quota of 4."""
    return make_pool(2, 5, 30)
