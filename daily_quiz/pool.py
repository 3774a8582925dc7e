"""
Loading of the static question pool.

The pool file is a JSON array of question objects (or an object with a
`questions` array). Every record is checked with pydantic before it becomes
an immutable `Question`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from .models import CHOICE_LABELS, Difficulty, Question, QuestionPool


logger = logging.getLogger(__name__)

DEFAULT_POOL_PATH = Path(__file__).with_name("data") / "questions.json"


class PoolLoadError(ValueError):
    """Raised when the question pool file is missing or malformed."""


class QuestionRecord(BaseModel):
    id: Union[str, int]
    text: str
    options: Dict[str, str]
    correct: str
    difficulty: Difficulty

    @field_validator("id")
    @classmethod
    def _id_as_str(cls, v: Union[str, int]) -> str:
        v = str(v).strip()
        if not v:
            raise ValueError("id must not be empty")
        return v

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be empty")
        return v

    @field_validator("options")
    @classmethod
    def _four_labelled_options(cls, v: Dict[str, str]) -> Dict[str, str]:
        if sorted(v) != list(CHOICE_LABELS):
            raise ValueError(f"options must have exactly the labels {list(CHOICE_LABELS)}, got {sorted(v)}")
        return {label: v[label] for label in CHOICE_LABELS}

    @model_validator(mode="after")
    def _correct_is_an_option(self) -> "QuestionRecord":
        if self.correct not in self.options:
            raise ValueError(f"correct must be one of {list(CHOICE_LABELS)}, got {self.correct!r}")
        return self

    def to_question(self) -> Question:
        return Question(
            id=str(self.id),
            text=self.text,
            options=self.options,
            correct=self.correct,
            difficulty=self.difficulty,
        )


def parse_pool(raw: Any) -> QuestionPool:
    if isinstance(raw, dict) and "questions" in raw:
        raw = raw["questions"]
    if not isinstance(raw, list):
        raise PoolLoadError("Question pool must be a JSON array of questions")

    questions: List[Question] = []
    for idx, item in enumerate(raw):
        try:
            questions.append(QuestionRecord.model_validate(item).to_question())
        except ValidationError as exc:
            ident = item.get("id") if isinstance(item, dict) else None
            raise PoolLoadError(f"Invalid question at index {idx} (id={ident!r}): {exc}") from exc

    try:
        return QuestionPool.of(questions)
    except ValueError as exc:
        raise PoolLoadError(str(exc)) from exc


def load_pool(path: str | Path = DEFAULT_POOL_PATH) -> QuestionPool:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as exc:
        raise PoolLoadError(f"Question pool not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise PoolLoadError(f"Question pool is not valid JSON: {path}: {exc}") from exc

    pool = parse_pool(raw)
    logger.info("Loaded %d questions from %s", len(pool), path)
    return pool
