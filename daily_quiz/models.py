

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


CHOICE_LABELS = ("A", "B", "C", "D")


@dataclass(frozen=True)
class Question:
    """
    Represents a single multiple-choice question from the static pool.

    - `id`: unique identifier within the pool
    - `text`: the question to show to the user
    - `options`: choice label (A-D) -> option text
    - `correct`: the label of the right option
    - `difficulty`: difficulty tag used for quota sampling
    """

    id: str
    text: str
    options: Mapping[str, str]
    correct: str
    difficulty: Difficulty

    def __post_init__(self) -> None:
        # read-only view so a shared pool can't be edited through a question
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "options": dict(self.options),
            "correct": self.correct,
            "difficulty": self.difficulty.value,
        }


@dataclass(frozen=True)
class QuestionPool:
    """Read-only, ordered collection of questions loaded once at startup."""

    questions: tuple[Question, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "questions", tuple(self.questions))
        seen: set[str] = set()
        for q in self.questions:
            if q.id in seen:
                raise ValueError(f"Duplicate question id in pool: {q.id}")
            seen.add(q.id)

    @classmethod
    def of(cls, questions: Iterable[Question]) -> "QuestionPool":
        return cls(tuple(questions))

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def __len__(self) -> int:
        return len(self.questions)

    def __getitem__(self, index: int) -> Question:
        return self.questions[index]
