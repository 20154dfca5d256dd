"""Question and difficulty models for the quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

QUESTIONS_PER_ROUND = 15
OPTIONS_PER_QUESTION = 4


class Difficulty(StrEnum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def initial_lives(self) -> int:
        """Lives a fresh round starts with."""
        return _INITIAL_LIVES[self]


_INITIAL_LIVES: dict[Difficulty, int] = {
    Difficulty.EASY: 3,
    Difficulty.NORMAL: 2,
    Difficulty.HARD: 1,
}


@dataclass(frozen=True)
class Question:
    """A multiple-choice question with exactly four distinct options.

    Example::

        Question(
            "What does \\"CPU\\" stand for?",
            ("Central Processing Unit", "Computer Power Unit",
             "Core Processing Unit", "Central Performance Unit"),
            "Central Processing Unit",
        )
    """

    prompt: str
    options: tuple[str, ...]
    correct_answer: str

    def __post_init__(self) -> None:
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(
                f"Expected {OPTIONS_PER_QUESTION} options, got "
                f"{len(self.options)} for {self.prompt!r}."
            )
        if len(set(self.options)) != len(self.options):
            raise ValueError(f"Duplicate options for {self.prompt!r}.")
        if self.correct_answer not in self.options:
            raise ValueError(
                f"Correct answer {self.correct_answer!r} is not one of the "
                f"options for {self.prompt!r}."
            )

    def is_correct(self, answer: str) -> bool:
        return answer == self.correct_answer
