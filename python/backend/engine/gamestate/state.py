"""Tracks the mutable state of a quiz round in progress."""

from __future__ import annotations

from enum import Enum


class Phase(Enum):
    AWAITING_ANSWER = "awaiting_answer"
    WON = "won"
    LOST = "lost"


class GameState:
    """Holds the score, remaining lives, question position and phase."""

    def __init__(self, lives: int, score: int = 0, question_index: int = 0) -> None:
        self.score = score
        self.lives = lives
        self.question_index = question_index
        self.phase = Phase.AWAITING_ANSWER

    # The answer position always moves with the question position.
    @property
    def answer_index(self) -> int:
        return self.question_index

    # -- counters -------------------------------------------------------------

    def award_point(self) -> None:
        self.score += 1

    def lose_life(self) -> None:
        self.lives -= 1

    def advance(self) -> None:
        self.question_index += 1

    # -- phase ----------------------------------------------------------------

    def settle(self, total_questions: int) -> Phase:
        """Move to a terminal phase if the round is over.

        Running out of lives wins over reaching the end: losing the last
        life on the final question is a loss.
        """
        if self.lives <= 0:
            self.phase = Phase.LOST
        elif self.question_index >= total_questions:
            self.phase = Phase.WON
        else:
            self.phase = Phase.AWAITING_ANSWER
        return self.phase

    @property
    def is_over(self) -> bool:
        return self.phase is not Phase.AWAITING_ANSWER
