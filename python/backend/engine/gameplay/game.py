"""Core gameplay logic — evaluates answers and decides win or loss."""

from __future__ import annotations

from backend.engine.gamestate import GameState, Phase
from backend.engine.questionbank import QuestionBank
from backend.errors import InvalidTransitionError
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty, Question
from backend.models.savegame import SaveRecord


class GamePlay:
    """Orchestrates a single quiz round for one player."""

    def __init__(self, difficulty: Difficulty, username: str) -> None:
        self.difficulty = difficulty
        self.username = username
        self.questions = QuestionBank.questions_for(difficulty)
        self.state = GameState(lives=difficulty.initial_lives)

    @classmethod
    def from_record(cls, difficulty: Difficulty, record: SaveRecord) -> "GamePlay":
        """Create a round resumed from a saved snapshot."""
        game = cls(difficulty, record.username)
        game.restore_from(record)
        return game

    # -- answering ------------------------------------------------------------

    def submit_answer(self, selected: str) -> bool:
        """Apply the player's choice and return True if it was correct.

        A correct choice scores a point, a wrong one costs a life; either
        way the round moves on to the next question.
        """
        if self.state.phase is not Phase.AWAITING_ANSWER:
            raise InvalidTransitionError(
                f"Cannot answer once the round is {self.state.phase.value}."
            )
        correct = QuestionBank.correct_answer_for(
            self.difficulty, self.state.question_index
        ) == selected

        if correct:
            self.state.award_point()
        else:
            self.state.lose_life()
        self.state.advance()
        self.state.settle(self.total_questions)
        return correct

    # -- resets ---------------------------------------------------------------

    def restart(self) -> None:
        """Start the same difficulty over with full lives."""
        self.state = GameState(lives=self.difficulty.initial_lives)

    def abandon(self) -> None:
        """Clear progress without touching lives; nothing is persisted."""
        self.state.score = 0
        self.state.question_index = 0

    def restore_from(self, record: SaveRecord) -> None:
        self.state = GameState(
            lives=record.lives,
            score=record.score,
            question_index=record.question_index,
        )
        # A snapshot taken past the last question resumes as finished.
        self.state.settle(self.total_questions)

    def snapshot(self) -> SaveRecord:
        return SaveRecord(
            username=self.username,
            score=self.state.score,
            lives=self.state.lives,
            question_index=self.state.question_index,
        )

    # -- queries --------------------------------------------------------------

    @property
    def total_questions(self) -> int:
        return QUESTIONS_PER_ROUND

    @property
    def current_question(self) -> Question | None:
        """The question awaiting an answer, or ``None`` once the round is over."""
        if self.state.is_over:
            return None
        return self.questions[self.state.question_index]

    @property
    def question_number(self) -> int:
        """1-based position of the current question."""
        return min(self.state.question_index + 1, self.total_questions)

    @property
    def is_won(self) -> bool:
        return self.state.phase is Phase.WON

    @property
    def is_lost(self) -> bool:
        return self.state.phase is Phase.LOST

    @property
    def is_over(self) -> bool:
        return self.state.is_over
