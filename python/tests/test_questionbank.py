"""Question data and difficulty table."""

from __future__ import annotations

import pytest

from backend.engine.questionbank import QuestionBank
from backend.engine.questionbank.bank import _check_rounds
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty, Question


@pytest.mark.parametrize("difficulty", list(Difficulty), ids=str)
def test_round_has_fifteen_questions(difficulty: Difficulty) -> None:
    assert len(QuestionBank.questions_for(difficulty)) == QUESTIONS_PER_ROUND


@pytest.mark.parametrize("difficulty", list(Difficulty), ids=str)
def test_every_question_is_well_formed(difficulty: Difficulty) -> None:
    for i, question in enumerate(QuestionBank.questions_for(difficulty)):
        assert len(question.options) == 4, f"{difficulty} #{i}"
        assert len(set(question.options)) == 4, f"{difficulty} #{i} repeats an option"
        assert question.correct_answer in question.options, f"{difficulty} #{i}"


def test_initial_lives_per_difficulty() -> None:
    assert Difficulty.EASY.initial_lives == 3
    assert Difficulty.NORMAL.initial_lives == 2
    assert Difficulty.HARD.initial_lives == 1


def test_difficulty_label() -> None:
    assert Difficulty("hard").label == "Hard"


def test_lookup_by_index_matches_round_order() -> None:
    questions = QuestionBank.questions_for(Difficulty.NORMAL)
    assert QuestionBank.question_for(Difficulty.NORMAL, 3) is questions[3]
    assert QuestionBank.options_for(Difficulty.NORMAL, 3) == questions[3].options
    assert (
        QuestionBank.correct_answer_for(Difficulty.NORMAL, 3)
        == questions[3].correct_answer
    )


@pytest.mark.parametrize("index", [-1, QUESTIONS_PER_ROUND])
def test_lookup_out_of_range(index: int) -> None:
    with pytest.raises(IndexError):
        QuestionBank.question_for(Difficulty.EASY, index)


def test_question_rejects_answer_outside_options() -> None:
    with pytest.raises(ValueError):
        Question("2 + 2?", ("1", "2", "3", "5"), "4")


def test_question_rejects_duplicate_options() -> None:
    with pytest.raises(ValueError):
        Question("2 + 2?", ("4", "4", "3", "5"), "4")


def test_question_is_correct() -> None:
    q = Question("2 + 2?", ("1", "4", "3", "5"), "4")
    assert q.is_correct("4")
    assert not q.is_correct("5")


def test_short_round_is_rejected() -> None:
    short = QuestionBank.questions_for(Difficulty.EASY)[:-1]
    with pytest.raises(ValueError, match="14 questions"):
        _check_rounds({Difficulty.EASY: short})
