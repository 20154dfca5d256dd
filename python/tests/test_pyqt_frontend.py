"""PyQt6 answer buttons: labels versus the answers they submit."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from backend.engine.questionbank import QuestionBank  # noqa: E402
from backend.models.question import Difficulty  # noqa: E402
from frontend.gui.pyqt.app import _button_label, _GamePage  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def test_button_label_escapes_ampersand() -> None:
    assert _button_label("Bill Gates & Steve Jobs") == "Bill Gates && Steve Jobs"
    assert _button_label("Linux") == "Linux"


def test_options_with_ampersand_keep_their_answer_text(qapp) -> None:
    # The ENIAC question has "&" in two of its options.
    question = next(
        q for q in QuestionBank.questions_for(Difficulty.EASY)
        if any("&" in o for o in q.options)
    )
    page = _GamePage()
    page.set_question(question.prompt, question.options)

    assert page.options == list(question.options)
    assert question.correct_answer in page.options
    for btn, option in zip(page.option_btns, question.options):
        assert btn.text() == option.replace("&", "&&")
