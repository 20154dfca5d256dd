"""PyQt6 GUI frontend — fully self-contained.

Includes main menu, username entry, difficulty selection, gameplay,
pause / save menus, post-game screen and leaderboards.  No terminal
interaction required.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameflow import GameFlowController, MessageKind, Screen
from backend.models.leaderboard import LeaderboardEntry, LeaderboardStore, crowned
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty
from backend.models.savegame import SaveStore

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
    QLineEdit {{ background: {_SURFACE0}; color: {_TEXT}; border: none;
                 border-radius: 8px; padding: 8px; }}
"""


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    bold: bool = True,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


def _button_label(text: str) -> str:
    """Escape "&", which buttons otherwise treat as a mnemonic marker."""
    return text.replace("&", "&&")


def _title(text: str, size: int = 30, colour: str = _TEXT) -> QLabel:
    lbl = QLabel(text)
    lbl.setFont(QFont("Helvetica", size, QFont.Weight.Bold))
    lbl.setStyleSheet(f"color:{colour};")
    lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
    lbl.setWordWrap(True)
    return lbl


class _Page(QWidget):
    """Centred vertical column of widgets."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")
        self.root = QVBoxLayout(self)
        self.root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.root.setSpacing(10)
        self.root.setContentsMargins(30, 30, 30, 30)

    def add(self, widget: QWidget) -> None:
        self.root.addWidget(widget, alignment=Qt.AlignmentFlag.AlignCenter)

    def gap(self, h: int) -> None:
        self.root.addSpacerItem(QSpacerItem(0, h))

    def button(self, text: str, **kw) -> QPushButton:
        kw.setdefault("min_w", 300)
        btn = _styled_btn(text, **kw)
        self.add(btn)
        return btn


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(_Page):
    def __init__(self) -> None:
        super().__init__()
        self.add(_title("Q U E E Z E", 40))
        self.gap(30)
        self.start_btn = self.button(
            "Start Game", bg=_BLUE, hover=_LAVENDER, fg=_BASE, font_size=16, min_h=52
        )
        self.scores_btn = self.button("Leaderboard")
        self.quit_btn = self.button("Exit", bg=_RED, hover=_RED_H, fg=_BASE)


class _UsernamePage(_Page):
    def __init__(self) -> None:
        super().__init__()
        self.add(_title("Please Enter Your Username:", 24))
        self.gap(12)
        self.entry = QLineEdit()
        self.entry.setFont(QFont("Helvetica", 16, QFont.Weight.Bold))
        self.entry.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.entry.setMinimumWidth(300)
        self.add(self.entry)
        self.gap(12)
        self.enter_btn = self.button("Enter", bg=_BLUE, hover=_LAVENDER, fg=_BASE)
        self.back_btn = self.button("Return")


class _DifficultyPage(_Page):
    """Difficulty buttons; reused for choosing a leaderboard."""

    def __init__(self, heading: str) -> None:
        super().__init__()
        self.add(_title(heading, 26))
        self.gap(16)
        self.buttons: dict[Difficulty, QPushButton] = {}
        for d in Difficulty:
            lives = "life" if d.initial_lives == 1 else "lives"
            self.buttons[d] = self.button(
                f"{d.label}   ({d.initial_lives} {lives})", font_size=16, min_h=56
            )
        self.gap(12)
        self.back_btn = self.button("Return")


class _GamePage(QWidget):
    """Question, four answer buttons, score / lives and a pause button."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setSpacing(10)
        root.setContentsMargins(24, 16, 24, 16)

        top = QHBoxLayout()
        self.pause_btn = _styled_btn("Pause", min_h=34, font_size=12)
        top.addWidget(self.pause_btn)
        top.addStretch(1)
        self._progress = QLabel()
        self._progress.setFont(QFont("Helvetica", 13))
        self._progress.setStyleSheet(f"color:{_SUBTEXT};")
        top.addWidget(self._progress)
        root.addLayout(top)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 15, QFont.Weight.Bold))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        self._question = _title("", 18)
        self._question.setMinimumHeight(110)
        root.addWidget(self._question)

        grid = QGridLayout()
        grid.setSpacing(12)
        self.option_btns: list[QPushButton] = []
        for i in range(4):
            b = _styled_btn("", bg=_BLUE, hover=_LAVENDER, fg=_BASE, min_h=90, font_size=14)
            b.setMinimumWidth(260)
            grid.addWidget(b, i // 2, i % 2)
            self.option_btns.append(b)
        root.addLayout(grid)

        self._feedback = QLabel("")
        self._feedback.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
        self._feedback.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._feedback)

        hint = QLabel("1-4  answer     P / Esc  pause")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self.score = 0
        self.lives = 0
        self.options: list[str] = []

    def set_question(self, prompt: str, options: Sequence[str]) -> None:
        self._question.setText(prompt)
        self.options = list(options)
        for btn, text in zip(self.option_btns, options):
            btn.setText(_button_label(text))

    def set_progress(self, text: str) -> None:
        self._progress.setText(text)

    def set_feedback(self, text: str, colour: str) -> None:
        self._feedback.setText(text)
        self._feedback.setStyleSheet(f"color:{colour};")

    def sync_stats(self) -> None:
        self._stats.setText(
            f"Score: {self.score}/{QUESTIONS_PER_ROUND}    Lives: {self.lives}"
        )


class _PausePage(_Page):
    def __init__(self) -> None:
        super().__init__()
        self.add(_title("P A U S E D", 30, _YELLOW))
        self.gap(16)
        self.resume_btn = self.button("Resume", bg=_GREEN, hover=_GREEN_H, fg=_BASE)
        self.music_btn = self.button("Play Music")
        self.save_btn = self.button("Save Menu")
        self.menu_btn = self.button("Main Menu")
        self.exit_btn = self.button("Exit Game", bg=_RED, hover=_RED_H, fg=_BASE)


class _SavePage(_Page):
    def __init__(self) -> None:
        super().__init__()
        self.add(_title("S A V E   M E N U", 28, _YELLOW))
        self.gap(16)
        self.back_btn = self.button("Back")
        self.save_btn = self.button("Save Game", bg=_BLUE, hover=_LAVENDER, fg=_BASE)
        self.delete_btn = self.button("Delete Save")
        self.load_btn = self.button("Load Save")


class _PostGamePage(_Page):
    def __init__(self) -> None:
        super().__init__()
        self._headline = _title("", 32)
        self.add(self._headline)
        self._score = _title("", 20, _YELLOW)
        self.add(self._score)
        self.gap(24)
        self.restart_btn = self.button(
            "Restart Game", bg=_GREEN, hover=_GREEN_H, fg=_BASE, font_size=16, min_h=50
        )
        self.difficulty_btn = self.button("Choose Another Difficulty")
        self.menu_btn = self.button("Return to Main Menu")

    def show_result(self, is_win: bool, final_score: int) -> None:
        if is_win:
            self._headline.setText("★  Congratulations!  ★")
            self._headline.setStyleSheet(f"color:{_GREEN};")
        else:
            self._headline.setText("Game Over!")
            self._headline.setStyleSheet(f"color:{_RED};")
        self._score.setText(f"Final Score: {final_score}")


class _LeaderboardPage(QWidget):
    """Scrollable ranking with crowns and a back button."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(24, 20, 24, 16)

        self._heading = _title("Leaderboard", 26)
        root.addWidget(self._heading)

        self._content = QWidget()
        self._content.setObjectName("page")
        self._rows = QVBoxLayout(self._content)
        self._rows.setSpacing(4)
        self._rows.setAlignment(Qt.AlignmentFlag.AlignTop)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._content)
        scroll.setStyleSheet(f"QScrollArea {{ border:none; background:{_BASE}; }}")
        root.addWidget(scroll)

        self.back_btn = _styled_btn("Return", min_w=200, font_size=13)
        root.addWidget(self.back_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    def populate(self, difficulty: Difficulty, entries: Sequence[LeaderboardEntry]) -> None:
        self._heading.setText(f"Leaderboard ({difficulty.label})")
        while self._rows.count():
            item = self._rows.takeAt(0)
            widget = item.widget() if item is not None else None
            if widget is not None:
                widget.deleteLater()

        if not entries:
            lbl = _title("No scores recorded yet", 15, _OVERLAY0)
            self._rows.addWidget(lbl)
            return
        for entry, crown in crowned(list(entries)):
            mark = "♛ " if crown else ""
            lbl = QLabel(f"{mark}{entry.username}: {entry.best_score}")
            lbl.setFont(QFont("Helvetica", 16, QFont.Weight.Bold))
            lbl.setStyleSheet(f"color:{_YELLOW if crown else _SUBTEXT};")
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._rows.addWidget(lbl)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    """Hosts every page and acts as the controller's presentation."""

    def __init__(self, data_dir: Path) -> None:
        super().__init__()
        self.setWindowTitle("Queeze")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(720, 620)
        self._music_on = False

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._menu = _MenuPage()
        self._username = _UsernamePage()
        self._difficulty = _DifficultyPage("Select Difficulty")
        self._board_select = _DifficultyPage("Leaderboard")
        self._game = _GamePage()
        self._pause = _PausePage()
        self._save = _SavePage()
        self._post = _PostGamePage()
        self._board = _LeaderboardPage()

        self._pages: dict[Screen, QWidget] = {
            Screen.MENU: self._menu,
            Screen.USERNAME: self._username,
            Screen.DIFFICULTY: self._difficulty,
            Screen.LEADERBOARD_SELECT: self._board_select,
            Screen.GAMEPLAY: self._game,
            Screen.PAUSED: self._pause,
            Screen.SAVE_MENU: self._save,
            Screen.POST_GAME: self._post,
            Screen.LEADERBOARD: self._board,
        }
        for page in self._pages.values():
            self._stack.addWidget(page)

        self.controller = GameFlowController(
            self, LeaderboardStore(data_dir), SaveStore(data_dir)
        )
        self._wire()
        self.controller.start()

    def _wire(self) -> None:
        c = self.controller

        self._menu.start_btn.clicked.connect(c.open_username_entry)
        self._menu.scores_btn.clicked.connect(c.open_leaderboard_selection)
        self._menu.quit_btn.clicked.connect(self.close)

        self._username.enter_btn.clicked.connect(self._submit_username)
        self._username.entry.returnPressed.connect(self._submit_username)
        self._username.back_btn.clicked.connect(c.on_back)

        for d, btn in self._difficulty.buttons.items():
            btn.clicked.connect(lambda _, dd=d: c.start_round(dd))
        self._difficulty.back_btn.clicked.connect(c.on_back)
        for d, btn in self._board_select.buttons.items():
            btn.clicked.connect(lambda _, dd=d: c.show_leaderboard(dd))
        self._board_select.back_btn.clicked.connect(c.on_back)
        self._board.back_btn.clicked.connect(c.on_back)

        for i, btn in enumerate(self._game.option_btns):
            btn.clicked.connect(
                lambda _, i=i: c.on_answer_selected(self._game.options[i])
            )
        self._game.pause_btn.clicked.connect(c.on_pause_requested)

        self._pause.resume_btn.clicked.connect(c.on_resume_requested)
        self._pause.music_btn.clicked.connect(c.on_toggle_audio)
        self._pause.save_btn.clicked.connect(c.on_open_save_menu)
        self._pause.menu_btn.clicked.connect(c.on_return_to_menu)
        self._pause.exit_btn.clicked.connect(self._exit_game)

        self._save.back_btn.clicked.connect(c.on_close_save_menu)
        self._save.save_btn.clicked.connect(c.on_save_requested)
        self._save.delete_btn.clicked.connect(c.on_delete_requested)
        self._save.load_btn.clicked.connect(c.on_load_requested)

        self._post.restart_btn.clicked.connect(c.on_restart)
        self._post.difficulty_btn.clicked.connect(c.on_choose_difficulty)
        self._post.menu_btn.clicked.connect(c.on_return_to_menu)

    def _submit_username(self) -> None:
        self.controller.submit_username(self._username.entry.text())

    def _exit_game(self) -> None:
        if self.controller.on_exit_requested():
            self.close()

    # -- presentation ---

    def show_screen(self, screen: Screen) -> None:
        if screen is Screen.GAMEPLAY and self.controller.game is not None:
            game = self.controller.game
            self._game.set_progress(
                f"{game.difficulty.label}  ·  Question "
                f"{game.question_number}/{game.total_questions}"
            )
        elif screen is Screen.USERNAME:
            self._username.entry.setFocus()
        self._stack.setCurrentWidget(self._pages[screen])

    def render_question(self, prompt: str, options: Sequence[str]) -> None:
        self._game.set_question(prompt, options)
        game = self.controller.game
        if game is not None:
            self._game.set_progress(
                f"{game.difficulty.label}  ·  Question "
                f"{game.question_number}/{game.total_questions}"
            )

    def render_score(self, score: int) -> None:
        self._game.score = score
        self._game.sync_stats()

    def render_lives(self, lives: int) -> None:
        self._game.lives = lives
        self._game.sync_stats()

    def render_post_game(self, is_win: bool, final_score: int) -> None:
        self._post.show_result(is_win, final_score)
        self._game.set_feedback("", _TEXT)

    def render_leaderboard(
        self, difficulty: Difficulty, entries: Sequence[LeaderboardEntry]
    ) -> None:
        self._board.populate(difficulty, entries)

    def render_message(self, kind: MessageKind, text: str) -> None:
        if kind is MessageKind.ERROR:
            QMessageBox.critical(self, "Error", text)
        elif self.controller.screen is Screen.GAMEPLAY:
            self._game.set_feedback(text, _GREEN if text == "Correct!" else _RED)
        else:
            QMessageBox.information(self, "Confirmation", text)

    def ask_load_save(self) -> bool:
        box = QMessageBox(self)
        box.setWindowTitle("Load Save")
        box.setText("You have a saved game for this difficulty. Do you want to load it?")
        load = box.addButton("Yes", QMessageBox.ButtonRole.YesRole)
        box.addButton("Start New Game", QMessageBox.ButtonRole.NoRole)
        box.exec()
        return box.clickedButton() is load

    def confirm(self, text: str) -> bool:
        answer = QMessageBox.question(
            self,
            "Confirm",
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    def toggle_audio(self) -> bool:
        # Playback is out of scope; only the button label follows the flag.
        self._music_on = not self._music_on
        self._pause.music_btn.setText("Stop Music" if self._music_on else "Play Music")
        return self._music_on

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        screen = self.controller.screen

        if screen is Screen.GAMEPLAY:
            _answers = {
                Qt.Key.Key_1: 0,
                Qt.Key.Key_2: 1,
                Qt.Key.Key_3: 2,
                Qt.Key.Key_4: 3,
            }
            if key in _answers:
                self.controller.on_answer_selected(
                    self._game.options[_answers[key]]
                )
            elif key in (Qt.Key.Key_P, Qt.Key.Key_Escape):
                self.controller.on_pause_requested()

        elif screen is Screen.PAUSED:
            if key in (Qt.Key.Key_P, Qt.Key.Key_Escape):
                self.controller.on_resume_requested()

        elif screen in (
            Screen.USERNAME,
            Screen.DIFFICULTY,
            Screen.LEADERBOARD_SELECT,
            Screen.LEADERBOARD,
            Screen.SAVE_MENU,
        ):
            if key == Qt.Key.Key_Escape:
                self.controller.on_back()

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(data_dir: Path = Path("data")) -> None:
    """Launch the PyQt6 GUI (opens directly to the menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(data_dir)
    window.show()
    qapp.exec()
