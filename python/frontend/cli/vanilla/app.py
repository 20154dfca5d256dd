"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes the main menu, username entry, difficulty selection, gameplay,
pause / save menus, post-game screen and leaderboards.
"""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path
from typing import Sequence

from backend.engine.gameflow import GameFlowController, MessageKind, Screen
from backend.models.leaderboard import LeaderboardEntry, LeaderboardStore, crowned
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty
from backend.models.savegame import SaveStore
from frontend.cli.input_handler import get_answer_key, get_key, get_yes_no, read_line


# -- ANSI helpers -------------------------------------------------------------

_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_DIFFICULTIES = list(Difficulty)


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _banner(title: str) -> None:
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}{title:^38}{_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()


# -- presentation -------------------------------------------------------------


class _TerminalView:
    """Holds whatever the controller last rendered until the next redraw."""

    def __init__(self) -> None:
        self.screen = Screen.MENU
        self.prompt = ""
        self.options: tuple[str, ...] = ()
        self.score = 0
        self.lives = 0
        self.is_win = False
        self.final_score = 0
        self.board_difficulty: Difficulty | None = None
        self.entries: list[LeaderboardEntry] = []
        self.music_on = False
        self._messages: list[str] = []

    def show_screen(self, screen: Screen) -> None:
        self.screen = screen

    def render_question(self, prompt: str, options: Sequence[str]) -> None:
        self.prompt = prompt
        self.options = tuple(options)

    def render_score(self, score: int) -> None:
        self.score = score

    def render_lives(self, lives: int) -> None:
        self.lives = lives

    def render_post_game(self, is_win: bool, final_score: int) -> None:
        self.is_win = is_win
        self.final_score = final_score

    def render_leaderboard(
        self, difficulty: Difficulty, entries: Sequence[LeaderboardEntry]
    ) -> None:
        self.board_difficulty = difficulty
        self.entries = list(entries)

    def render_message(self, kind: MessageKind, text: str) -> None:
        colour = _RED if kind is MessageKind.ERROR else _C
        self._messages.append(f"{colour}{text}{_R}")

    def ask_load_save(self) -> bool:
        self.flush_messages()
        print(f"\n  {_Y}You have a saved game for this difficulty.{_R}")
        print(f"  Load it? {_C}Y{_R} load  /  {_C}N{_R} start new game")
        return get_yes_no()

    def confirm(self, text: str) -> bool:
        self.flush_messages()
        print(f"\n  {text}  [{_C}Y{_R}/{_C}N{_R}]")
        return get_yes_no()

    def toggle_audio(self) -> bool:
        # No playback in the terminal; the flag is only shown in the pause menu.
        self.music_on = not self.music_on
        return self.music_on

    def flush_messages(self) -> None:
        for msg in self._messages:
            print(f"  {msg}")
        self._messages.clear()


# -- screens ------------------------------------------------------------------


def _show_menu(view: _TerminalView) -> None:
    _clear()
    _banner("Q U E E Z E")
    print(f"    {_C}1{_R}  Start Game")
    print(f"    {_C}2{_R}  Leaderboard")
    print(f"    {_DIM}Q{_R}  Exit")
    print()
    view.flush_messages()


def _show_username(view: _TerminalView) -> None:
    _clear()
    _banner("Please Enter Your Username")
    print(f"    {_C}Enter{_R}  type username    {_DIM}B{_R}  back")
    print()
    view.flush_messages()


def _show_difficulties(view: _TerminalView, title: str) -> None:
    _clear()
    _banner(title)
    for i, d in enumerate(_DIFFICULTIES, 1):
        lives = f"{_DIM}({d.initial_lives} {'life' if d.initial_lives == 1 else 'lives'}){_R}"
        print(f"    {_C}{i}{_R}  {d.label:<8} {lives}")
    print(f"    {_DIM}B{_R}  back")
    print()
    view.flush_messages()


def _show_question(view: _TerminalView, controller: GameFlowController) -> None:
    _clear()
    game = controller.game
    assert game is not None
    print(
        f"  {_C}=== {game.difficulty.label}  ·  Question "
        f"{game.question_number}/{game.total_questions} ==={_R}"
    )
    print(
        f"  Score: {_Y}{view.score}/{QUESTIONS_PER_ROUND}{_R}  |  "
        f"Lives: {_Y}{view.lives}{_R}"
    )
    print()
    for line in view.prompt.splitlines():
        for wrapped in textwrap.wrap(line, 70) or [""]:
            print(f"  {_BOLD}{wrapped}{_R}")
    print()
    for i, option in enumerate(view.options, 1):
        print(f"    {_C}{i}{_R}  {option}")
    print()
    print(f"  {_C}1-4{_R}/{_C}A-D{_R}: answer  |  {_C}P{_R}: pause")
    view.flush_messages()


def _show_pause(view: _TerminalView) -> None:
    _clear()
    _banner("P A U S E D")
    music = "Stop Music" if view.music_on else "Play Music"
    print(f"    {_C}1{_R}  Resume")
    print(f"    {_C}2{_R}  {music}")
    print(f"    {_C}3{_R}  Save Menu")
    print(f"    {_C}4{_R}  Main Menu")
    print(f"    {_C}5{_R}  Exit Game")
    print()
    view.flush_messages()


def _show_save_menu(view: _TerminalView) -> None:
    _clear()
    _banner("S A V E   M E N U")
    print(f"    {_C}1{_R}  Save Game")
    print(f"    {_C}2{_R}  Delete Save")
    print(f"    {_C}3{_R}  Load Save")
    print(f"    {_DIM}B{_R}  back")
    print()
    view.flush_messages()


def _show_post_game(view: _TerminalView) -> None:
    _clear()
    if view.is_win:
        _banner("★ Congratulations! ★")
    else:
        _banner("Game Over!")
    view.flush_messages()
    print(f"  Final Score: {_Y}{view.final_score}{_R}")
    print()
    print(f"    {_C}R{_R}  Restart Game")
    print(f"    {_C}D{_R}  Choose Another Difficulty")
    print(f"    {_C}M{_R}  Return to Main Menu")
    print()


def _show_leaderboard(view: _TerminalView) -> None:
    _clear()
    label = view.board_difficulty.label if view.board_difficulty else ""
    _banner(f"Leaderboard ({label})")
    if not view.entries:
        print(f"  {_DIM}No scores recorded yet.{_R}")
    for entry, crown in crowned(view.entries):
        mark = f"{_Y}♛{_R} " if crown else "  "
        print(f"    {mark}{entry.username}: {_Y}{entry.best_score}{_R}")
    print(f"\n  {_DIM}Press any key to go back.{_R}")


# -- event loop ---------------------------------------------------------------


def _pick_difficulty(key: str) -> Difficulty | None:
    if key.isdigit() and 1 <= int(key) <= len(_DIFFICULTIES):
        return _DIFFICULTIES[int(key) - 1]
    return None


def _loop(controller: GameFlowController, view: _TerminalView) -> None:
    controller.start()

    while True:
        screen = controller.screen

        if screen is Screen.MENU:
            _show_menu(view)
            key = get_key()
            if key in ("1", "enter"):
                controller.open_username_entry()
            elif key == "2":
                controller.open_leaderboard_selection()
            elif key == "quit":
                _clear()
                print("  Goodbye!\n")
                return

        elif screen is Screen.USERNAME:
            _show_username(view)
            key = get_key()
            if key in ("back", "quit"):
                controller.on_back()
            elif key == "enter":
                controller.submit_username(read_line("  Username: "))

        elif screen in (Screen.DIFFICULTY, Screen.LEADERBOARD_SELECT):
            title = "Select Difficulty"
            if screen is Screen.LEADERBOARD_SELECT:
                title = "Leaderboard"
            _show_difficulties(view, title)
            key = get_key()
            difficulty = _pick_difficulty(key)
            if difficulty is not None and screen is Screen.DIFFICULTY:
                controller.start_round(difficulty)
            elif difficulty is not None:
                controller.show_leaderboard(difficulty)
            elif key in ("back", "quit"):
                controller.on_back()

        elif screen is Screen.GAMEPLAY:
            _show_question(view, controller)
            key = get_answer_key()
            if key.isdigit() and 1 <= int(key) <= len(view.options):
                controller.on_answer_selected(view.options[int(key) - 1])
            elif key in ("pause", "quit"):
                controller.on_pause_requested()

        elif screen is Screen.PAUSED:
            _show_pause(view)
            key = get_key()
            if key in ("1", "pause", "enter"):
                controller.on_resume_requested()
            elif key == "2":
                controller.on_toggle_audio()
            elif key == "3":
                controller.on_open_save_menu()
            elif key in ("4", "menu"):
                controller.on_return_to_menu()
            elif key in ("5", "quit"):
                if controller.on_exit_requested():
                    _clear()
                    print("  Goodbye!\n")
                    return

        elif screen is Screen.SAVE_MENU:
            _show_save_menu(view)
            key = get_key()
            if key == "1":
                controller.on_save_requested()
            elif key == "2":
                controller.on_delete_requested()
            elif key == "3":
                controller.on_load_requested()
            elif key in ("back", "quit"):
                controller.on_close_save_menu()

        elif screen is Screen.POST_GAME:
            _show_post_game(view)
            key = get_key()
            if key == "restart":
                controller.on_restart()
            elif key in ("d", "D"):
                controller.on_choose_difficulty()
            elif key in ("menu", "quit"):
                controller.on_return_to_menu()

        elif screen is Screen.LEADERBOARD:
            _show_leaderboard(view)
            get_key()
            controller.on_back()


# -- public entry point -------------------------------------------------------


def run(data_dir: Path) -> None:
    """Launch the vanilla CLI with interactive menu."""
    view = _TerminalView()
    controller = GameFlowController(view, LeaderboardStore(data_dir), SaveStore(data_dir))
    _loop(controller, view)
