"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output and prompts while sharing the
same key reader and backend as the vanilla CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from backend.engine.gameflow import GameFlowController, MessageKind, Screen
from backend.models.leaderboard import LeaderboardEntry, LeaderboardStore, crowned
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty
from backend.models.savegame import SaveStore
from frontend.cli.input_handler import get_answer_key, get_key

console = Console()

_DIFFICULTIES = list(Difficulty)


# -- helpers ------------------------------------------------------------------


def _menu_text(items: list[tuple[str, str]], key_style: str = "bold cyan") -> Text:
    """Build a vertical list of ``key  label`` lines."""
    text = Text()
    for i, (key, label) in enumerate(items):
        if i:
            text.append("\n")
        text.append(f"  {key}", style=key_style)
        text.append(f"  {label}")
    return text


def _draw(body: RenderableType, title: str, border: str = "bright_blue") -> None:
    console.clear()
    panel = Panel(
        body,
        title=f"[bold]{title}[/bold]",
        border_style=border,
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


# -- presentation -------------------------------------------------------------


class _RichView:
    """Keeps the last rendered state and shows messages under each screen."""

    def __init__(self) -> None:
        self.prompt = ""
        self.options: tuple[str, ...] = ()
        self.score = 0
        self.lives = 0
        self.is_win = False
        self.final_score = 0
        self.board_difficulty: Difficulty | None = None
        self.entries: list[LeaderboardEntry] = []
        self.music_on = False
        self._messages: list[Text] = []

    def show_screen(self, screen: Screen) -> None:
        # Screens are drawn by the loop from ``controller.screen``.
        pass

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
        style = "bold red" if kind is MessageKind.ERROR else "bold cyan"
        self._messages.append(Text(text, style=style))

    def ask_load_save(self) -> bool:
        self.flush_messages()
        console.print()
        choice = Prompt.ask(
            "  [yellow]You have a saved game for this difficulty.[/yellow] "
            "Load it or start a new game?",
            choices=["load", "new"],
            default="load",
            console=console,
        )
        return choice == "load"

    def confirm(self, text: str) -> bool:
        self.flush_messages()
        console.print()
        return Confirm.ask(f"  {text}", default=True, console=console)

    def toggle_audio(self) -> bool:
        # No playback in the terminal; the flag is only shown in the pause menu.
        self.music_on = not self.music_on
        return self.music_on

    def flush_messages(self) -> None:
        for msg in self._messages:
            console.print(Align.center(msg))
        self._messages.clear()


# -- screens ------------------------------------------------------------------


def _draw_menu(view: _RichView) -> None:
    body = Group(
        Text(""),
        Align.center(_menu_text([("1", "Start Game"), ("2", "Leaderboard")])),
        Align.center(_menu_text([("Q", "Exit")], key_style="dim bold")),
        Text(""),
    )
    _draw(body, "Q U E E Z E")
    view.flush_messages()


def _draw_username(view: _RichView) -> None:
    body = Align.center(
        _menu_text([("Enter", "type your username"), ("B", "back")])
    )
    _draw(body, "Please Enter Your Username")
    view.flush_messages()


def _draw_difficulties(view: _RichView, title: str) -> None:
    table = Table(show_header=True, box=rich.box.SIMPLE, header_style="dim")
    table.add_column("#", style="bold cyan", justify="right")
    table.add_column("Difficulty", style="bold")
    table.add_column("Lives", justify="center", style="yellow")
    for i, d in enumerate(_DIFFICULTIES, 1):
        table.add_row(str(i), d.label, str(d.initial_lives))

    body = Group(
        Align.center(table),
        Align.center(_menu_text([("B", "back")], key_style="dim bold")),
    )
    _draw(body, title)
    view.flush_messages()


def _draw_question(view: _RichView, controller: GameFlowController) -> None:
    game = controller.game
    assert game is not None

    stats = Text()
    stats.append("Score: ", style="dim")
    stats.append(f"{view.score}/{QUESTIONS_PER_ROUND}", style="bold yellow")
    stats.append("    Lives: ", style="dim")
    stats.append("♥ " * view.lives or "0", style="bold red")

    options = Table(show_header=False, box=rich.box.ROUNDED, border_style="dim")
    options.add_column(style="bold cyan", justify="right")
    options.add_column()
    for i, option in enumerate(view.options, 1):
        options.add_row(str(i), option)

    controls = Text()
    controls.append("1-4", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("A-D", style="bold cyan")
    controls.append("  answer   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  pause", style="dim")

    body = Group(
        Align.center(stats),
        Text(""),
        Align.center(Text(view.prompt, style="bold", justify="center")),
        Text(""),
        Align.center(options),
        Align.center(controls),
    )
    _draw(
        body,
        f"{game.difficulty.label}  ·  Question "
        f"{game.question_number}/{game.total_questions}",
    )
    view.flush_messages()


def _draw_pause(view: _RichView) -> None:
    music = "Stop Music" if view.music_on else "Play Music"
    body = Align.center(
        _menu_text(
            [
                ("1", "Resume"),
                ("2", music),
                ("3", "Save Menu"),
                ("4", "Main Menu"),
                ("5", "Exit Game"),
            ]
        )
    )
    _draw(body, "P A U S E D", border="yellow")
    view.flush_messages()


def _draw_save_menu(view: _RichView) -> None:
    body = Align.center(
        _menu_text(
            [("1", "Save Game"), ("2", "Delete Save"), ("3", "Load Save"), ("B", "back")]
        )
    )
    _draw(body, "S A V E   M E N U", border="yellow")
    view.flush_messages()


def _draw_post_game(view: _RichView) -> None:
    headline = Text()
    if view.is_win:
        headline.append("★ ", style="bold yellow")
        headline.append("Congratulations!", style="bold green")
        headline.append(" ★", style="bold yellow")
    else:
        headline.append("Game Over!", style="bold red")

    score = Text()
    score.append("Final Score: ", style="dim")
    score.append(str(view.final_score), style="bold yellow")

    body = Group(
        Align.center(headline),
        Align.center(score),
        Text(""),
        Align.center(
            _menu_text(
                [
                    ("R", "Restart Game"),
                    ("D", "Choose Another Difficulty"),
                    ("M", "Return to Main Menu"),
                ]
            )
        ),
    )
    _draw(body, "Q U E E Z E", border="bold green" if view.is_win else "red")
    view.flush_messages()


def _draw_leaderboard(view: _RichView) -> None:
    label = view.board_difficulty.label if view.board_difficulty else ""
    if not view.entries:
        body: RenderableType = Align.center(Text("No scores recorded yet.", style="dim"))
    else:
        table = Table(box=rich.box.ROUNDED, border_style="dim")
        table.add_column("#", justify="right", style="dim", width=3)
        table.add_column("", width=2)
        table.add_column("Player", style="bold")
        table.add_column("Score", justify="right", style="yellow")
        for rank, (entry, crown) in enumerate(crowned(view.entries), 1):
            table.add_row(
                str(rank),
                "[bold yellow]♛[/bold yellow]" if crown else "",
                entry.username,
                str(entry.best_score),
            )
        body = Align.center(table)
    _draw(body, f"Leaderboard ({label})")
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))


# -- event loop ---------------------------------------------------------------


def _pick_difficulty(key: str) -> Difficulty | None:
    if key.isdigit() and 1 <= int(key) <= len(_DIFFICULTIES):
        return _DIFFICULTIES[int(key) - 1]
    return None


def _goodbye() -> None:
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


def _loop(controller: GameFlowController, view: _RichView) -> None:
    controller.start()

    while True:
        screen = controller.screen

        if screen is Screen.MENU:
            _draw_menu(view)
            key = get_key()
            if key in ("1", "enter"):
                controller.open_username_entry()
            elif key == "2":
                controller.open_leaderboard_selection()
            elif key == "quit":
                _goodbye()
                return

        elif screen is Screen.USERNAME:
            _draw_username(view)
            key = get_key()
            if key in ("back", "quit"):
                controller.on_back()
            elif key == "enter":
                name = Prompt.ask("  Username", default="", console=console)
                controller.submit_username(name)

        elif screen in (Screen.DIFFICULTY, Screen.LEADERBOARD_SELECT):
            if screen is Screen.DIFFICULTY:
                _draw_difficulties(view, "Select Difficulty")
            else:
                _draw_difficulties(view, "Leaderboard")
            key = get_key()
            difficulty = _pick_difficulty(key)
            if difficulty is not None and screen is Screen.DIFFICULTY:
                controller.start_round(difficulty)
            elif difficulty is not None:
                controller.show_leaderboard(difficulty)
            elif key in ("back", "quit"):
                controller.on_back()

        elif screen is Screen.GAMEPLAY:
            _draw_question(view, controller)
            key = get_answer_key()
            if key.isdigit() and 1 <= int(key) <= len(view.options):
                controller.on_answer_selected(view.options[int(key) - 1])
            elif key in ("pause", "quit"):
                controller.on_pause_requested()

        elif screen is Screen.PAUSED:
            _draw_pause(view)
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
                    _goodbye()
                    return

        elif screen is Screen.SAVE_MENU:
            _draw_save_menu(view)
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
            _draw_post_game(view)
            key = get_key()
            if key == "restart":
                controller.on_restart()
            elif key in ("d", "D"):
                controller.on_choose_difficulty()
            elif key in ("menu", "quit"):
                controller.on_return_to_menu()

        elif screen is Screen.LEADERBOARD:
            _draw_leaderboard(view)
            get_key()
            controller.on_back()


# -- public entry point -------------------------------------------------------


def run(data_dir: Path) -> None:
    """Launch the Rich CLI with interactive menu."""
    view = _RichView()
    controller = GameFlowController(view, LeaderboardStore(data_dir), SaveStore(data_dir))
    _loop(controller, view)
