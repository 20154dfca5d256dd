"""The interface every frontend implements for the flow controller."""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import Protocol, Sequence

from backend.models.leaderboard import LeaderboardEntry
from backend.models.question import Difficulty


class Screen(Enum):
    MENU = "menu"
    USERNAME = "username"
    DIFFICULTY = "difficulty"
    GAMEPLAY = "gameplay"
    PAUSED = "paused"
    SAVE_MENU = "save_menu"
    POST_GAME = "post_game"
    LEADERBOARD_SELECT = "leaderboard_select"
    LEADERBOARD = "leaderboard"


class MessageKind(StrEnum):
    INFO = "info"
    ERROR = "error"


class Presentation(Protocol):
    """Rendering and prompting hooks called by ``GameFlowController``.

    Render calls hand the frontend fresh state to display; they must not
    call back into the controller.  ``ask_load_save`` and ``confirm`` block
    until the player answers.
    """

    def show_screen(self, screen: Screen) -> None: ...

    def render_question(self, prompt: str, options: Sequence[str]) -> None: ...

    def render_score(self, score: int) -> None: ...

    def render_lives(self, lives: int) -> None: ...

    def render_post_game(self, is_win: bool, final_score: int) -> None: ...

    def render_leaderboard(
        self, difficulty: Difficulty, entries: Sequence[LeaderboardEntry]
    ) -> None: ...

    def render_message(self, kind: MessageKind, text: str) -> None: ...

    def ask_load_save(self) -> bool:
        """Return True to resume the saved game, False to start fresh."""
        ...

    def confirm(self, text: str) -> bool: ...

    def toggle_audio(self) -> bool:
        """Flip the frontend's music setting and return whether it is now on."""
        ...
