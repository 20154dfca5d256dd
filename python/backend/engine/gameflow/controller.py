"""Screen-level game flow — menus, rounds, pausing, saves and scores.

The controller sits between a frontend (anything implementing
``Presentation``) and the backend.  Frontends forward player actions to
the ``on_*`` / ``start_*`` methods; the controller updates the round,
talks to the stores, and tells the frontend what to draw next.

Typical flow::

    MENU → USERNAME → DIFFICULTY → GAMEPLAY ⇄ PAUSED ⇄ SAVE_MENU
                                      ↓
                                  POST_GAME → GAMEPLAY / DIFFICULTY / MENU

    MENU → LEADERBOARD_SELECT → LEADERBOARD
"""

from __future__ import annotations

import logging

from backend.engine.gameflow.presentation import MessageKind, Presentation, Screen
from backend.engine.gameplay import GamePlay
from backend.errors import InvalidUsernameError, NotFoundError, StoreIOError
from backend.models.leaderboard import LeaderboardStore
from backend.models.question import Difficulty
from backend.models.records import FIELD_SEPARATOR
from backend.models.savegame import SaveStore

logger = logging.getLogger(__name__)

_BACK: dict[Screen, Screen] = {
    Screen.USERNAME: Screen.MENU,
    Screen.DIFFICULTY: Screen.USERNAME,
    Screen.LEADERBOARD_SELECT: Screen.MENU,
    Screen.LEADERBOARD: Screen.LEADERBOARD_SELECT,
    Screen.SAVE_MENU: Screen.PAUSED,
}


def validate_username(text: str) -> str:
    """Return the cleaned username or raise ``InvalidUsernameError``."""
    username = text.strip()
    if not username:
        raise InvalidUsernameError("Please enter a username.")
    if FIELD_SEPARATOR in username or "\n" in username or "\r" in username:
        raise InvalidUsernameError(
            f"Usernames cannot contain '{FIELD_SEPARATOR}' or line breaks."
        )
    return username


class GameFlowController:
    """Owns the active round and the current screen."""

    def __init__(
        self,
        presentation: Presentation,
        leaderboard: LeaderboardStore,
        saves: SaveStore,
    ) -> None:
        self.view = presentation
        self.leaderboard = leaderboard
        self.saves = saves
        self.screen = Screen.MENU
        self.username: str | None = None
        self.game: GamePlay | None = None
        self._score_recorded = False

    # -- navigation -----------------------------------------------------------

    def _go(self, screen: Screen) -> None:
        logger.debug("Screen %s -> %s", self.screen.value, screen.value)
        self.screen = screen
        self.view.show_screen(screen)

    def _expect(self, *screens: Screen) -> bool:
        if self.screen in screens:
            return True
        logger.debug("Ignoring event on screen %s", self.screen.value)
        return False

    def start(self) -> None:
        """Show the main menu."""
        self._go(Screen.MENU)

    def on_back(self) -> None:
        """Follow a screen's Return button."""
        target = _BACK.get(self.screen)
        if target is not None:
            self._go(target)

    def open_username_entry(self) -> None:
        if self._expect(Screen.MENU):
            self._go(Screen.USERNAME)

    def submit_username(self, text: str) -> bool:
        if not self._expect(Screen.USERNAME):
            return False
        try:
            self.username = validate_username(text)
        except InvalidUsernameError as exc:
            self.view.render_message(MessageKind.ERROR, str(exc))
            return False
        self._go(Screen.DIFFICULTY)
        return True

    def open_leaderboard_selection(self) -> None:
        if self._expect(Screen.MENU, Screen.LEADERBOARD):
            self._go(Screen.LEADERBOARD_SELECT)

    def show_leaderboard(self, difficulty: Difficulty) -> None:
        if not self._expect(Screen.LEADERBOARD_SELECT):
            return
        try:
            entries = self.leaderboard.list_scores(difficulty)
        except StoreIOError:
            logger.exception("Could not read %s leaderboard", difficulty.value)
            self.view.render_message(MessageKind.ERROR, "Failed to read the leaderboard.")
            return
        self.view.render_leaderboard(difficulty, entries)
        self._go(Screen.LEADERBOARD)

    # -- starting rounds ------------------------------------------------------

    def start_round(self, difficulty: Difficulty) -> None:
        """Start *difficulty*, offering to resume the player's save if any."""
        if not self._expect(Screen.DIFFICULTY) or self.username is None:
            return
        try:
            record = self.saves.load(difficulty, self.username)
        except StoreIOError:
            logger.exception("Could not read %s saves", difficulty.value)
            self.view.render_message(MessageKind.ERROR, "Failed to read the save file.")
            return

        if record is not None and self.view.ask_load_save():
            logger.info("Resuming %s save for %s", difficulty.value, self.username)
            self._begin(GamePlay.from_record(difficulty, record))
        else:
            self.start_new_round(difficulty)

    def start_new_round(self, difficulty: Difficulty) -> None:
        if self.username is None:
            return
        logger.info("New %s round for %s", difficulty.value, self.username)
        self._begin(GamePlay(difficulty, self.username))

    def _begin(self, game: GamePlay) -> None:
        self.game = game
        self._score_recorded = False
        if game.is_over:
            self._finish()
            return
        self._render_round()
        self._go(Screen.GAMEPLAY)

    def _render_round(self) -> None:
        game = self.game
        assert game is not None
        self.view.render_score(game.state.score)
        self.view.render_lives(game.state.lives)
        question = game.current_question
        if question is not None:
            self.view.render_question(question.prompt, question.options)

    # -- gameplay -------------------------------------------------------------

    def on_answer_selected(self, text: str) -> None:
        game = self.game
        if game is None or not self._expect(Screen.GAMEPLAY):
            return
        correct = game.submit_answer(text)
        self.view.render_message(MessageKind.INFO, "Correct!" if correct else "Wrong!")

        if game.is_over:
            self.view.render_score(game.state.score)
            self.view.render_lives(game.state.lives)
            self._finish()
        else:
            self._render_round()

    def _finish(self) -> None:
        game = self.game
        assert game is not None
        if not self._score_recorded:
            self._score_recorded = True
            try:
                self.leaderboard.record_score(
                    game.difficulty, game.username, game.state.score
                )
            except StoreIOError:
                logger.exception("Could not record score for %s", game.username)
                self.view.render_message(MessageKind.ERROR, "Failed to record your score.")
        logger.info(
            "%s round %s by %s with %d/%d",
            game.difficulty.label,
            "won" if game.is_won else "lost",
            game.username,
            game.state.score,
            game.total_questions,
        )
        self.view.render_post_game(game.is_won, game.state.score)
        self._go(Screen.POST_GAME)

    # -- pause menu -----------------------------------------------------------

    def on_pause_requested(self) -> None:
        if self._expect(Screen.GAMEPLAY):
            self._go(Screen.PAUSED)

    def on_resume_requested(self) -> None:
        if self._expect(Screen.PAUSED):
            self._go(Screen.GAMEPLAY)

    def on_toggle_audio(self) -> bool:
        return self.view.toggle_audio()

    def on_open_save_menu(self) -> None:
        if self._expect(Screen.PAUSED):
            self._go(Screen.SAVE_MENU)

    def on_close_save_menu(self) -> None:
        if self._expect(Screen.SAVE_MENU):
            self._go(Screen.PAUSED)

    def on_exit_requested(self) -> bool:
        """Return True if the application should quit."""
        if self.game is not None and not self.game.is_over:
            return self.view.confirm("Are you sure you want to exit?")
        return True

    # -- save menu ------------------------------------------------------------

    def on_save_requested(self) -> None:
        game = self.game
        if game is None or not self._expect(Screen.SAVE_MENU):
            return
        try:
            self.saves.save(
                game.difficulty,
                game.username,
                game.state.score,
                game.state.lives,
                game.state.question_index,
            )
        except StoreIOError:
            logger.exception("Could not save %s game", game.difficulty.value)
            self.view.render_message(MessageKind.ERROR, "Failed to save the game.")
            return

        self.view.render_message(
            MessageKind.INFO, "Please note that you only get one save at a time."
        )
        if self.view.confirm(
            "Game saved successfully. Would you like to return to the Main Menu?"
        ):
            self.on_return_to_menu()

    def on_delete_requested(self) -> None:
        game = self.game
        if game is None or not self._expect(Screen.SAVE_MENU):
            return
        try:
            self.saves.delete(game.difficulty, game.username)
        except NotFoundError:
            self.view.render_message(
                MessageKind.ERROR, "You currently have no recorded save file."
            )
        except StoreIOError:
            logger.exception("Could not delete %s save", game.difficulty.value)
            self.view.render_message(MessageKind.ERROR, "Failed to delete the save file.")
        else:
            self.view.render_message(
                MessageKind.INFO, "Your save file has been successfully deleted."
            )

    def on_load_requested(self) -> None:
        game = self.game
        if game is None or game.is_over or not self._expect(Screen.SAVE_MENU):
            return
        try:
            record = self.saves.load(game.difficulty, game.username)
        except StoreIOError:
            logger.exception("Could not load %s save", game.difficulty.value)
            self.view.render_message(MessageKind.ERROR, "Failed to load the game.")
            return

        if record is None:
            self.view.render_message(
                MessageKind.ERROR, "You currently have no recorded save file."
            )
            return
        if not self.view.confirm(
            "You have a saved game for this difficulty. Do you want to load it?"
        ):
            return

        game.restore_from(record)
        logger.info("Loaded %s save for %s", game.difficulty.value, game.username)
        self.view.render_message(MessageKind.INFO, "Game loaded successfully!")
        self._begin(game)

    # -- leaving a round ------------------------------------------------------

    def on_restart(self) -> None:
        game = self.game
        if game is None or not self._expect(Screen.POST_GAME):
            return
        game.restart()
        self._begin(game)

    def on_choose_difficulty(self) -> None:
        if not self._expect(Screen.POST_GAME):
            return
        self._discard()
        self._go(Screen.DIFFICULTY)

    def on_return_to_menu(self) -> None:
        """Drop the current round (nothing is saved) and show the main menu."""
        self._discard()
        self._go(Screen.MENU)

    def _discard(self) -> None:
        if self.game is not None:
            self.game.abandon()
        self.game = None
