"""Game flow controller driven through a recording presentation."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from backend.engine.gameflow import GameFlowController, MessageKind, Screen, validate_username
from backend.engine.questionbank import QuestionBank
from backend.errors import InvalidUsernameError, StoreIOError
from backend.models.leaderboard import LeaderboardEntry, LeaderboardStore
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty
from backend.models.savegame import SaveRecord, SaveStore


# -- fakes --------------------------------------------------------------------


class RecordingView:
    """Remembers every call; answers prompts from preset values."""

    def __init__(self) -> None:
        self.screens: list[Screen] = []
        self.questions: list[tuple[str, tuple[str, ...]]] = []
        self.scores: list[int] = []
        self.lives: list[int] = []
        self.post_games: list[tuple[bool, int]] = []
        self.leaderboards: list[tuple[Difficulty, list[LeaderboardEntry]]] = []
        self.messages: list[tuple[MessageKind, str]] = []
        self.confirms: list[str] = []
        self.load_prompts = 0
        self.load_answer = True
        self.confirm_answer = True
        self.audio = False

    def show_screen(self, screen: Screen) -> None:
        self.screens.append(screen)

    def render_question(self, prompt: str, options: Sequence[str]) -> None:
        self.questions.append((prompt, tuple(options)))

    def render_score(self, score: int) -> None:
        self.scores.append(score)

    def render_lives(self, lives: int) -> None:
        self.lives.append(lives)

    def render_post_game(self, is_win: bool, final_score: int) -> None:
        self.post_games.append((is_win, final_score))

    def render_leaderboard(
        self, difficulty: Difficulty, entries: Sequence[LeaderboardEntry]
    ) -> None:
        self.leaderboards.append((difficulty, list(entries)))

    def render_message(self, kind: MessageKind, text: str) -> None:
        self.messages.append((kind, text))

    def ask_load_save(self) -> bool:
        self.load_prompts += 1
        return self.load_answer

    def confirm(self, text: str) -> bool:
        self.confirms.append(text)
        return self.confirm_answer

    def toggle_audio(self) -> bool:
        self.audio = not self.audio
        return self.audio


class CountingLeaderboard(LeaderboardStore):
    def __init__(self, data_dir: Path) -> None:
        super().__init__(data_dir)
        self.calls: list[tuple[Difficulty, str, int]] = []

    def record_score(self, difficulty: Difficulty, username: str, score: int) -> None:
        self.calls.append((difficulty, username, score))
        super().record_score(difficulty, username, score)


class BrokenLeaderboard(LeaderboardStore):
    def record_score(self, difficulty: Difficulty, username: str, score: int) -> None:
        raise StoreIOError("disk full")


class BrokenSaves(SaveStore):
    """Works until ``broken`` is set, then every operation fails."""

    broken = False

    def save(self, *args, **kwargs) -> SaveRecord:
        if self.broken:
            raise StoreIOError("disk full")
        return super().save(*args, **kwargs)

    def load(self, difficulty: Difficulty, username: str) -> SaveRecord | None:
        if self.broken:
            raise StoreIOError("permission denied")
        return super().load(difficulty, username)

    def delete(self, difficulty: Difficulty, username: str) -> None:
        if self.broken:
            raise StoreIOError("permission denied")
        super().delete(difficulty, username)


# -- fixtures / helpers -------------------------------------------------------


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def leaderboard(tmp_path: Path) -> CountingLeaderboard:
    return CountingLeaderboard(tmp_path)


@pytest.fixture
def saves(tmp_path: Path) -> SaveStore:
    return SaveStore(tmp_path)


@pytest.fixture
def controller(
    view: RecordingView, leaderboard: CountingLeaderboard, saves: SaveStore
) -> GameFlowController:
    c = GameFlowController(view, leaderboard, saves)
    c.start()
    return c


def _enter(controller: GameFlowController, username: str = "alice") -> None:
    controller.open_username_entry()
    assert controller.submit_username(username)


def _play(controller: GameFlowController, difficulty: Difficulty) -> None:
    _enter(controller)
    controller.start_round(difficulty)
    assert controller.screen is Screen.GAMEPLAY


def _answer(controller: GameFlowController, correct: bool) -> None:
    game = controller.game
    assert game is not None
    index = game.state.question_index
    right = QuestionBank.correct_answer_for(game.difficulty, index)
    if correct:
        controller.on_answer_selected(right)
    else:
        options = QuestionBank.options_for(game.difficulty, index)
        controller.on_answer_selected(next(o for o in options if o != right))


def _to_save_menu(controller: GameFlowController) -> None:
    controller.on_pause_requested()
    controller.on_open_save_menu()
    assert controller.screen is Screen.SAVE_MENU


# -- usernames ----------------------------------------------------------------


def test_validate_username_strips() -> None:
    assert validate_username("  alice ") == "alice"


@pytest.mark.parametrize("text", ["", "   ", "a:b", "a\nb"])
def test_validate_username_rejects(text: str) -> None:
    with pytest.raises(InvalidUsernameError):
        validate_username(text)


def test_empty_username_shows_message(
    controller: GameFlowController, view: RecordingView
) -> None:
    controller.open_username_entry()
    assert not controller.submit_username("  ")
    assert controller.screen is Screen.USERNAME
    assert view.messages == [(MessageKind.ERROR, "Please enter a username.")]


def test_username_leads_to_difficulty(controller: GameFlowController) -> None:
    _enter(controller, " alice ")
    assert controller.username == "alice"
    assert controller.screen is Screen.DIFFICULTY


# -- navigation ---------------------------------------------------------------


def test_back_buttons(controller: GameFlowController) -> None:
    _enter(controller)
    controller.on_back()
    assert controller.screen is Screen.USERNAME
    controller.on_back()
    assert controller.screen is Screen.MENU


def test_leaderboard_view(
    controller: GameFlowController, view: RecordingView, leaderboard: CountingLeaderboard
) -> None:
    leaderboard.record_score(Difficulty.EASY, "a", 10)
    leaderboard.record_score(Difficulty.EASY, "b", 15)

    controller.open_leaderboard_selection()
    controller.show_leaderboard(Difficulty.EASY)

    assert controller.screen is Screen.LEADERBOARD
    difficulty, entries = view.leaderboards[-1]
    assert difficulty is Difficulty.EASY
    assert [e.username for e in entries] == ["b", "a"]
    controller.on_back()
    assert controller.screen is Screen.LEADERBOARD_SELECT


def test_events_on_wrong_screen_are_ignored(
    controller: GameFlowController, view: RecordingView
) -> None:
    controller.on_answer_selected("anything")
    controller.on_pause_requested()
    controller.on_save_requested()
    assert controller.screen is Screen.MENU
    assert view.messages == []


# -- rounds -------------------------------------------------------------------


def test_new_round_renders_first_question(
    controller: GameFlowController, view: RecordingView
) -> None:
    _play(controller, Difficulty.NORMAL)
    first = QuestionBank.question_for(Difficulty.NORMAL, 0)
    assert view.questions[-1] == (first.prompt, first.options)
    assert view.scores[-1] == 0
    assert view.lives[-1] == 2
    assert view.load_prompts == 0


def test_answer_feedback(controller: GameFlowController, view: RecordingView) -> None:
    _play(controller, Difficulty.EASY)
    _answer(controller, correct=True)
    _answer(controller, correct=False)
    assert view.messages == [
        (MessageKind.INFO, "Correct!"),
        (MessageKind.INFO, "Wrong!"),
    ]
    assert view.scores[-1] == 1
    assert view.lives[-1] == 2


def test_loss_records_score_once(
    controller: GameFlowController, view: RecordingView, leaderboard: CountingLeaderboard
) -> None:
    _play(controller, Difficulty.HARD)
    _answer(controller, correct=True)
    _answer(controller, correct=False)

    assert controller.screen is Screen.POST_GAME
    assert view.post_games == [(False, 1)]
    assert leaderboard.calls == [(Difficulty.HARD, "alice", 1)]

    controller.on_answer_selected("late click")
    assert leaderboard.calls == [(Difficulty.HARD, "alice", 1)]


def test_win_records_score(
    controller: GameFlowController, view: RecordingView, leaderboard: CountingLeaderboard
) -> None:
    _play(controller, Difficulty.HARD)
    for _ in range(QUESTIONS_PER_ROUND):
        _answer(controller, correct=True)

    assert view.post_games == [(True, QUESTIONS_PER_ROUND)]
    assert leaderboard.list_scores(Difficulty.HARD)[0].best_score == QUESTIONS_PER_ROUND
    assert len(leaderboard.calls) == 1


def test_restart_records_next_finish_again(
    controller: GameFlowController, leaderboard: CountingLeaderboard
) -> None:
    _play(controller, Difficulty.HARD)
    _answer(controller, correct=False)
    controller.on_restart()
    assert controller.screen is Screen.GAMEPLAY
    assert controller.game is not None and controller.game.state.question_index == 0
    _answer(controller, correct=False)
    assert len(leaderboard.calls) == 2


def test_choose_another_difficulty(controller: GameFlowController) -> None:
    _play(controller, Difficulty.HARD)
    _answer(controller, correct=False)
    controller.on_choose_difficulty()
    assert controller.screen is Screen.DIFFICULTY
    assert controller.game is None


def test_failed_score_write_still_shows_post_game(
    view: RecordingView, saves: SaveStore, tmp_path: Path
) -> None:
    controller = GameFlowController(view, BrokenLeaderboard(tmp_path), saves)
    controller.start()
    _play(controller, Difficulty.HARD)
    _answer(controller, correct=False)

    assert controller.screen is Screen.POST_GAME
    assert (MessageKind.ERROR, "Failed to record your score.") in view.messages


def test_leaderboard_with_non_utf8_line(
    controller: GameFlowController, view: RecordingView, leaderboard: CountingLeaderboard
) -> None:
    path = leaderboard.path_for(Difficulty.EASY)
    path.parent.mkdir(parents=True)
    path.write_bytes(b"jos\xe9:4\nbob:7\n")

    controller.open_leaderboard_selection()
    controller.show_leaderboard(Difficulty.EASY)

    assert controller.screen is Screen.LEADERBOARD
    _, entries = view.leaderboards[-1]
    assert [(e.username, e.best_score) for e in entries] == [("bob", 7)]


# -- store failures -----------------------------------------------------------


@pytest.fixture
def broken_saves(tmp_path: Path) -> BrokenSaves:
    return BrokenSaves(tmp_path)


@pytest.mark.parametrize(
    "action, text",
    [
        ("on_save_requested", "Failed to save the game."),
        ("on_delete_requested", "Failed to delete the save file."),
        ("on_load_requested", "Failed to load the game."),
    ],
    ids=["save", "delete", "load"],
)
def test_save_menu_failure_leaves_round_alone(
    view: RecordingView,
    leaderboard: CountingLeaderboard,
    broken_saves: BrokenSaves,
    action: str,
    text: str,
) -> None:
    controller = GameFlowController(view, leaderboard, broken_saves)
    controller.start()
    _play(controller, Difficulty.EASY)
    _answer(controller, correct=True)
    _answer(controller, correct=False)
    _to_save_menu(controller)
    game = controller.game
    assert game is not None
    before = game.snapshot()

    broken_saves.broken = True
    getattr(controller, action)()

    assert view.messages[-1] == (MessageKind.ERROR, text)
    assert controller.screen is Screen.SAVE_MENU
    assert controller.game is game
    assert game.snapshot() == before
    assert view.confirms == []


def test_round_start_with_unreadable_saves(
    view: RecordingView, leaderboard: CountingLeaderboard, broken_saves: BrokenSaves
) -> None:
    controller = GameFlowController(view, leaderboard, broken_saves)
    controller.start()
    _enter(controller)

    broken_saves.broken = True
    controller.start_round(Difficulty.NORMAL)

    assert view.messages[-1] == (MessageKind.ERROR, "Failed to read the save file.")
    assert controller.screen is Screen.DIFFICULTY
    assert controller.game is None
    assert view.load_prompts == 0


# -- pause menu ---------------------------------------------------------------


def test_pause_and_resume(controller: GameFlowController, view: RecordingView) -> None:
    _play(controller, Difficulty.EASY)
    controller.on_pause_requested()
    assert controller.screen is Screen.PAUSED
    assert controller.on_toggle_audio() is True
    controller.on_resume_requested()
    assert controller.screen is Screen.GAMEPLAY


def test_return_to_menu_discards_round(
    controller: GameFlowController, saves: SaveStore
) -> None:
    _play(controller, Difficulty.EASY)
    _answer(controller, correct=True)
    controller.on_pause_requested()
    controller.on_return_to_menu()
    assert controller.screen is Screen.MENU
    assert controller.game is None
    assert saves.load(Difficulty.EASY, "alice") is None


def test_exit_confirms_only_during_a_round(
    controller: GameFlowController, view: RecordingView
) -> None:
    assert controller.on_exit_requested() is True
    assert view.confirms == []

    _play(controller, Difficulty.EASY)
    view.confirm_answer = False
    assert controller.on_exit_requested() is False
    assert view.confirms == ["Are you sure you want to exit?"]


# -- saves --------------------------------------------------------------------


def test_save_and_return_to_menu(
    controller: GameFlowController, view: RecordingView, saves: SaveStore
) -> None:
    _play(controller, Difficulty.EASY)
    _answer(controller, correct=True)
    _to_save_menu(controller)

    controller.on_save_requested()

    assert saves.load(Difficulty.EASY, "alice") == SaveRecord("alice", 1, 3, 1)
    note = "Please note that you only get one save at a time."
    assert (MessageKind.INFO, note) in view.messages
    assert controller.screen is Screen.MENU


def test_save_and_keep_playing(
    controller: GameFlowController, view: RecordingView, saves: SaveStore
) -> None:
    _play(controller, Difficulty.EASY)
    _to_save_menu(controller)
    view.confirm_answer = False
    controller.on_save_requested()
    assert controller.screen is Screen.SAVE_MENU
    assert saves.has_save(Difficulty.EASY, "alice")


def test_delete_messages(
    controller: GameFlowController, view: RecordingView, saves: SaveStore
) -> None:
    _play(controller, Difficulty.NORMAL)
    _to_save_menu(controller)

    controller.on_delete_requested()
    assert view.messages[-1] == (
        MessageKind.ERROR,
        "You currently have no recorded save file.",
    )

    saves.save(Difficulty.NORMAL, "alice", 2, 2, 2)
    controller.on_delete_requested()
    assert view.messages[-1] == (
        MessageKind.INFO,
        "Your save file has been successfully deleted.",
    )
    assert saves.load(Difficulty.NORMAL, "alice") is None


def test_load_from_save_menu(
    controller: GameFlowController, view: RecordingView, saves: SaveStore
) -> None:
    _play(controller, Difficulty.NORMAL)
    _to_save_menu(controller)

    controller.on_load_requested()
    assert view.messages[-1][0] is MessageKind.ERROR

    saves.save(Difficulty.NORMAL, "alice", 5, 2, 3)
    controller.on_load_requested()

    assert (MessageKind.INFO, "Game loaded successfully!") in view.messages
    assert controller.screen is Screen.GAMEPLAY
    game = controller.game
    assert game is not None
    assert (game.state.score, game.state.lives, game.state.question_index) == (5, 2, 3)


def test_resume_offer_on_round_start(
    controller: GameFlowController, view: RecordingView, saves: SaveStore
) -> None:
    saves.save(Difficulty.EASY, "alice", 4, 1, 6)
    _play(controller, Difficulty.EASY)

    assert view.load_prompts == 1
    game = controller.game
    assert game is not None
    assert (game.state.score, game.state.lives, game.state.question_index) == (4, 1, 6)
    assert view.questions[-1][0] == QuestionBank.question_for(Difficulty.EASY, 6).prompt


def test_declining_resume_starts_fresh(
    controller: GameFlowController, view: RecordingView, saves: SaveStore
) -> None:
    saves.save(Difficulty.EASY, "alice", 4, 1, 6)
    view.load_answer = False
    _play(controller, Difficulty.EASY)

    game = controller.game
    assert game is not None
    assert (game.state.score, game.state.lives, game.state.question_index) == (0, 3, 0)
    assert saves.has_save(Difficulty.EASY, "alice")


def test_resuming_finished_save_goes_to_post_game(
    controller: GameFlowController,
    view: RecordingView,
    saves: SaveStore,
    leaderboard: CountingLeaderboard,
) -> None:
    saves.save(Difficulty.EASY, "alice", 12, 1, QUESTIONS_PER_ROUND)
    _enter(controller)
    controller.start_round(Difficulty.EASY)

    assert controller.screen is Screen.POST_GAME
    assert view.post_games == [(True, 12)]
    assert leaderboard.calls == [(Difficulty.EASY, "alice", 12)]
