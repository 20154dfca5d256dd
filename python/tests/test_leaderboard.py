"""Leaderboard store — upserts, ordering, crowns and bad lines."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.errors import StoreIOError
from backend.models.leaderboard import LeaderboardEntry, LeaderboardStore, crowned
from backend.models.question import Difficulty


@pytest.fixture
def store(tmp_path: Path) -> LeaderboardStore:
    return LeaderboardStore(tmp_path)


def _scores(store: LeaderboardStore, difficulty: Difficulty) -> list[tuple[str, int]]:
    return [(e.username, e.best_score) for e in store.list_scores(difficulty)]


# -- files --------------------------------------------------------------------


def test_file_layout(store: LeaderboardStore, tmp_path: Path) -> None:
    store.record_score(Difficulty.EASY, "alice", 7)
    path = tmp_path / "scores" / "easy mode scores.txt"
    assert store.path_for(Difficulty.EASY) == path
    assert path.read_text(encoding="utf-8") == "alice:7\n"


def test_missing_file_is_empty(store: LeaderboardStore) -> None:
    assert store.list_scores(Difficulty.HARD) == []
    assert store.difficulties_with_scores() == []


def test_difficulties_are_separate(store: LeaderboardStore) -> None:
    store.record_score(Difficulty.HARD, "alice", 3)
    assert _scores(store, Difficulty.EASY) == []
    assert _scores(store, Difficulty.HARD) == [("alice", 3)]
    assert store.difficulties_with_scores() == [Difficulty.HARD]


# -- upserts ------------------------------------------------------------------


def test_record_same_score_twice_is_idempotent(store: LeaderboardStore) -> None:
    store.record_score(Difficulty.NORMAL, "alice", 9)
    store.record_score(Difficulty.NORMAL, "alice", 9)
    assert _scores(store, Difficulty.NORMAL) == [("alice", 9)]


@pytest.mark.parametrize("first, second", [(4, 11), (11, 4)])
def test_best_score_is_the_maximum(store: LeaderboardStore, first: int, second: int) -> None:
    store.record_score(Difficulty.EASY, "bob", first)
    store.record_score(Difficulty.EASY, "bob", second)
    assert _scores(store, Difficulty.EASY) == [("bob", 11)]


def test_zero_score_is_recorded(store: LeaderboardStore) -> None:
    store.record_score(Difficulty.HARD, "carol", 0)
    assert _scores(store, Difficulty.HARD) == [("carol", 0)]


# -- ordering -----------------------------------------------------------------


def test_highest_first_ties_keep_file_order(store: LeaderboardStore) -> None:
    store.record_score(Difficulty.EASY, "a", 10)
    store.record_score(Difficulty.EASY, "b", 15)
    store.record_score(Difficulty.EASY, "c", 15)
    assert [u for u, _ in _scores(store, Difficulty.EASY)] == ["b", "c", "a"]


def test_crowns_top_entry_and_perfect_scores() -> None:
    entries = [
        LeaderboardEntry("b", 15),
        LeaderboardEntry("c", 15),
        LeaderboardEntry("a", 10),
    ]
    assert [crown for _, crown in crowned(entries)] == [True, True, False]


def test_top_entry_crowned_without_perfect_score() -> None:
    entries = [LeaderboardEntry("a", 6), LeaderboardEntry("b", 2)]
    assert [crown for _, crown in crowned(entries)] == [True, False]


# -- malformed input ----------------------------------------------------------


def test_malformed_lines_are_skipped(store: LeaderboardStore) -> None:
    path = store.path_for(Difficulty.NORMAL)
    path.parent.mkdir(parents=True)
    path.write_text(
        "onlyonepart\nalice:12\nbob:lots\n:5\ncarol:-1\n\ndave:3\n",
        encoding="utf-8",
    )
    assert _scores(store, Difficulty.NORMAL) == [("alice", 12), ("dave", 3)]


def test_non_utf8_line_is_skipped(store: LeaderboardStore) -> None:
    # "josé" written in a legacy single-byte charset.
    path = store.path_for(Difficulty.EASY)
    path.parent.mkdir(parents=True)
    path.write_bytes(b"jos\xe9:4\nbob:7\n")

    assert _scores(store, Difficulty.EASY) == [("bob", 7)]


def test_rewrite_after_non_utf8_line(store: LeaderboardStore) -> None:
    path = store.path_for(Difficulty.EASY)
    path.parent.mkdir(parents=True)
    path.write_bytes(b"bob:7\r\njos\xe9:4\r\n")

    store.record_score(Difficulty.EASY, "alice", 3)

    assert path.read_text(encoding="utf-8") == "bob:7\nalice:3\n"


def test_unreadable_file_raises_store_error(store: LeaderboardStore) -> None:
    # A directory where the file should be cannot be read as text.
    store.path_for(Difficulty.EASY).mkdir(parents=True)
    with pytest.raises(StoreIOError):
        store.list_scores(Difficulty.EASY)
