"""Command-line entry point."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from backend.models.leaderboard import LeaderboardStore
from backend.models.question import Difficulty
from main import app

runner = CliRunner()


def test_scores_when_empty(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--scores", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "No scores recorded yet." in result.output


def test_scores_lists_every_difficulty(tmp_path: Path) -> None:
    store = LeaderboardStore(tmp_path)
    store.record_score(Difficulty.EASY, "alice", 10)
    store.record_score(Difficulty.EASY, "bob", 15)
    store.record_score(Difficulty.HARD, "carol", 4)

    result = runner.invoke(app, ["--scores", "--data-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "--- Easy ---" in result.output
    assert "--- Hard ---" in result.output
    assert "--- Normal ---" not in result.output
    assert result.output.index("bob") < result.output.index("alice")
    assert "♛" in result.output


def test_scores_for_one_difficulty(tmp_path: Path) -> None:
    store = LeaderboardStore(tmp_path)
    store.record_score(Difficulty.EASY, "alice", 10)
    store.record_score(Difficulty.HARD, "carol", 4)

    result = runner.invoke(
        app, ["--scores", "-d", "hard", "--data-dir", str(tmp_path)]
    )

    assert result.exit_code == 0, result.output
    assert "carol" in result.output
    assert "alice" not in result.output


def test_data_dir_from_environment(tmp_path: Path) -> None:
    LeaderboardStore(tmp_path).record_score(Difficulty.NORMAL, "dave", 7)

    result = runner.invoke(app, ["--scores"], env={"QUEEZE_DATA_DIR": str(tmp_path)})

    assert result.exit_code == 0, result.output
    assert "dave" in result.output
    assert (tmp_path / "queeze.log").exists()


def test_unknown_frontend_is_rejected(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-f", "curses", "--data-dir", str(tmp_path)])
    assert result.exit_code != 0
