#!/usr/bin/env python3
"""Queeze — a fifteen-question trivia quiz.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich            # Rich terminal
    python main.py -f pygame          # Pygame GUI (has its own menu)
    python main.py --scores           # view every leaderboard
    python main.py --scores -d hard   # view one leaderboard
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # queeze/
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.logging_config import configure_logging  # noqa: E402
from backend.models.question import Difficulty  # noqa: E402

logger = logging.getLogger("queeze")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


def _launch(frontend: Frontend, data_dir: Path) -> None:
    logger.info("Launching %s frontend (data in %s)", frontend.value, data_dir)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(data_dir=data_dir)


# -- helpers ------------------------------------------------------------------


def _print_leaderboards(data_dir: Path, only: Difficulty | None = None) -> None:
    from backend.models.leaderboard import LeaderboardStore, crowned

    store = LeaderboardStore(data_dir)
    difficulties = [only] if only is not None else store.difficulties_with_scores()

    print("\n  === LEADERBOARDS ===")
    if not difficulties:
        print("  No scores recorded yet.\n")
        return
    for difficulty in difficulties:
        entries = store.list_scores(difficulty)
        print(f"\n  --- {difficulty.label} ---")
        if not entries:
            print("  No scores recorded yet.")
            continue
        for i, (entry, crown) in enumerate(crowned(entries), 1):
            mark = "♛" if crown else " "
            print(f"  {i:>2}. {mark} {entry.username:<20} {entry.best_score:>2}")
    print()


def _menu_loop(data_dir: Path) -> None:
    choices = {
        "1": Frontend.vanilla,
        "2": Frontend.rich,
        "3": Frontend.pygame,
        "4": Frontend.pyqt,
    }
    while True:
        print()
        print("  ====================================")
        print("             Q U E E Z E              ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  5.  View Leaderboards")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in choices:
            _launch(choices[choice], data_dir)

        elif choice == "5":
            _print_leaderboards(data_dir)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show the leaderboards and exit.",
    ),
    difficulty: Optional[Difficulty] = typer.Option(
        None, "-d", "--difficulty",
        help="With --scores, show only this difficulty.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        envvar="QUEEZE_DATA_DIR",
        file_okay=False,
        help="Directory holding scores/, saves/ and the log file.",
    ),
    log_level: str = typer.Option(
        "INFO", "--log-level",
        envvar="QUEEZE_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Queeze trivia quiz."""
    configure_logging(log_level, data_dir / "queeze.log")

    if scores:
        _print_leaderboards(data_dir, difficulty)
        return

    if frontend is None:
        _menu_loop(data_dir)
        return

    _launch(frontend, data_dir)


if __name__ == "__main__":
    app()
