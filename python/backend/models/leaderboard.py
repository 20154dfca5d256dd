"""Per-difficulty leaderboard persistence and queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.models.question import QUESTIONS_PER_ROUND, Difficulty
from backend.models.records import RecordStore, parse_count

logger = logging.getLogger(__name__)


@dataclass
class LeaderboardEntry:
    username: str
    best_score: int


class LeaderboardStore(RecordStore[LeaderboardEntry]):
    """Keeps the best score each player reached on each difficulty.

    File layout: ``scores/<difficulty> mode scores.txt`` with one
    ``username:score`` line per player, unordered on disk.
    """

    kind = "scores"
    field_count = 2

    def _parse(self, fields: list[str]) -> LeaderboardEntry:
        return LeaderboardEntry(username=fields[0], best_score=parse_count(fields[1]))

    def _format(self, record: LeaderboardEntry) -> list[object]:
        return [record.username, record.best_score]

    # -- updates --------------------------------------------------------------

    def record_score(self, difficulty: Difficulty, username: str, score: int) -> None:
        """Insert *username* or raise their best score to *score*."""
        entries = self._read(difficulty)
        for entry in entries:
            if entry.username == username:
                entry.best_score = max(entry.best_score, score)
                break
        else:
            entries.append(LeaderboardEntry(username=username, best_score=score))
        self._write(difficulty, entries)
        logger.info("Recorded %s score %d for %s", difficulty.value, score, username)

    # -- queries --------------------------------------------------------------

    def list_scores(self, difficulty: Difficulty) -> list[LeaderboardEntry]:
        """Entries by best score, highest first; ties keep file order."""
        return sorted(self._read(difficulty), key=lambda e: e.best_score, reverse=True)

    def difficulties_with_scores(self) -> list[Difficulty]:
        return [d for d in Difficulty if self._read(d)]


def crowned(entries: list[LeaderboardEntry]) -> list[tuple[LeaderboardEntry, bool]]:
    """Pair each ranked entry with whether it gets a crown.

    The top entry is always crowned, as is anyone with a perfect score.
    """
    return [
        (entry, rank == 0 or entry.best_score == QUESTIONS_PER_ROUND)
        for rank, entry in enumerate(entries)
    ]
