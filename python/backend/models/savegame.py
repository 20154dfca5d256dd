"""Single-slot saved games, one per player per difficulty."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.errors import NotFoundError
from backend.models.question import Difficulty
from backend.models.records import RecordStore, parse_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveRecord:
    username: str
    score: int
    lives: int
    question_index: int


class SaveStore(RecordStore[SaveRecord]):
    """Stores mid-game snapshots.

    File layout: ``saves/<difficulty> mode saves.txt`` with one
    ``username:score:lives:question_index`` line per player.  Saving again
    overwrites the player's line; there is never more than one.
    """

    kind = "saves"
    field_count = 4

    def _parse(self, fields: list[str]) -> SaveRecord:
        return SaveRecord(
            username=fields[0],
            score=parse_count(fields[1]),
            lives=parse_count(fields[2]),
            question_index=parse_count(fields[3]),
        )

    def _format(self, record: SaveRecord) -> list[object]:
        return [record.username, record.score, record.lives, record.question_index]

    # -- operations -----------------------------------------------------------

    def save(
        self,
        difficulty: Difficulty,
        username: str,
        score: int,
        lives: int,
        question_index: int,
    ) -> SaveRecord:
        record = SaveRecord(
            username=username, score=score, lives=lives, question_index=question_index
        )
        records = self._read(difficulty)
        for i, existing in enumerate(records):
            if existing.username == username:
                records[i] = record
                break
        else:
            records.append(record)
        self._write(difficulty, records)
        logger.info(
            "Saved %s game for %s at question %d", difficulty.value, username, question_index
        )
        return record

    def load(self, difficulty: Difficulty, username: str) -> SaveRecord | None:
        for record in self._read(difficulty):
            if record.username == username:
                return record
        return None

    def has_save(self, difficulty: Difficulty, username: str) -> bool:
        return self.load(difficulty, username) is not None

    def delete(self, difficulty: Difficulty, username: str) -> None:
        """Remove the player's save.

        Raises ``NotFoundError`` (and writes nothing) when there is none.
        """
        records = self._read(difficulty)
        remaining = [r for r in records if r.username != username]
        if len(remaining) == len(records):
            raise NotFoundError(f"No {difficulty.value} save for {username!r}.")
        self._write(difficulty, remaining)
        logger.info("Deleted %s save for %s", difficulty.value, username)
