"""Plain-text record files shared by the leaderboard and save stores.

Each difficulty gets its own file with one colon-separated record per
line and no header::

    alice:12
    bob:15

Lines that are not UTF-8 or do not parse are skipped on read.  Every
write rewrites the whole file from the parsed records.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from backend.errors import MalformedRecordError, StoreIOError
from backend.models.question import Difficulty

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ":"

R = TypeVar("R")


def parse_count(text: str) -> int:
    """Parse a non-negative integer field."""
    try:
        value = int(text)
    except ValueError:
        raise MalformedRecordError(f"Not an integer: {text!r}") from None
    if value < 0:
        raise MalformedRecordError(f"Negative value: {value}")
    return value


def split_record(line: str, field_count: int) -> list[str]:
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != field_count:
        raise MalformedRecordError(
            f"Expected {field_count} fields, got {len(fields)}: {line!r}"
        )
    if not fields[0]:
        raise MalformedRecordError(f"Missing username: {line!r}")
    return fields


class RecordStore(ABC, Generic[R]):
    """Reads and rewrites one record file per difficulty under *data_dir*."""

    #: sub-directory and file-name stem, e.g. ``scores`` →
    #: ``scores/easy mode scores.txt``
    kind: str
    field_count: int

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = data_dir

    def path_for(self, difficulty: Difficulty) -> Path:
        return self.data_dir / self.kind / f"{difficulty.value} mode {self.kind}.txt"

    # -- subclass hooks -------------------------------------------------------

    @abstractmethod
    def _parse(self, fields: list[str]) -> R: ...

    @abstractmethod
    def _format(self, record: R) -> list[object]: ...

    # -- persistence ----------------------------------------------------------

    def _read(self, difficulty: Difficulty) -> list[R]:
        path = self.path_for(difficulty)
        if not path.exists():
            return []
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise StoreIOError(f"Failed to read {path}") from exc

        # Lines are decoded one at a time so a stray non-UTF-8 byte only
        # costs its own line.
        records: list[R] = []
        for lineno, raw_line in enumerate(raw.splitlines(), 1):
            if not raw_line.strip():
                continue
            try:
                line = raw_line.decode("utf-8")
                records.append(self._parse(split_record(line, self.field_count)))
            except (UnicodeDecodeError, MalformedRecordError) as exc:
                logger.debug("Skipping %s line %d: %s", path.name, lineno, exc)
        return records

    def _write(self, difficulty: Difficulty, records: list[R]) -> None:
        path = self.path_for(difficulty)
        lines = [
            FIELD_SEPARATOR.join(str(f) for f in self._format(r)) + "\n"
            for r in records
        ]
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("".join(lines), encoding="utf-8")
        except OSError as exc:
            raise StoreIOError(f"Failed to write {path}") from exc
        logger.debug("Wrote %d record(s) to %s", len(records), path)
