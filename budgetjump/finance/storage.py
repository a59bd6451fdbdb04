"""Mini README: JSON persistence for the game ledger.

Structure:
    * LedgerPersistenceError - raised when the ledger file cannot be read or written.
    * JsonLedgerStore - loads and saves the game-score record and achievements.

The file holds a single JSON object with ``game_score`` and ``achievements``
keys. A missing file means a fresh ledger. Writes go to a temporary sibling
first and are then moved into place, so a failed write never truncates the
previous file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Tuple

from .ledger import Achievement, GameScoreRecord
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class LedgerPersistenceError(Exception):
    """Raised when the ledger file cannot be loaded or saved."""


class JsonLedgerStore:
    """Store the game ledger in a local JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Tuple[GameScoreRecord, List[Achievement]]:
        """Return the stored record and achievements, or empty defaults."""

        if not self.path.exists():
            LOGGER.debug("No ledger file at %s; starting fresh", self.path)
            return GameScoreRecord(), []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            record = GameScoreRecord.from_dict(payload.get("game_score", {}))
            achievements = [Achievement.from_dict(item) for item in payload.get("achievements", [])]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as error:
            raise LedgerPersistenceError(f"Could not read ledger file {self.path}: {error}") from error
        LOGGER.debug("Loaded ledger from %s", self.path)
        return record, achievements

    def save(self, record: GameScoreRecord, achievements: List[Achievement]) -> None:
        payload = {
            "game_score": record.as_dict(),
            "achievements": [achievement.as_dict() for achievement in achievements],
        }
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as error:
            raise LedgerPersistenceError(f"Could not write ledger file {self.path}: {error}") from error
        LOGGER.debug("Saved ledger to %s", self.path)
