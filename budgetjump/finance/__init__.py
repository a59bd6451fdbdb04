"""Mini README: Finance ledger pieces used by the Budget Jump mini-game.

The mini-game only needs one operation from the finance ledger:
``record_game_score``. This package provides that collaborator together
with the achievement catalogue it unlocks into and a JSON file store, so
results survive app restarts.
"""

from .ledger import SPECIAL_TITLE, Achievement, GameLedger, GameScoreRecord, default_achievements
from .storage import JsonLedgerStore, LedgerPersistenceError

__all__ = [
    "Achievement",
    "GameLedger",
    "GameScoreRecord",
    "JsonLedgerStore",
    "LedgerPersistenceError",
    "SPECIAL_TITLE",
    "default_achievements",
]
