"""Mini README: Game score bookkeeping inside the finance ledger.

Structure:
    * GameScoreRecord - dataclass with high score, lifetime badge count, and title flag.
    * Achievement - dataclass describing an unlockable achievement.
    * GameLedger - records finished runs, unlocks achievements, and persists.

Every finished run earns exactly one lifetime badge, whatever its score. Once
the lifetime count reaches the badge threshold the "Financial Focus" title
and achievement are unlocked, exactly once. The per-run "badges earned"
figure shown at game over (score // 10) is a different, cosmetic number and
never reaches the ledger.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional

from ..logging_utils import get_logger

if TYPE_CHECKING:
    from .storage import JsonLedgerStore

LOGGER = get_logger(__name__)

SPECIAL_TITLE = "Financial Focus"

AchievementListener = Callable[["Achievement"], None]


@dataclass(slots=True)
class GameScoreRecord:
    """Persisted mini-game results."""

    high_score: int = 0
    total_badges: int = 0
    has_special_title: bool = False

    @property
    def lifetime_badge_count(self) -> int:
        return self.total_badges

    def as_dict(self) -> Dict[str, object]:
        return {
            "high_score": self.high_score,
            "total_badges": self.total_badges,
            "has_special_title": self.has_special_title,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "GameScoreRecord":
        return cls(
            high_score=int(payload.get("high_score", 0)),
            total_badges=int(payload.get("total_badges", 0)),
            has_special_title=bool(payload.get("has_special_title", False)),
        )


@dataclass(slots=True)
class Achievement:
    """An achievement shown on the finance dashboard."""

    title: str
    description: str
    icon: str
    is_unlocked: bool = False
    unlocked_on: Optional[date] = None

    def as_dict(self) -> Dict[str, object]:
        return {
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "is_unlocked": self.is_unlocked,
            "unlocked_on": self.unlocked_on.isoformat() if self.unlocked_on else None,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "Achievement":
        unlocked_on = payload.get("unlocked_on")
        return cls(
            title=str(payload["title"]),
            description=str(payload.get("description", "")),
            icon=str(payload.get("icon", "")),
            is_unlocked=bool(payload.get("is_unlocked", False)),
            unlocked_on=_parse_date(unlocked_on) if unlocked_on else None,
        )


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def default_achievements() -> List[Achievement]:
    """The achievement catalogue every new ledger starts with."""

    return [
        Achievement("Budget Master", "Create your first budget goal", "target"),
        Achievement("Planner of the Week", "Track expenses for 7 days", "calendar.badge.checkmark"),
        Achievement("Savings Hero", "Reach your monthly savings goal", "star.fill"),
        Achievement(SPECIAL_TITLE, "Earn 10 badges in the mini-game", "gamecontroller.fill"),
        Achievement("Income Tracker", "Add your first income", "plus.circle.fill"),
        Achievement("Expense Monitor", "Add your first expense", "minus.circle.fill"),
    ]


class GameLedger:
    """Ledger collaborator receiving final scores from the mini-game."""

    def __init__(
        self,
        record: Optional[GameScoreRecord] = None,
        achievements: Optional[Iterable[Achievement]] = None,
        *,
        store: Optional["JsonLedgerStore"] = None,
        badge_threshold: int = 10,
        today: Callable[[], date] = date.today,
    ) -> None:
        if badge_threshold < 1:
            raise ValueError("Badge threshold must be at least 1")
        self.record = record or GameScoreRecord()
        self._achievements: Dict[str, Achievement] = {}
        for achievement in achievements or default_achievements():
            self._achievements[achievement.title] = achievement
        if SPECIAL_TITLE not in self._achievements:
            special = next(a for a in default_achievements() if a.title == SPECIAL_TITLE)
            self._achievements[SPECIAL_TITLE] = special
        self.store = store
        self.badge_threshold = badge_threshold
        self._today = today
        self._listeners: List[AchievementListener] = []
        LOGGER.debug(
            "Game ledger initialised with high score %s and %s badges",
            self.record.high_score,
            self.record.total_badges,
        )

    @classmethod
    def from_store(cls, store: "JsonLedgerStore", *, badge_threshold: int = 10) -> "GameLedger":
        """Load a ledger from ``store`` and keep saving to it."""

        record, achievements = store.load()
        return cls(record, achievements or None, store=store, badge_threshold=badge_threshold)

    def add_achievement_listener(self, listener: AchievementListener) -> None:
        self._listeners.append(listener)

    def list_achievements(self) -> List[Achievement]:
        return list(self._achievements.values())

    def unlocked_achievements(self) -> List[Achievement]:
        return [achievement for achievement in self._achievements.values() if achievement.is_unlocked]

    def get_achievement(self, title: str) -> Achievement:
        if title not in self._achievements:
            raise KeyError(f"Achievement {title} not found")
        return self._achievements[title]

    def unlock_achievement(self, title: str) -> bool:
        """Unlock ``title`` once; return whether this call unlocked it."""

        achievement = self.get_achievement(title)
        if achievement.is_unlocked:
            return False
        unlocked = replace(achievement, is_unlocked=True, unlocked_on=self._today())
        self._achievements[title] = unlocked
        LOGGER.info("Achievement unlocked: %s", title)
        for listener in list(self._listeners):
            try:
                listener(unlocked)
            except Exception:  # noqa: BLE001
                LOGGER.exception("Achievement listener %r failed", listener)
        return True

    def record_game_score(self, final_score: int) -> GameScoreRecord:
        """Apply one finished run to the persisted record."""

        if isinstance(final_score, bool) or not isinstance(final_score, int):
            raise ValueError(f"Final score must be an integer, got {final_score!r}")
        if final_score < 0:
            raise ValueError(f"Final score must not be negative, got {final_score}")

        record = self.record
        record.high_score = max(record.high_score, final_score)
        record.total_badges += 1
        if record.total_badges >= self.badge_threshold and not record.has_special_title:
            record.has_special_title = True
            self.unlock_achievement(SPECIAL_TITLE)
        LOGGER.info(
            "Recorded game score %s (high score %s, lifetime badges %s)",
            final_score,
            record.high_score,
            record.total_badges,
        )
        self.save()
        return record

    def save(self) -> None:
        if self.store is not None:
            self.store.save(self.record, self.list_achievements())

    def export_snapshot(self) -> Dict[str, object]:
        """Export the record and achievements for JSON responses."""

        return {
            "game_score": self.record.as_dict(),
            "achievements": [achievement.as_dict() for achievement in self.list_achievements()],
        }
