"""Food and water logging service."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from culinary_companion.domain.meals import FoodLogEntry, Macros, MealType
from culinary_companion.domain.profile import parse_number
from culinary_companion.state import AppState


class EntryRejectedError(ValueError):
    """Raised when a log request cannot become an entry."""


class FoodLogRepository(Protocol):
    """Persistence interface for the food log history."""

    def load(self) -> list[FoodLogEntry]:
        """Return all entries, newest first."""

    def save(self, entries: list[FoodLogEntry]) -> None:
        """Persist all entries, newest first."""


@dataclass
class MealLogService:
    """Service that records confirmed entries in the append-only history."""

    state: AppState
    repository: FoodLogRepository

    def history(self) -> list[FoodLogEntry]:
        """Return all entries, newest first."""
        return list(self.state.history)

    def log_water(self, amount_ml: float, now: datetime) -> FoodLogEntry:
        """Record a water intake."""
        try:
            entry = FoodLogEntry.water(amount_ml=amount_ml, logged_at=now)
        except ValueError as exc:
            raise EntryRejectedError(str(exc)) from exc
        return self._append(entry)

    def confirm(
        self,
        draft: Mapping[str, object],
        meal_type: MealType,
        now: datetime,
        image_reference: str | None = None,
    ) -> FoodLogEntry:
        """Record a food draft from analysis or manual editing.

        Missing fields get placeholder values; calories and macros that do not
        read as non-negative numbers count as zero.
        """
        if meal_type is MealType.WATER:
            raise EntryRejectedError("Use log_water to record water")
        raw_macros = draft.get("macros")
        macros = raw_macros if isinstance(raw_macros, Mapping) else {}
        entry = FoodLogEntry.meal(
            meal_type=meal_type,
            name=str(draft.get("name") or "Unknown Item"),
            portion=str(draft.get("portion") or "1 serving"),
            calories=_amount(draft.get("calories")),
            macros=Macros(
                protein=_amount(macros.get("protein")),
                carbs=_amount(macros.get("carbs")),
                fat=_amount(macros.get("fat")),
            ),
            logged_at=now,
            image_reference=image_reference,
        )
        return self._append(entry)

    def _append(self, entry: FoodLogEntry) -> FoodLogEntry:
        history = [entry, *self.state.history]
        self.repository.save(history)
        self.state.history = history
        return entry


def _amount(value: object) -> float:
    number = parse_number(value)
    if number is None or number < 0:
        return 0.0
    return number
