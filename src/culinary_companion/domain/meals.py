"""Domain models for the food and water log."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4


class MealType(Enum):
    """Kinds of log entries."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"
    WATER = "Water"


@dataclass(frozen=True)
class Macros:
    """Macronutrients in grams."""

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass(frozen=True)
class FoodLogEntry:
    """A single recorded food or water consumption event.

    Build new entries with :meth:`meal` or :meth:`water` so that a water entry
    never carries nutrition and a meal never carries a water amount.
    """

    id: str
    timestamp: int
    meal_type: MealType
    name: str
    portion: str
    calories: float
    macros: Macros = field(default_factory=Macros)
    image_reference: str | None = None
    water_amount_ml: float | None = None

    @classmethod
    def meal(  # noqa: PLR0913
        cls,
        *,
        meal_type: MealType,
        name: str,
        portion: str,
        calories: float,
        macros: Macros,
        logged_at: datetime,
        image_reference: str | None = None,
    ) -> "FoodLogEntry":
        """Create a food entry for a non-water meal type."""
        if meal_type is MealType.WATER:
            raise ValueError("Water entries are created with FoodLogEntry.water")
        return cls(
            id=new_entry_id(),
            timestamp=to_epoch_ms(logged_at),
            meal_type=meal_type,
            name=name,
            portion=portion,
            calories=calories,
            macros=macros,
            image_reference=image_reference,
        )

    @classmethod
    def water(cls, *, amount_ml: float, logged_at: datetime) -> "FoodLogEntry":
        """Create a water entry with zero calories and macros."""
        if not math.isfinite(amount_ml) or amount_ml <= 0:
            raise ValueError("Water amount must be a positive number")
        return cls(
            id=new_entry_id(),
            timestamp=to_epoch_ms(logged_at),
            meal_type=MealType.WATER,
            name="Water",
            portion=f"{amount_ml:g}ml",
            calories=0.0,
            macros=Macros(),
            water_amount_ml=amount_ml,
        )


def new_entry_id() -> str:
    """Return an opaque unique entry token."""
    return uuid4().hex


def to_epoch_ms(moment: datetime) -> int:
    """Convert a datetime to milliseconds since the epoch.

    Naive datetimes are read as local time.
    """
    return int(moment.timestamp() * 1000)
