"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Consumed totals for one calendar day."""

    day: date
    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    water_ml: float = 0.0


@dataclass(frozen=True)
class ProgressFigure:
    """Consumption against a target.

    ``consumed`` and ``target`` are raw values; only ``percent`` is capped.
    """

    consumed: float
    target: float
    percent: float


@dataclass(frozen=True)
class DailyProgress:
    """Progress toward each daily goal."""

    calories: ProgressFigure
    protein: ProgressFigure
    carbs: ProgressFigure
    fat: ProgressFigure
    water: ProgressFigure
