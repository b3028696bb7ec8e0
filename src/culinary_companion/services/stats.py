"""Aggregation of logged entries into daily and period totals."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from culinary_companion.domain.meals import FoodLogEntry, MealType
from culinary_companion.domain.stats import DailyTotals

DECEMBER = 12


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregated totals for a period."""

    daily: list[DailyTotals]
    avg_calories: float
    avg_protein_g: float
    avg_carbs_g: float
    avg_fat_g: float
    avg_water_ml: float


def local_day(moment: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar date of a moment in ``tz`` (process local time if None).

    Naive datetimes are taken to be in that zone already.
    """
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(tz).date()


def entry_day(entry: FoodLogEntry, tz: tzinfo | None = None) -> date:
    """Return the calendar date an entry was logged on."""
    return datetime.fromtimestamp(_number(entry.timestamp) / 1000, tz=tz).date()


def aggregate_day(
    entries: Iterable[FoodLogEntry], reference: datetime, tz: tzinfo | None = None
) -> DailyTotals:
    """Sum the entries logged on the calendar day of ``reference``."""
    return _aggregate_date(local_day(reference, tz), entries, tz)


def aggregate_period(
    entries: Iterable[FoodLogEntry],
    start: date,
    days: int,
    tz: tzinfo | None = None,
) -> PeriodSummary:
    """Return per-day totals for ``days`` days from ``start`` and daily averages."""
    entries = list(entries)
    daily = [
        _aggregate_date(start + timedelta(days=offset), entries, tz)
        for offset in range(days)
    ]
    total_days = max(len(daily), 1)
    return PeriodSummary(
        daily=daily,
        avg_calories=sum(day.calories for day in daily) / total_days,
        avg_protein_g=sum(day.protein_g for day in daily) / total_days,
        avg_carbs_g=sum(day.carbs_g for day in daily) / total_days,
        avg_fat_g=sum(day.fat_g for day in daily) / total_days,
        avg_water_ml=sum(day.water_ml for day in daily) / total_days,
    )


def week_to_date(
    entries: Iterable[FoodLogEntry], reference: datetime, tz: tzinfo | None = None
) -> PeriodSummary:
    """Return totals for the Monday-based week containing ``reference``."""
    today = local_day(reference, tz)
    start = today - timedelta(days=today.weekday())
    return aggregate_period(entries, start, 7, tz)


def month_to_date(
    entries: Iterable[FoodLogEntry], reference: datetime, tz: tzinfo | None = None
) -> PeriodSummary:
    """Return totals for the calendar month containing ``reference``."""
    start = local_day(reference, tz).replace(day=1)
    if start.month == DECEMBER:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return aggregate_period(entries, start, (end - start).days, tz)


def _aggregate_date(
    day: date, entries: Iterable[FoodLogEntry], tz: tzinfo | None
) -> DailyTotals:
    calories = protein = carbs = fat = water = 0.0
    for entry in entries:
        if entry_day(entry, tz) != day:
            continue
        calories += _number(entry.calories)
        macros = entry.macros
        if macros is not None:
            protein += _number(macros.protein)
            carbs += _number(macros.carbs)
            fat += _number(macros.fat)
        if entry.meal_type is MealType.WATER:
            water += _number(entry.water_amount_ml)
    return DailyTotals(
        day=day,
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        water_ml=water,
    )


def _number(value: object) -> float:
    """Read a numeric field, treating anything missing as zero."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return float(value)
