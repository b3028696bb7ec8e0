"""Progress of consumed totals against daily targets."""

from culinary_companion.domain.profile import NutritionTargets
from culinary_companion.domain.stats import DailyProgress, DailyTotals, ProgressFigure

WATER_TARGET_ML = 2500


def percent(consumed: float, target: float) -> float:
    """Return consumption as a percentage of target, capped at 100.

    A zero or negative target yields 0.
    """
    if target <= 0:
        return 0.0
    return min(100.0, consumed / target * 100)


def evaluate_progress(
    targets: NutritionTargets, consumed: DailyTotals
) -> DailyProgress:
    """Combine targets and consumed totals into per-goal progress."""
    return DailyProgress(
        calories=_figure(consumed.calories, targets.calories),
        protein=_figure(consumed.protein_g, targets.protein_g),
        carbs=_figure(consumed.carbs_g, targets.carbs_g),
        fat=_figure(consumed.fat_g, targets.fat_g),
        water=_figure(consumed.water_ml, WATER_TARGET_ML),
    )


def _figure(consumed: float, target: float) -> ProgressFigure:
    return ProgressFigure(
        consumed=consumed, target=target, percent=percent(consumed, target)
    )
