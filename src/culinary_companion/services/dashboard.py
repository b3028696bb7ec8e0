"""Dashboard figures combining targets, totals and progress."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum

from culinary_companion.domain.meals import FoodLogEntry
from culinary_companion.domain.profile import NutritionTargets, UserProfile
from culinary_companion.domain.stats import DailyProgress, DailyTotals
from culinary_companion.services.progress import evaluate_progress
from culinary_companion.services.stats import (
    PeriodSummary,
    aggregate_day,
    month_to_date,
    week_to_date,
)
from culinary_companion.services.targets import calculate_targets


class DashboardView(Enum):
    """Time span shown next to today's progress."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class Dashboard:
    """Everything the dashboard displays for a reference time."""

    view: DashboardView
    targets: NutritionTargets
    today: DailyTotals
    progress: DailyProgress
    period: PeriodSummary | None


def build_dashboard(
    profile: UserProfile,
    entries: Iterable[FoodLogEntry],
    reference: datetime,
    view: DashboardView = DashboardView.DAY,
    tz: tzinfo | None = None,
) -> Dashboard:
    """Compute the dashboard for ``reference`` without touching any state."""
    entries = list(entries)
    targets = calculate_targets(profile)
    today = aggregate_day(entries, reference, tz)
    period = None
    if view is DashboardView.WEEK:
        period = week_to_date(entries, reference, tz)
    elif view is DashboardView.MONTH:
        period = month_to_date(entries, reference, tz)
    return Dashboard(
        view=view,
        targets=targets,
        today=today,
        progress=evaluate_progress(targets, today),
        period=period,
    )
