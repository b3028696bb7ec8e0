"""Domain models for the user profile and nutrition targets."""

import math
import re
from dataclasses import dataclass, field
from enum import Enum

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_WHOLE_NUMBER = re.compile(r"^\s*([+-]?\d+)")


def _label_key(value: str) -> str:
    return re.sub(r"[\s_-]+", "", value).lower()


class HealthGoal(Enum):
    """Supported health goals."""

    WEIGHT_LOSS = "Weight Loss"
    MUSCLE_GAIN = "Muscle Gain"
    MAINTENANCE = "Maintenance"
    ATHLETIC_PERFORMANCE = "Athletic Performance"

    @classmethod
    def from_label(cls, value: str | None) -> "HealthGoal | None":
        """Return the goal for a label, ignoring case and separators."""
        if not value:
            return None
        key = _label_key(value)
        for goal in cls:
            if _label_key(goal.value) == key:
                return goal
        return None


class ActivityLevel(Enum):
    """Supported activity levels."""

    SEDENTARY = "Sedentary"
    LIGHT = "Light"
    MODERATE = "Moderate"
    ACTIVE = "Active"
    VERY_ACTIVE = "Very Active"

    @classmethod
    def from_label(cls, value: str | None) -> "ActivityLevel | None":
        """Return the activity level for a label, ignoring case and separators."""
        if not value:
            return None
        key = _label_key(value)
        for level in cls:
            if _label_key(level.value) == key:
                return level
        return None


@dataclass(frozen=True)
class MacroGoals:
    """Manually entered macro targets in grams plus a calorie figure."""

    protein: int = 150
    carbs: int = 250
    fat: int = 70
    calories: int = 2200


@dataclass(frozen=True)
class UserProfile:
    """Health and goal configuration of the single local user.

    Physical metrics and the calorie override are free text as typed in the
    profile editor. Use :func:`parse_number` and :func:`parse_whole_number`
    to read them.
    """

    name: str = "Jane Doe"
    email: str = "jane@example.com"
    contact: str = ""
    age: str = "28"
    dob: str = "1996-05-15"
    height_cm: str = "170"
    weight_kg: str = "65"
    health_goal: str = HealthGoal.MAINTENANCE.value
    allergies: str = ""
    activity_level: str | None = ActivityLevel.MODERATE.value
    calories_goal_override: str = "2200"
    macro_goal_overrides: MacroGoals = field(default_factory=MacroGoals)


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macro targets."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


def parse_number(value: object) -> float | None:
    """Parse the leading decimal number of a text field.

    Returns None for blank or non-numeric input. Trailing text such as a unit
    is ignored ("170cm" reads as 170).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return None
        number = float(match.group(1))
    else:
        return None
    return number if math.isfinite(number) else None


def parse_whole_number(value: object) -> int | None:
    """Parse the leading whole number of a text field ("1800.5" reads as 1800)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    match = _LEADING_WHOLE_NUMBER.match(value)
    if match is None:
        return None
    return int(match.group(1))
