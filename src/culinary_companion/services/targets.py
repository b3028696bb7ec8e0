"""Daily nutrition target calculation."""

import math
import sys

from culinary_companion.domain.profile import (
    ActivityLevel,
    HealthGoal,
    NutritionTargets,
    UserProfile,
    parse_number,
    parse_whole_number,
)

DEFAULT_CALORIES = 2000

_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

_GOAL_ADJUSTMENTS = {
    HealthGoal.WEIGHT_LOSS: -500,
    HealthGoal.MUSCLE_GAIN: 350,
}

# Share of calories from (protein, carbs, fat).
_MACRO_RATIOS = {
    HealthGoal.MUSCLE_GAIN: (0.35, 0.45, 0.20),
    HealthGoal.WEIGHT_LOSS: (0.30, 0.40, 0.30),
}
_DEFAULT_MACRO_RATIO = (0.25, 0.50, 0.25)

_KCAL_PER_G_PROTEIN = 4
_KCAL_PER_G_CARBS = 4
_KCAL_PER_G_FAT = 9

# Larger overrides cannot be split into macros as floats.
_MAX_CALORIE_OVERRIDE = int(sys.float_info.max)


def calculate_targets(profile: UserProfile) -> NutritionTargets:
    """Return daily calorie and macro targets for a profile.

    When age, height or weight is missing the manual macro goals are used as
    they are, and so are they when the estimate is not a finite number.
    Otherwise calories come from a sex-agnostic Mifflin-St Jeor estimate scaled
    by activity and adjusted for the goal, unless a positive calorie override
    is set. Never raises.
    """
    weight = parse_number(profile.weight_kg)
    height = parse_number(profile.height_cm)
    age = parse_number(profile.age)
    override = _positive_override(profile.calories_goal_override)

    if weight is None or height is None or age is None:
        return _manual_targets(profile, override)

    goal = HealthGoal.from_label(profile.health_goal)
    activity = (
        ActivityLevel.from_label(profile.activity_level) or ActivityLevel.MODERATE
    )

    bmr = 10 * weight + 6.25 * height - 5 * age
    tdee = bmr * _ACTIVITY_MULTIPLIERS[activity]
    target_calories = tdee + _GOAL_ADJUSTMENTS.get(goal, 0)
    if override is not None:
        target_calories = override
    elif not math.isfinite(tdee):
        return _manual_targets(profile, override)
    target_calories = max(0.0, target_calories)

    protein_ratio, carbs_ratio, fat_ratio = _MACRO_RATIOS.get(
        goal, _DEFAULT_MACRO_RATIO
    )
    return NutritionTargets(
        calories=_round_half_up(target_calories),
        protein_g=_round_half_up(target_calories * protein_ratio / _KCAL_PER_G_PROTEIN),
        carbs_g=_round_half_up(target_calories * carbs_ratio / _KCAL_PER_G_CARBS),
        fat_g=_round_half_up(target_calories * fat_ratio / _KCAL_PER_G_FAT),
    )


def _manual_targets(profile: UserProfile, override: int | None) -> NutritionTargets:
    macros = profile.macro_goal_overrides
    return NutritionTargets(
        calories=override if override is not None else DEFAULT_CALORIES,
        protein_g=max(0, macros.protein),
        carbs_g=max(0, macros.carbs),
        fat_g=max(0, macros.fat),
    )


def _positive_override(raw: str) -> int | None:
    value = parse_whole_number(raw)
    if value is None or not 0 < value <= _MAX_CALORIE_OVERRIDE:
        return None
    return value


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
