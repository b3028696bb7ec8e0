"""JSON-compatible representations of domain objects.

Field names are camelCase, shared by the stored blobs and the HTTP API.
"""

from culinary_companion.domain.meals import FoodLogEntry, Macros, MealType
from culinary_companion.domain.models import StoredUser
from culinary_companion.domain.profile import (
    MacroGoals,
    UserProfile,
    parse_number,
    parse_whole_number,
)

_DEFAULT_PROFILE = UserProfile()


def profile_to_dict(profile: UserProfile) -> dict[str, object]:
    """Serialize a profile."""
    macros = profile.macro_goal_overrides
    return {
        "name": profile.name,
        "email": profile.email,
        "contact": profile.contact,
        "age": profile.age,
        "dob": profile.dob,
        "heightCm": profile.height_cm,
        "weightKg": profile.weight_kg,
        "healthGoal": profile.health_goal,
        "allergies": profile.allergies,
        "activityLevel": profile.activity_level,
        "caloriesGoalOverride": profile.calories_goal_override,
        "macroGoalOverrides": {
            "protein": macros.protein,
            "carbs": macros.carbs,
            "fat": macros.fat,
            "calories": macros.calories,
        },
    }


def profile_from_dict(data: dict[str, object]) -> UserProfile:
    """Deserialize a stored profile, filling gaps left by older saves.

    A profile without ``caloriesGoalOverride`` takes it from
    ``macroGoalOverrides.calories`` (or "2200"); one without
    ``macroGoalOverrides`` gets the default macro goals. The key names of the
    first app release (``height``, ``weight``, ``healthGoals``,
    ``caloriesGoal``, ``macroGoals``) are read as well.
    """
    raw_macros = _first(data, "macroGoalOverrides", "macroGoals")
    if isinstance(raw_macros, dict):
        macro_goals = macro_goals_from_dict(raw_macros, MacroGoals())
    else:
        raw_macros = None
        macro_goals = MacroGoals()

    calories_override = _first(data, "caloriesGoalOverride", "caloriesGoal")
    if calories_override is None:
        derived = raw_macros.get("calories") if raw_macros else None
        calories_override = str(derived) if derived is not None else "2200"

    activity = _first(data, "activityLevel")
    return UserProfile(
        name=_text(data.get("name"), _DEFAULT_PROFILE.name),
        email=_text(data.get("email"), _DEFAULT_PROFILE.email),
        contact=_text(data.get("contact"), ""),
        age=_text(data.get("age"), ""),
        dob=_text(data.get("dob"), ""),
        height_cm=_text(_first(data, "heightCm", "height"), ""),
        weight_kg=_text(_first(data, "weightKg", "weight"), ""),
        health_goal=_text(
            _first(data, "healthGoal", "healthGoals"), _DEFAULT_PROFILE.health_goal
        ),
        allergies=_text(data.get("allergies"), ""),
        activity_level=None if activity is None else str(activity),
        calories_goal_override=str(calories_override),
        macro_goal_overrides=macro_goals,
    )


def macro_goals_from_dict(data: dict[str, object], current: MacroGoals) -> MacroGoals:
    """Merge macro goal values into ``current``; unparsable values become 0."""
    values = {
        "protein": current.protein,
        "carbs": current.carbs,
        "fat": current.fat,
        "calories": current.calories,
    }
    for key in values:
        if key in data:
            values[key] = parse_whole_number(data[key]) or 0
    return MacroGoals(**values)


def entry_to_dict(entry: FoodLogEntry) -> dict[str, object]:
    """Serialize a log entry."""
    payload: dict[str, object] = {
        "id": entry.id,
        "timestamp": entry.timestamp,
        "mealType": entry.meal_type.value,
        "name": entry.name,
        "portion": entry.portion,
        "calories": entry.calories,
        "macros": {
            "protein": entry.macros.protein,
            "carbs": entry.macros.carbs,
            "fat": entry.macros.fat,
        },
    }
    if entry.image_reference is not None:
        payload["imageReference"] = entry.image_reference
    if entry.water_amount_ml is not None:
        payload["waterAmountMl"] = entry.water_amount_ml
    return payload


def entry_from_dict(data: dict[str, object]) -> FoodLogEntry:
    """Deserialize a stored log entry.

    Raises ValueError when the id, timestamp or meal type is unusable.
    """
    meal_type = MealType(_first(data, "mealType", "type"))
    timestamp = parse_number(data.get("timestamp"))
    if timestamp is None:
        raise ValueError("Log entry has no timestamp")
    entry_id = data.get("id")
    if not entry_id:
        raise ValueError("Log entry has no id")
    raw_macros = data.get("macros")
    macros = raw_macros if isinstance(raw_macros, dict) else {}
    water = parse_number(_first(data, "waterAmountMl", "waterAmount"))
    image = _first(data, "imageReference", "imageUrl")
    return FoodLogEntry(
        id=str(entry_id),
        timestamp=int(timestamp),
        meal_type=meal_type,
        name=_text(data.get("name"), ""),
        portion=_text(data.get("portion"), ""),
        calories=parse_number(data.get("calories")) or 0.0,
        macros=Macros(
            protein=parse_number(macros.get("protein")) or 0.0,
            carbs=parse_number(macros.get("carbs")) or 0.0,
            fat=parse_number(macros.get("fat")) or 0.0,
        ),
        image_reference=str(image) if image else None,
        water_amount_ml=water,
    )


def user_to_dict(user: StoredUser) -> dict[str, object]:
    """Serialize a local account."""
    return {"email": user.email, "password": user.password, "name": user.name}


def user_from_dict(data: dict[str, object]) -> StoredUser:
    """Deserialize a local account."""
    return StoredUser(
        email=str(data.get("email", "")),
        password=str(data.get("password", "")),
        name=str(data.get("name") or "User"),
    )


def _first(data: dict[str, object], *keys: str) -> object | None:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _text(value: object, default: str) -> str:
    if value is None:
        return default
    return str(value)
