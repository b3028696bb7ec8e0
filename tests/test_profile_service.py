"""Tests for profile editing and stored profile migration."""

import pytest

from culinary_companion.domain.profile import MacroGoals, UserProfile
from culinary_companion.serialization import profile_from_dict, profile_to_dict
from culinary_companion.services.profile import ProfileService
from culinary_companion.state import AppState
from tests.conftest import InMemoryProfileRepository


def test_update_persists_and_changes_targets(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
) -> None:
    before = profile_service.targets()

    profile = profile_service.update(
        {"weight_kg": "90", "calories_goal_override": ""}
    )

    assert profile.weight_kg == "90"
    assert profile_repository.profile == profile
    assert profile_repository.saves == 1
    assert profile_service.targets() != before


def test_update_merges_macro_goals(profile_service: ProfileService) -> None:
    profile = profile_service.update({"macro_goal_overrides": {"protein": "180"}})

    assert profile.macro_goal_overrides == MacroGoals(
        protein=180, carbs=250, fat=70, calories=2200
    )


def test_update_reads_unparsable_macro_goal_as_zero(
    profile_service: ProfileService,
) -> None:
    profile = profile_service.update({"macro_goal_overrides": {"fat": "lots"}})

    assert profile.macro_goal_overrides.fat == 0


def test_update_rejects_unknown_fields(profile_service: ProfileService) -> None:
    with pytest.raises(ValueError, match="favourite_food"):
        profile_service.update({"favourite_food": "pizza"})


def test_update_allows_clearing_activity_level(
    profile_service: ProfileService,
) -> None:
    profile = profile_service.update({"activity_level": None, "allergies": None})

    assert profile.activity_level is None
    assert profile.allergies == ""


def test_is_complete_requires_metrics(profile_service: ProfileService) -> None:
    assert profile_service.is_complete()

    profile_service.update({"height_cm": "  "})

    assert not profile_service.is_complete()


def test_replace_identity_keeps_name_when_blank(
    profile_service: ProfileService, state: AppState
) -> None:
    profile_service.replace_identity("", "new@example.com")

    assert state.profile.email == "new@example.com"
    assert state.profile.name == UserProfile().name


def test_profile_round_trips_through_dict() -> None:
    profile = UserProfile(name="Sam", activity_level=None, allergies="peanuts")

    assert profile_from_dict(profile_to_dict(profile)) == profile


def test_migration_derives_override_from_macro_goals() -> None:
    stored = profile_to_dict(UserProfile())
    del stored["caloriesGoalOverride"]
    stored["macroGoalOverrides"] = {
        "protein": 140,
        "carbs": 220,
        "fat": 65,
        "calories": 1950,
    }

    profile = profile_from_dict(stored)

    assert profile.calories_goal_override == "1950"
    assert profile.macro_goal_overrides.calories == 1950


def test_migration_fills_missing_macro_goals_and_override() -> None:
    stored = profile_to_dict(UserProfile())
    del stored["caloriesGoalOverride"]
    del stored["macroGoalOverrides"]

    profile = profile_from_dict(stored)

    assert profile.calories_goal_override == "2200"
    assert profile.macro_goal_overrides == MacroGoals()


def test_migration_reads_first_release_key_names() -> None:
    profile = profile_from_dict(
        {
            "name": "Ada",
            "height": "160",
            "weight": "55",
            "healthGoals": "Weight Loss",
            "caloriesGoal": "1700",
            "macroGoals": {"protein": 110, "carbs": 160, "fat": 50, "calories": 1700},
        }
    )

    assert profile.height_cm == "160"
    assert profile.weight_kg == "55"
    assert profile.health_goal == "Weight Loss"
    assert profile.calories_goal_override == "1700"
    assert profile.macro_goal_overrides.protein == 110
    assert profile.activity_level is None
