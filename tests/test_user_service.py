"""Tests for local account sign-in."""

import pytest

from culinary_companion.services.profile import ProfileService
from culinary_companion.services.users import AccountError, AccountService
from culinary_companion.state import AppState
from tests.conftest import InMemoryUserRepository


@pytest.fixture
def accounts(
    state: AppState,
    user_repository: InMemoryUserRepository,
    profile_service: ProfileService,
) -> AccountService:
    return AccountService(
        state=state, repository=user_repository, profile_service=profile_service
    )


def test_register_signs_in_and_copies_identity(
    accounts: AccountService, state: AppState
) -> None:
    user = accounts.register("sam@example.com", "pw", "Sam")

    assert accounts.is_signed_in()
    assert state.signed_in_email == "sam@example.com"
    assert state.profile.name == "Sam"
    assert state.profile.email == user.email


def test_register_defaults_blank_name(accounts: AccountService) -> None:
    assert accounts.register("x@example.com", "pw").name == "User"


def test_register_rejects_duplicate_email_ignoring_case(
    accounts: AccountService,
) -> None:
    accounts.register("sam@example.com", "pw", "Sam")

    with pytest.raises(AccountError, match="already exists"):
        accounts.register("SAM@example.com", "other", "Other")


def test_login_checks_email_and_password(accounts: AccountService) -> None:
    accounts.register("sam@example.com", "pw", "Sam")
    accounts.logout()

    with pytest.raises(AccountError, match="No account"):
        accounts.login("nobody@example.com", "pw")
    with pytest.raises(AccountError, match="Incorrect password"):
        accounts.login("sam@example.com", "wrong")
    assert not accounts.is_signed_in()

    assert accounts.login("Sam@Example.com", "pw").name == "Sam"
    assert accounts.is_signed_in()


def test_logout_ends_session(accounts: AccountService) -> None:
    accounts.register("sam@example.com", "pw")

    accounts.logout()

    assert not accounts.is_signed_in()
