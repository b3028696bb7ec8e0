"""Local account sign-in.

Accounts are a convenience for a shared device. Credentials are stored as
typed and offer no protection.
"""

from dataclasses import dataclass
from typing import Protocol

from culinary_companion.domain.models import StoredUser
from culinary_companion.services.profile import ProfileService
from culinary_companion.state import AppState


class AccountError(Exception):
    """Raised when registration or sign-in fails."""


class UserRepository(Protocol):
    """Persistence interface for the credential list."""

    def load(self) -> list[StoredUser]:
        """Return all stored accounts."""

    def save(self, users: list[StoredUser]) -> None:
        """Persist all accounts."""


@dataclass
class AccountService:
    """Application service for account lifecycle actions."""

    state: AppState
    repository: UserRepository
    profile_service: ProfileService

    def register(self, email: str, password: str, name: str = "") -> StoredUser:
        """Create an account and sign in."""
        users = self.repository.load()
        if _find(users, email):
            raise AccountError("An account with this email already exists.")
        user = StoredUser(email=email, password=password, name=name or "User")
        self.repository.save([*users, user])
        self._sign_in(user)
        return user

    def login(self, email: str, password: str) -> StoredUser:
        """Sign in with an existing account."""
        user = _find(self.repository.load(), email)
        if user is None:
            raise AccountError("No account found with this email.")
        if user.password != password:
            raise AccountError("Incorrect password. Please try again.")
        self._sign_in(user)
        return user

    def logout(self) -> None:
        """End the current session."""
        self.state.signed_in_email = None

    def is_signed_in(self) -> bool:
        """Return True while a session is active."""
        return self.state.signed_in_email is not None

    def _sign_in(self, user: StoredUser) -> None:
        self.profile_service.replace_identity(user.name, user.email)
        self.state.signed_in_email = user.email


def _find(users: list[StoredUser], email: str) -> StoredUser | None:
    wanted = email.lower()
    for user in users:
        if user.email.lower() == wanted:
            return user
    return None
