"""Domain models for accounts and conversations."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class StoredUser:
    """Local account record. The password is kept as typed."""

    email: str
    password: str
    name: str


@dataclass(frozen=True)
class ChatMessage:
    """One turn of an assistant conversation."""

    role: Literal["user", "assistant"]
    content: str
