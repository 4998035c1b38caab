from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserProfile:
    id: str
    name: str
    email: str


class UserDirectory(ABC):
    """Port for resolving user identities to display data."""

    @abstractmethod
    def get(self, identity: str) -> UserProfile | None:
        """Return the user's profile, or None if the user no longer exists."""
