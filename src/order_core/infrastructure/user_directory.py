from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.ports import UserDirectory

if TYPE_CHECKING:
    from collections.abc import Iterable

    from order_core.application.ports import UserProfile


class InMemoryUserDirectory(UserDirectory):
    def __init__(self, users: Iterable[UserProfile] = ()) -> None:
        self._users = {user.id: user for user in users}

    def add(self, user: UserProfile) -> None:
        self._users[user.id] = user

    def get(self, identity: str) -> UserProfile | None:
        return self._users.get(identity)
