"""In-memory user repository for testing."""

from typing import Optional

from opinion.domain.model.user import User
from opinion.domain.repository.user import UserRepository
from opinion.domain.value import Nickname, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by their nickname."""
        for user in self._users.values():
            if user.nickname == nickname:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
