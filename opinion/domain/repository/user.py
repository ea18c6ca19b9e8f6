"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from opinion.domain.model.user import User
from opinion.domain.value import Nickname, UserId


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by their nickname.

        Args:
            nickname: The user's nickname

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
