"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from opinion.domain.model import User
from opinion.domain.repository import UserRepository
from opinion.domain.value import Nickname, UserId
from opinion.persistence.mappers import row_to_user, user_to_dict
from opinion.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by their nickname.

        Args:
            nickname: Nickname to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.nickname == nickname.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user
