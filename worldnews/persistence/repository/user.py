"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from worldnews.domain.model import User
from worldnews.domain.repository import UserRepository
from worldnews.domain.value import UserId
from worldnews.domain.value.types import Handle
from worldnews.persistence.mappers import row_to_user, user_to_dict
from worldnews.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Handle) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> List[User]:
        """List every user, newest first."""
        stmt = select(users_table).order_by(
            users_table.c.created_at.desc(), users_table.c.id.desc()
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

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

    async def set_active(self, user_id: UserId, active: bool) -> Optional[User]:
        """Set a user's active flag."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(is_active=active)
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else None

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
