"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import any_, case, delete, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from worldnews.domain.model import Post
from worldnews.domain.repository import PostRepository
from worldnews.domain.value import Category, CountryCode, LikeState, PostId, UserId
from worldnews.persistence.mappers import post_content_to_dict, row_to_post
from worldnews.persistence.tables import posts_table

_NEWEST_FIRST = (posts_table.c.created_at.desc(), posts_table.c.id.desc())


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_active(
        self,
        country: Optional[CountryCode] = None,
        category: Optional[Category] = None,
    ) -> List[Post]:
        """Find active posts with optional equality filters, newest first."""
        stmt = select(posts_table).where(posts_table.c.is_active.is_(True))
        if country is not None:
            stmt = stmt.where(posts_table.c.country == country.value)
        if category is not None:
            stmt = stmt.where(posts_table.c.category == category.value)
        stmt = stmt.order_by(*_NEWEST_FIRST)

        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def find_by_user(
        self, user_id: UserId, include_inactive: bool = False
    ) -> List[Post]:
        """Find posts authored by a user, newest first."""
        stmt = select(posts_table).where(posts_table.c.user_id == user_id)
        if not include_inactive:
            stmt = stmt.where(posts_table.c.is_active.is_(True))
        stmt = stmt.order_by(*_NEWEST_FIRST)

        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def find_all(self, include_inactive: bool = True) -> List[Post]:
        """Find every post, newest first."""
        stmt = select(posts_table)
        if not include_inactive:
            stmt = stmt.where(posts_table.c.is_active.is_(True))
        stmt = stmt.order_by(*_NEWEST_FIRST)

        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def save(self, post: Post) -> Post:
        """Save a post's content fields (create or update).

        The like columns are never written here.
        """
        values = post_content_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**values)
                .returning(*posts_table.c)
            )
        else:
            stmt = posts_table.insert().values(**values).returning(*posts_table.c)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_post(dict(row))

    async def set_active(self, post_id: PostId, active: bool) -> Optional[Post]:
        """Set a post's active flag."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(is_active=active)
            .returning(*posts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_post(dict(row)) if row else None

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[LikeState]:
        """Flip membership and adjust the counter in one UPDATE.

        Both CASE branches read the pre-update row, so the set and the counter
        always move together. The row lock taken by UPDATE serializes
        concurrent togglers of the same post.
        """
        user = literal(user_id, type_=UUID)
        was_member = user == any_(posts_table.c.liked_by)

        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.is_active.is_(True))
            .values(
                liked_by=case(
                    (
                        was_member,
                        func.array_remove(
                            posts_table.c.liked_by,
                            user,
                            type_=posts_table.c.liked_by.type,
                        ),
                    ),
                    else_=func.array_append(
                        posts_table.c.liked_by, user, type_=posts_table.c.liked_by.type
                    ),
                ),
                likes=case(
                    (was_member, posts_table.c.likes - 1),
                    else_=posts_table.c.likes + 1,
                ),
            )
            # RETURNING sees the updated row
            .returning(posts_table.c.likes, was_member.label("liked"))
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        if row is None:
            return None
        return LikeState(liked=bool(row["liked"]), likes=row["likes"])

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        result = await self.session.execute(
            delete(posts_table).where(posts_table.c.id == post_id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post authored by a user."""
        result = await self.session.execute(
            delete(posts_table).where(posts_table.c.user_id == user_id)
        )
        await self.session.flush()
        return result.rowcount

    async def remove_likes_by(self, user_id: UserId) -> int:
        """Drop a user from every like set, decrementing each counter."""
        user = literal(user_id, type_=UUID)
        stmt = (
            update(posts_table)
            .where(user == any_(posts_table.c.liked_by))
            .values(
                liked_by=func.array_remove(
                    posts_table.c.liked_by, user, type_=posts_table.c.liked_by.type
                ),
                likes=posts_table.c.likes - 1,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
