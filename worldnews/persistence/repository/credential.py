"""PostgreSQL implementation of Credential repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from worldnews.domain.model import Credential
from worldnews.domain.repository import CredentialRepository
from worldnews.domain.value import Contact, UserId
from worldnews.persistence.mappers import credential_to_dict, row_to_credential
from worldnews.persistence.tables import credentials_table


class PostgresCredentialRepository(CredentialRepository):
    """PostgreSQL implementation of CredentialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_contact(self, contact: Contact) -> Optional[Credential]:
        """Find the credential registered for a contact."""
        stmt = (
            select(credentials_table)
            .where(credentials_table.c.contact_type == contact.type.value)
            .where(credentials_table.c.contact == contact.value)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_credential(dict(row)) if row else None

    async def find_all_by_user_id(self, user_id: UserId) -> List[Credential]:
        """Get all credentials of a user."""
        stmt = select(credentials_table).where(credentials_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_credential(dict(row)) for row in result.mappings()]

    async def save(self, credential: Credential) -> Credential:
        """Save a credential (create or update)."""
        stmt = select(credentials_table.c.id).where(
            credentials_table.c.id == credential.id
        )
        exists = (await self.session.execute(stmt)).first() is not None

        values = credential_to_dict(credential)
        if exists:
            await self.session.execute(
                credentials_table.update()
                .where(credentials_table.c.id == credential.id)
                .values(**values)
            )
        else:
            await self.session.execute(credentials_table.insert().values(**values))

        await self.session.flush()
        return credential

    async def touch_login(self, credential: Credential, at: datetime) -> None:
        """Record a successful sign-in."""
        await self.session.execute(
            credentials_table.update()
            .where(credentials_table.c.id == credential.id)
            .values(last_login_at=at)
        )
        await self.session.flush()

    async def delete_by_user_id(self, user_id: UserId) -> int:
        """Remove every credential of a user."""
        result = await self.session.execute(
            delete(credentials_table).where(credentials_table.c.user_id == user_id)
        )
        await self.session.flush()
        return result.rowcount
