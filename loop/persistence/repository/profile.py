"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from loop.domain.model import Profile
from loop.domain.repository import ProfileRepository
from loop.domain.value import UserId, Username
from loop.persistence.mappers import profile_to_dict, row_to_profile
from loop.persistence.tables import profiles_table
from loop.persistence.text_search import contains_pattern


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find several profiles (batch query)."""
        if not user_ids:
            return []

        stmt = select(profiles_table).where(profiles_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        stmt = select(profiles_table).where(profiles_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile."""
        values = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in ("id", "created_at")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return profile

    async def search(
        self, query: str, limit: int = 20, offset: int = 0
    ) -> List[Profile]:
        """Substring search over username, display name and bio."""
        pattern = contains_pattern(query)
        stmt = (
            select(profiles_table)
            .where(
                or_(
                    profiles_table.c.username.ilike(pattern, escape="\\"),
                    profiles_table.c.display_name.ilike(pattern, escape="\\"),
                    profiles_table.c.bio.ilike(pattern, escape="\\"),
                )
            )
            .order_by(profiles_table.c.username)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]
