from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.profile import Profile
from app.repositories.base import persistence_guard


class ProfileRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: int) -> Optional[Profile]:
        async with persistence_guard(self.db, "get profile"):
            result = await self.db.execute(select(Profile).where(Profile.id == user_id))
            return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Profile]:
        async with persistence_guard(self.db, "get profile by email"):
            result = await self.db.execute(select(Profile).where(Profile.email == email))
            return result.scalar_one_or_none()

    async def create_profile(self, profile: Profile) -> Profile:
        async with persistence_guard(self.db, "create profile"):
            self.db.add(profile)
            await self.db.commit()
            await self.db.refresh(profile)
            return profile
