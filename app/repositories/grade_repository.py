"""Grade record store"""

from typing import Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.transcript import Grade


class GradeRepository:
    """Persistence for (course, grade) records, addressed by handle"""

    @staticmethod
    async def create(db: AsyncSession, course: str, grade: str) -> UUID:
        """Stage a new grade record and return its handle. Does not commit."""
        record = Grade(course=course, grade=grade)
        db.add(record)
        await db.flush()
        return record.id

    @staticmethod
    async def resolve(db: AsyncSession, handle: UUID) -> Optional[Grade]:
        result = await db.execute(select(Grade).where(Grade.id == handle))
        return result.scalar_one_or_none()
