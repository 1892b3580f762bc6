"""Transcript record store"""

from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID
from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.transcript import STUDENT_ID_MAX, STUDENT_ID_MIN, Transcript, transcript_grades


def _storable(student_id: int) -> bool:
    """Ids outside the column range cannot match any stored transcript"""
    return STUDENT_ID_MIN <= student_id <= STUDENT_ID_MAX


class TranscriptRepository:
    """Persistence for transcripts and their ordered grade handles"""

    @staticmethod
    async def create(db: AsyncSession, student_id: int, student_name: str) -> UUID:
        """Stage a transcript with no grades and return its handle. Does not commit."""
        transcript = Transcript(student_id=student_id, student_name=student_name)
        db.add(transcript)
        await db.flush()
        return transcript.id

    @staticmethod
    async def find_by_student_id(
        db: AsyncSession,
        student_id: int,
        populate: bool = False,
    ) -> Optional[Transcript]:
        """
        Look up a transcript by student id.

        Args:
            db: Database session
            student_id: Numeric student id
            populate: Eagerly resolve grade handles into Grade records,
                in append order

        Returns:
            The transcript, or None when the id is unknown
        """
        if not _storable(student_id):
            return None

        stmt = select(Transcript).where(Transcript.student_id == student_id)
        if populate:
            stmt = stmt.options(selectinload(Transcript.grades)).execution_options(
                populate_existing=True
            )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def find_by_name(db: AsyncSession, name: str) -> List[Transcript]:
        """Transcripts whose student name equals `name` exactly"""
        result = await db.execute(
            select(Transcript).where(Transcript.student_name == name)
        )
        return list(result.scalars().all())

    @staticmethod
    async def find_all(db: AsyncSession, fields: Sequence[str]) -> List[Dict[str, Any]]:
        """
        Fetch every transcript, selecting only the named columns.

        Raises:
            AttributeError: If a field is not a Transcript column
        """
        columns = [getattr(Transcript, field) for field in fields]
        result = await db.execute(select(*columns))
        return [dict(row) for row in result.mappings().all()]

    @staticmethod
    async def find_max_student_id(db: AsyncSession) -> Optional[int]:
        result = await db.execute(select(func.max(Transcript.student_id)))
        return result.scalar_one_or_none()

    @staticmethod
    async def append_grade_handle(db: AsyncSession, student_id: int, handle: UUID) -> bool:
        """
        Append a grade handle at the end of a transcript's list. Does not commit.

        Returns:
            False if no transcript exists for `student_id`
        """
        if not _storable(student_id):
            return False

        result = await db.execute(
            select(Transcript.id).where(Transcript.student_id == student_id)
        )
        transcript_id = result.scalar_one_or_none()
        if transcript_id is None:
            return False

        # Append order is the autoincrement id of the association row
        await db.execute(
            insert(transcript_grades).values(
                transcript_id=transcript_id,
                grade_id=handle,
            )
        )
        return True
