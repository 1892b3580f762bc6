"""Transcript Service - Business Logic Layer"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.core.exceptions import CourseNotFoundError, UnknownIDError
from app.repositories.grade_repository import GradeRepository
from app.repositories.transcript_repository import TranscriptRepository
from app.schemas.transcript import TranscriptOut

logger = logging.getLogger(__name__)


class TranscriptService:
    """
    Service layer for students, transcripts and grades.

    Owns the sequential student id allocator. The counter lives in memory
    and is derived from the highest stored student id, so only one service
    instance may allocate ids against a given database.
    """

    def __init__(self) -> None:
        self._last_id: Optional[int] = None

    @property
    def is_initialized(self) -> bool:
        return self._last_id is not None

    async def initialize(self, db: AsyncSession) -> None:
        """Seed the id allocator from the highest stored student id."""
        highest = await TranscriptRepository.find_max_student_id(db)
        self._last_id = 0 if highest is None else highest + 1
        logger.info("Student id allocator initialized", extra={"next_student_id": self._last_id})

    async def _allocate_id(self, db: AsyncSession) -> int:
        if self._last_id is None:
            await self.initialize(db)
        new_id = self._last_id
        self._last_id += 1
        return new_id

    async def add_student(self, db: AsyncSession, name: str) -> int:
        """
        Create a transcript with no grades for a new student.

        Names need not be unique; only the returned student id is.

        Returns:
            The allocated student id
        """
        student_id = await self._allocate_id(db)
        await TranscriptRepository.create(db, student_id, name)
        await db.commit()

        logger.info("Student added", extra={"student_id": student_id})
        return student_id

    async def get_all_student_ids(self, db: AsyncSession) -> List[int]:
        rows = await TranscriptRepository.find_all(db, fields=("student_id",))
        return [row["student_id"] for row in rows]

    async def name_to_ids(self, db: AsyncSession, name: str) -> List[int]:
        """Ids of every student whose name matches exactly (case-sensitive)."""
        transcripts = await TranscriptRepository.find_by_name(db, name)
        return [t.student_id for t in transcripts]

    async def get_transcript(self, db: AsyncSession, student_id: int) -> TranscriptOut:
        """
        Fetch a transcript with its grades resolved in append order.

        Raises:
            UnknownIDError: If no student has this id
        """
        transcript = await TranscriptRepository.find_by_student_id(db, student_id, populate=True)
        if transcript is None:
            raise UnknownIDError(student_id)

        return TranscriptOut.model_validate(transcript)

    async def add_grade(self, db: AsyncSession, student_id: int, course: str, grade: str) -> None:
        """
        Record a grade and append it to the student's transcript.

        Both writes are committed in a single transaction.

        Raises:
            UnknownIDError: If no student has this id
        """
        transcript = await TranscriptRepository.find_by_student_id(db, student_id)
        if transcript is None:
            raise UnknownIDError(student_id)

        try:
            handle = await GradeRepository.create(db, course, grade)
            appended = await TranscriptRepository.append_grade_handle(db, student_id, handle)
            if not appended:
                # Transcript disappeared between the lookup and the append
                raise UnknownIDError(student_id)
            await db.commit()
        except Exception:
            # Discard the staged grade so no orphan is left behind
            await db.rollback()
            raise

        logger.info("Grade added", extra={"student_id": student_id, "course": course})

    async def get_grade(self, db: AsyncSession, student_id: int, course: str) -> str:
        """
        Grade for one course on a student's transcript.

        Raises:
            UnknownIDError: If no student has this id
            CourseNotFoundError: If the course is not on the transcript
        """
        transcript = await self.get_transcript(db, student_id)

        for entry in transcript.grades:
            if entry.course == course:
                return entry.grade

        raise CourseNotFoundError(student_id, course)
