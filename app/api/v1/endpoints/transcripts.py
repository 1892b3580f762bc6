from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.exceptions import UnknownIDError
from app.core.rate_limit import write_limit
from app.services.transcript_service import TranscriptService
from app.schemas.transcript import GradeCreate, TranscriptOut
from app.schemas.responses import MessageResponse

router = APIRouter()


def _parse_student_id(raw: str, detail: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=detail)


@router.get("/{student_id}", response_model=TranscriptOut)
async def get_transcript(
    student_id: str,
    service: TranscriptService = Depends(deps.get_transcript_service),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Student transcript with populated grades.
    """
    sid = _parse_student_id(student_id, "Invalid ID format")

    try:
        return await service.get_transcript(db, sid)
    except UnknownIDError:
        raise HTTPException(status_code=404, detail="Student not found")


@router.post("/{student_id}/grades", response_model=MessageResponse)
@write_limit
async def add_grade(
    request: Request,
    student_id: str,
    grade_in: GradeCreate,
    service: TranscriptService = Depends(deps.get_transcript_service),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Append a grade to a student's transcript.
    """
    sid = _parse_student_id(student_id, "Invalid request parameters")
    if not grade_in.course or not grade_in.grade:
        raise HTTPException(status_code=400, detail="Invalid request parameters")

    try:
        await service.add_grade(db, sid, grade_in.course, grade_in.grade)
    except UnknownIDError:
        raise HTTPException(status_code=404, detail="Student not found")

    return MessageResponse(message="Grade added successfully")
