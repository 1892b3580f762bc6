from typing import Any, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.core.rate_limit import write_limit
from app.services.transcript_service import TranscriptService
from app.schemas.transcript import StudentCreate
from app.schemas.responses import StudentCreatedResponse, StudentIDsResponse

router = APIRouter()


@router.post("", response_model=StudentCreatedResponse, status_code=status.HTTP_201_CREATED)
@write_limit
async def create_student(
    request: Request,
    student_in: Optional[StudentCreate] = None,
    service: TranscriptService = Depends(deps.get_transcript_service),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Add a student with an empty transcript.
    """
    if student_in is None or not student_in.name:
        raise HTTPException(status_code=400, detail="Student name is required")

    student_id = await service.add_student(db, student_in.name)
    return StudentCreatedResponse(id=student_id, message="Student added successfully")


@router.get("", response_model=StudentIDsResponse)
async def list_students(
    service: TranscriptService = Depends(deps.get_transcript_service),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    List every student id.
    """
    ids = await service.get_all_student_ids(db)
    return StudentIDsResponse(ids=ids)


@router.get("/search", response_model=StudentIDsResponse)
async def search_students(
    name: Optional[str] = Query(None),
    service: TranscriptService = Depends(deps.get_transcript_service),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Ids of students whose name matches exactly.
    """
    if not name:
        raise HTTPException(status_code=400, detail="Student name is required")

    ids = await service.name_to_ids(db, name)
    return StudentIDsResponse(ids=ids)
