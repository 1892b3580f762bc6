"""API Dependencies"""

from fastapi import Request

from app.database import get_db
from app.services.transcript_service import TranscriptService

__all__ = ["get_db", "get_transcript_service"]


def get_transcript_service(request: Request) -> TranscriptService:
    """
    Get the application's transcript service.

    A single instance is shared by all requests because it holds the
    student id allocator.
    """
    return request.app.state.transcript_service
