"""Standardized API Response Schemas"""

from typing import List
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """
    Acknowledgement for a write.

    Example:
        {"message": "Grade added successfully"}
    """
    message: str


class StudentCreatedResponse(MessageResponse):
    """
    Returned by POST /students.

    Example:
        {"id": 3, "message": "Student added successfully"}
    """
    id: int


class StudentIDsResponse(BaseModel):
    """
    List of student ids.

    Example:
        {"ids": [0, 1, 2]}
    """
    ids: List[int]


class ErrorResponse(BaseModel):
    """
    Error envelope used by every failing response.

    Example:
        {"error": "Student not found"}
    """
    error: str
