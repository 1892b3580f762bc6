from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.transcript import COURSE_MAX_LENGTH, GRADE_MAX_LENGTH, STUDENT_NAME_MAX_LENGTH


class StudentCreate(BaseModel):
    # Presence is checked by the endpoint so it can answer with its own message
    name: Optional[str] = Field(None, max_length=STUDENT_NAME_MAX_LENGTH)


class GradeCreate(BaseModel):
    course: Optional[str] = Field(None, max_length=COURSE_MAX_LENGTH)
    grade: Optional[str] = Field(None, max_length=GRADE_MAX_LENGTH)

    @field_validator("grade", mode="before")
    @classmethod
    def numeric_grade_as_text(cls, v: Union[str, int, float, None]) -> Optional[str]:
        """Grades are stored as text; numeric scores keep their literal form."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class GradeOut(BaseModel):
    """A populated grade entry, without its record handle"""
    model_config = ConfigDict(from_attributes=True)

    course: str
    grade: str


class TranscriptOut(BaseModel):
    """
    Public view of a transcript.

    Serialized with camelCase keys:
        {"studentId": 0, "studentName": "Ada", "grades": [{"course": "Math 101", "grade": "A"}]}
    """
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    student_id: int
    student_name: str
    grades: List[GradeOut] = []
