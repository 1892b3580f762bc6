from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String, Table, Uuid
from sqlalchemy.orm import relationship

from app.models.base import BaseModel

# Column limits, shared with the request schemas
STUDENT_NAME_MAX_LENGTH = 255
COURSE_MAX_LENGTH = 255
GRADE_MAX_LENGTH = 50

# Range of the BIGINT student_id column
STUDENT_ID_MIN = -(2 ** 63)
STUDENT_ID_MAX = 2 ** 63 - 1


# Ordered association Transcript -> Grade handles; the autoincrement id is the append order
transcript_grades = Table(
    "transcript_grades",
    BaseModel.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("transcript_id", Uuid(as_uuid=True), ForeignKey("transcripts.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("grade_id", Uuid(as_uuid=True), ForeignKey("grades.id", ondelete="CASCADE"), nullable=False, unique=True),
)


class Grade(BaseModel):
    """
    A single (course, grade) entry.
    Referenced by exactly one transcript through transcript_grades.
    """
    __tablename__ = "grades"

    course = Column(String(COURSE_MAX_LENGTH), nullable=False)
    grade = Column(String(GRADE_MAX_LENGTH), nullable=False)  # e.g. "A", "B+", "95"

    def __repr__(self) -> str:
        return f"<Grade {self.course}: {self.grade}>"


class Transcript(BaseModel):
    """
    A student and the ordered list of their grade records.
    Created with no grades when the student is added.
    """
    __tablename__ = "transcripts"

    student_id = Column(BigInteger, nullable=False, unique=True, index=True)
    student_name = Column(String(STUDENT_NAME_MAX_LENGTH), nullable=False, index=True)

    # Relationships
    grades = relationship(
        "Grade",
        secondary=transcript_grades,
        order_by=transcript_grades.c.id,
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Transcript {self.student_id} {self.student_name}>"
