"""Domain exceptions raised by the service layer"""


class TranscriptServiceError(Exception):
    """Base class for transcript service failures"""


class UnknownIDError(TranscriptServiceError):
    """No transcript exists for the requested student id"""

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__("unknown ID")


class CourseNotFoundError(TranscriptServiceError):
    """The requested course is not on the student's transcript"""

    def __init__(self, student_id: int, course: str):
        self.student_id = student_id
        self.course = course
        super().__init__("course not found in transcript")
