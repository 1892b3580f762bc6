"""Models Package - Export all models for easy imports"""

from app.models.base import BaseModel
from app.models.transcript import Grade, Transcript, transcript_grades


__all__ = [
    # Base classes
    "BaseModel",

    # Transcripts
    "Grade",
    "Transcript",
    "transcript_grades",
]
