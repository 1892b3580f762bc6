"""API V1 Router"""

from fastapi import APIRouter

# Import endpoint routers
from app.api.v1.endpoints import students, transcripts

# Create API v1 router
api_router = APIRouter()

# Include endpoint routers with prefixes and tags
api_router.include_router(students.router, prefix="/students", tags=["Students"])
api_router.include_router(transcripts.router, prefix="/transcripts", tags=["Transcripts"])
