"""
Transcript Upload Models
"""

from pydantic import BaseModel, Field


class TranscriptResponse(BaseModel):
    """Decoded text of an uploaded transcript file."""
    text: str = Field(
        ...,
        description="File content decoded as text"
    )
