"""
Transcript Upload API Routes

Accepts a transcript file as multipart form data and returns its text.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from api.models.transcripts import TranscriptResponse
from api.services.recap_services import get_transcript_ingestor
from recap.errors import InternalError, RecapError
from recap.ingest import TranscriptIngestor

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["Transcripts"])


@router.post(
    "/upload",
    response_model=TranscriptResponse,
    summary="Extract text from an uploaded transcript"
)
async def upload_transcript(
    file: Optional[UploadFile] = File(default=None, description="Transcript text file"),
    ingestor: TranscriptIngestor = Depends(get_transcript_ingestor)
):
    """
    Return the decoded text content of an uploaded transcript file.

    Args:
        file: Uploaded file from the ``file`` form field

    Returns:
        Transcript text
    """
    try:
        content = await file.read(ingestor.read_limit) if file is not None else None
        text = ingestor.extract_text(content, filename=file.filename if file is not None else None)
    except RecapError:
        raise
    except Exception as e:
        logger.error(f"Error reading upload: {str(e)}")
        raise InternalError("Upload failed") from e
    finally:
        if file is not None:
            await file.close()

    return TranscriptResponse(text=text)
