"""
Summarization API Routes

Turns a transcript and instruction into a structured meeting summary.
"""

import logging

from fastapi import APIRouter, Depends

from api.models.summaries import SummarizeRequest, SummarizeResponse
from api.services.recap_services import get_summarization_gateway
from recap.summarization import SummarizationGateway

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["Summaries"])


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    summary="Generate a structured meeting summary"
)
async def summarize_transcript(
    request: SummarizeRequest,
    gateway: SummarizationGateway = Depends(get_summarization_gateway)
):
    """
    Summarize a transcript following a free-text instruction.

    The response always contains all five fields. Validation, configuration
    and provider failures are raised as service errors and rendered by the
    registered exception handlers.
    """
    fields = await gateway.summarize(request.text, request.instruction)
    return SummarizeResponse.from_fields(fields)
