"""
Email Notification API Routes

Sends an edited summary to a list of recipients.
"""

import logging

from fastapi import APIRouter, Depends

from api.models.notifications import EmailRequest, EmailResponse
from api.services.recap_services import get_notification_dispatcher
from recap.notifications import NotificationDispatcher

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["Notifications"])


@router.post(
    "/email",
    response_model=EmailResponse,
    summary="Email a summary to recipients"
)
async def send_summary_email(
    request: EmailRequest,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher)
):
    """
    Send one email addressed to every recipient.

    Args:
        request: Recipients, subject and optional text and HTML bodies

    Returns:
        Success flag and the message identifier
    """
    message_id = await dispatcher.send(
        request.to,
        request.subject,
        text=request.text or None,
        html=request.html or None,
    )
    return EmailResponse(success=True, messageId=message_id)
