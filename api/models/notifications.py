"""
Email Notification Models

Defines request and response structures for sending summary emails.

Design Considerations:
- Recipient syntax checked by the dispatcher so every invalid
  address can be reported in one response
- Response field names follow the public wire format (``messageId``)
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class EmailRequest(BaseModel):
    """
    Request model for sending a summary email.
    """
    to: List[str] = Field(
        default_factory=list,
        description="Recipient addresses"
    )
    subject: Optional[str] = Field(
        default=None,
        description="Email subject line"
    )
    html: Optional[str] = Field(
        default=None,
        description="HTML email body"
    )
    text: Optional[str] = Field(
        default=None,
        description="Plain-text email body"
    )


class EmailResponse(BaseModel):
    """
    Result of a successful send.
    """
    success: bool = Field(
        default=True,
        description="Whether the message was accepted by the transport"
    )
    messageId: str = Field(
        ...,
        description="Message identifier assigned to the sent email"
    )
