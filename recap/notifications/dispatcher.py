"""
NotificationDispatcher: Outbound Summary Email Service

Validates a recipient list and subject, then sends a single message to all
recipients through an authenticated SMTP session.

Design Considerations:
- Every invalid recipient reported at once, before any network I/O
- Fresh SMTP connection and login per request, no pooling
- Credentials checked per call so misconfiguration surfaces as an API error
- Transport failures reported with the underlying error description
"""

import asyncio
import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import make_msgid, parseaddr
from typing import List, Optional, Sequence

from recap.errors import BadRequest, ConfigError, TransportError
from .validation import find_invalid_recipients

logger = logging.getLogger(__name__)

APP_PASSWORD_LENGTH = 16
DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 587


@dataclass
class MailCredentials:
    """Mail account used to authenticate and address outgoing messages."""
    user: Optional[str] = None
    app_password: Optional[str] = None
    from_address: Optional[str] = None

    def validate(self) -> None:
        """
        Check that the credentials are usable.

        Raises:
            ConfigError: If any value is missing or the app password is not
                exactly sixteen characters once spaces are removed
        """
        if not self.user or not self.app_password or not self.from_address:
            raise ConfigError("Missing Gmail environment variables")
        if len(self.app_password.replace(" ", "")) != APP_PASSWORD_LENGTH:
            raise ConfigError(f"App password must be {APP_PASSWORD_LENGTH} characters (no spaces)")


class NotificationDispatcher:
    """Sends summary emails over SMTP with STARTTLS."""

    def __init__(self, credentials: MailCredentials, host: str = DEFAULT_SMTP_HOST,
                 port: int = DEFAULT_SMTP_PORT, timeout: Optional[float] = None):
        self.credentials = credentials
        self.host = host
        self.port = port
        self.timeout = timeout

    @staticmethod
    def validate_request(recipients: Optional[Sequence[str]], subject: Optional[str]) -> List[str]:
        """
        Validate recipients and subject.

        Returns:
            Recipients with duplicates removed, in input order

        Raises:
            BadRequest: If recipients are empty, the subject is blank or spans
                several lines, or any recipient address is malformed
        """
        if not recipients or not subject or not subject.strip():
            raise BadRequest("Missing recipients or subject")
        if "\r" in subject or "\n" in subject:
            raise BadRequest("Subject must be a single line")

        invalid = find_invalid_recipients(recipients)
        if invalid:
            raise BadRequest(
                f"Invalid recipient(s): {', '.join(invalid)}",
                details={"invalid_recipients": invalid},
            )
        return list(dict.fromkeys(recipients))

    def build_message(self, recipients: List[str], subject: str,
                      text: Optional[str] = None, html: Optional[str] = None) -> EmailMessage:
        """Compose one message addressed to every recipient."""
        message = EmailMessage()
        message["From"] = self.credentials.from_address
        message["To"] = ", ".join(recipients)
        message["Subject"] = subject

        sender_domain = parseaddr(self.credentials.from_address)[1].rpartition("@")[2] or None
        message["Message-ID"] = make_msgid(domain=sender_domain)

        if text:
            message.set_content(text)
            if html:
                message.add_alternative(html, subtype="html")
        elif html:
            message.set_content(html, subtype="html")
        else:
            message.set_content("")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        password = self.credentials.app_password.replace(" ", "")
        kwargs = {"timeout": self.timeout} if self.timeout else {}
        with smtplib.SMTP(self.host, self.port, **kwargs) as smtp:
            smtp.starttls(context=ssl.create_default_context())
            smtp.login(self.credentials.user, password)
            smtp.send_message(message)

    async def send(self, recipients: Optional[Sequence[str]], subject: Optional[str],
                   text: Optional[str] = None, html: Optional[str] = None) -> str:
        """
        Validate and send a summary email.

        Args:
            recipients: Recipient addresses
            subject: Message subject
            text: Optional plain-text body
            html: Optional HTML body

        Returns:
            Message identifier of the sent email

        Raises:
            BadRequest: For invalid caller input
            ConfigError: For missing or invalid mail credentials
            TransportError: If the SMTP session or send fails
        """
        addresses = self.validate_request(recipients, subject)
        self.credentials.validate()

        message = self.build_message(addresses, subject, text=text, html=html)
        message_id = str(message["Message-ID"])

        try:
            await asyncio.to_thread(self._deliver, message)
        except Exception as e:
            logger.error(f"Email error: {e}")
            raise TransportError(str(e) or "Failed to send email") from e

        logger.info(f"Sent email {message_id} to {len(addresses)} recipient(s)")
        return message_id
