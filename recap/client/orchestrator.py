"""
ClientOrchestrator: Upload, Summarize, Edit and Email Workflow

Drives the Meeting Recap API on behalf of a user and keeps the interaction
state a front end renders: transcript, instruction, editable summary
sections, recipients, per-action busy flags and transient notices.

Design Considerations:
- Each action family moves idle -> busy -> idle independently
- A newer summarization supersedes an older one; the stale response is
  dropped without a notice, while the server-side call still completes
- A second email send while one is in flight is ignored
- Every failure becomes a notice; nothing blocks a retry
"""

import asyncio
import logging
from enum import Enum
from typing import Dict, List, Optional

from recap.notifications.validation import is_email
from recap.summarization.models import SummaryFields
from .api_client import RecapAPIClient, RecapAPIError
from .composer import (
    DEFAULT_SUBJECT,
    SECTION_TITLES,
    compose_html,
    compose_text,
    parse_recipients,
    sections_from_summary,
)
from .notices import NoticeBoard

logger = logging.getLogger(__name__)

DEFAULT_INSTRUCTION = "Summarize in bullet points for executives."


class ActionState(str, Enum):
    """Busy state of one action family."""
    IDLE = "idle"
    UPLOADING = "uploading"
    SUMMARIZING = "summarizing"
    EMAILING = "emailing"


class ClientOrchestrator:
    """Stateful front-end controller for the Meeting Recap API."""

    def __init__(self, api: RecapAPIClient, notices: Optional[NoticeBoard] = None,
                 instruction: str = DEFAULT_INSTRUCTION):
        self.api = api
        self.notices = notices or NoticeBoard()
        self.transcript = ""
        self.instruction = instruction
        self.recipients = ""
        self.sections: Dict[str, str] = {key: "" for key, _ in SECTION_TITLES}

        self.upload_state = ActionState.IDLE
        self.summarize_state = ActionState.IDLE
        self.email_state = ActionState.IDLE

        self._summarize_task: Optional[asyncio.Task] = None
        self._summarize_generation = 0

    def notify(self, message: str) -> None:
        self.notices.notify(message)

    @property
    def can_summarize(self) -> bool:
        return bool(self.transcript.strip())

    def edit(self, section: str, value: str) -> None:
        """Replace the text of one editable summary section."""
        if section not in self.sections:
            raise KeyError(f"Unknown section: {section}")
        self.sections[section] = value

    async def upload(self, filename: Optional[str], content: Optional[bytes]) -> bool:
        """
        Upload a transcript file and load its text.

        Returns:
            True when the transcript was replaced
        """
        if content is None:
            self.notify("Select a .txt file to upload")
            return False

        self.upload_state = ActionState.UPLOADING
        try:
            text = await self.api.upload(filename or "transcript.txt", content)
        except RecapAPIError as e:
            if e.error:
                self.notify(f"Upload failed: {e.error}")
            else:
                self.notify(f"Upload failed ({e.status})")
            return False
        except Exception as e:
            logger.error(f"Upload request error: {e}")
            self.notify(f"Upload error: {str(e) or 'Unknown error'}")
            return False
        finally:
            self.upload_state = ActionState.IDLE

        self.transcript = text
        self.notify("Transcript loaded")
        return True

    async def summarize(self) -> Optional[SummaryFields]:
        """
        Request a summary of the current transcript.

        Starting a new summarization cancels the one in flight. Only the
        latest request may update the sections or post a notice.

        Returns:
            The applied summary, or None if it failed or was superseded
        """
        if not self.can_summarize:
            self.notify("Please upload or paste a transcript first.")
            return None

        self._summarize_generation += 1
        generation = self._summarize_generation
        previous = self._summarize_task
        if previous is not None and not previous.done():
            logger.debug("Discarding in-flight summarization in favour of a new request")
            previous.cancel()

        task = asyncio.ensure_future(self.api.summarize(self.transcript, self.instruction))
        self._summarize_task = task
        self.summarize_state = ActionState.SUMMARIZING

        try:
            result = await task
        except asyncio.CancelledError:
            if task.cancelled() and generation != self._summarize_generation:
                return None
            raise
        except RecapAPIError as e:
            if generation == self._summarize_generation:
                self.notify(f"Summarize failed: {e.error}" if e.error else f"Summarize failed ({e.status})")
            return None
        except Exception as e:
            if generation == self._summarize_generation:
                logger.error(f"Summarize request error: {e}")
                self.notify(str(e) or "Error generating summary")
            return None
        finally:
            if generation == self._summarize_generation:
                self.summarize_state = ActionState.IDLE
                self._summarize_task = None

        if generation != self._summarize_generation:
            return None

        self.sections = sections_from_summary(result)
        self.notify("Summary generated")
        return result

    def build_email(self) -> Dict[str, str]:
        """Subject plus text and HTML bodies for the current sections."""
        return {
            "subject": DEFAULT_SUBJECT,
            "text": compose_text(self.sections),
            "html": compose_html(self.sections),
        }

    async def send_email(self) -> Optional[str]:
        """
        Email the current sections to the entered recipients.

        Returns:
            Message id on success, otherwise None
        """
        if self.email_state is ActionState.EMAILING:
            return None

        recipients: List[str] = parse_recipients(self.recipients)
        if not recipients:
            self.notify("Enter at least one recipient email")
            return None
        if not all(is_email(r) for r in recipients):
            self.notify("One or more recipient emails are invalid")
            return None

        self.email_state = ActionState.EMAILING
        email = self.build_email()
        try:
            message_id = await self.api.send_email(
                recipients, email["subject"], text=email["text"], html=email["html"]
            )
        except RecapAPIError as e:
            message = f"Email failed ({e.status})"
            if e.error:
                message += f": {e.error}"
            self.notify(message)
            return None
        except Exception as e:
            logger.error(f"Email request error: {e}")
            self.notify(f"Email request error: {str(e) or 'Unknown error'}")
            return None
        finally:
            self.email_state = ActionState.IDLE

        self.notify("Email sent")
        return message_id
