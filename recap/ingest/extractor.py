"""
Transcript ingestion.

Turns an uploaded file into its textual content. The bytes are decoded as
UTF-8 and returned verbatim; no parsing or normalisation takes place, so the
same upload always yields the same text.
"""

import codecs
import logging
from typing import Optional

from recap.errors import BadRequest, InternalError

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 1024 * 1024


class TranscriptIngestor:
    """
    Decodes uploaded transcript files.

    Only the size of the upload is enforced server-side. The file type is
    advisory: any upload that decodes as UTF-8 is accepted.
    """

    def __init__(self, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES, encoding: str = "utf-8"):
        self.max_bytes = max_bytes
        self.encoding = encoding

    @property
    def read_limit(self) -> int:
        """Bytes to read from an upload; one past the limit marks it as oversize."""
        return self.max_bytes + 1

    def extract_text(self, content: Optional[bytes], filename: Optional[str] = None) -> str:
        """
        Decode uploaded file content into text.

        Args:
            content: Raw bytes of the uploaded file, None when no file was sent
            filename: Client supplied file name, used for logging only

        Returns:
            Decoded text content

        Raises:
            BadRequest: If no file was supplied or it exceeds the size limit
            InternalError: If the content cannot be decoded
        """
        if content is None:
            raise BadRequest("No file")

        if len(content) > self.max_bytes:
            raise BadRequest(
                f"File too large: more than {self.max_bytes} bytes",
                details={"limit": self.max_bytes},
            )

        if content.startswith(codecs.BOM_UTF8):
            content = content[len(codecs.BOM_UTF8):]

        try:
            text = content.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.warning(f"Failed to decode upload {filename or '<unnamed>'}: {e}")
            raise InternalError("Upload failed", details={"reason": str(e)}) from e

        logger.info(f"Extracted {len(text)} characters from {filename or '<unnamed>'}")
        return text
