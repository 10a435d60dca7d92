"""Document text extraction."""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

PDF_TEXT = "PDF document content extracted - University Certificate of Achievement"
IMAGE_TEXT = "Image document content extracted - Degree Certificate from University"
OTHER_TEXT = "Document content extracted - Professional Certification"


class TextExtractor(ABC):
    """Turns an uploaded file into plain text for classification."""

    @abstractmethod
    async def extract(self, content: bytes, mime_type: str) -> str:
        """
        Extract text from a document.

        Args:
            content: Raw file bytes
            mime_type: Declared MIME type of the upload

        Returns:
            Plain-text representation of the document
        """


class MockDocumentExtractor(TextExtractor):
    """
    Placeholder extractor that never inspects the file content.

    Returns one of three fixed strings chosen by MIME bucket (pdf, image,
    anything else). Swap in a real Document AI backend by implementing
    ``TextExtractor``; the classifier only sees the returned text.
    """

    async def extract(self, content: bytes, mime_type: str) -> str:
        mime = (mime_type or "").lower()
        logger.info("Analyzing document of type: %s", mime or "<unknown>")

        if "pdf" in mime:
            return PDF_TEXT
        if "image" in mime:
            return IMAGE_TEXT
        return OTHER_TEXT
