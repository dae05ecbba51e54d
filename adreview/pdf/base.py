from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for PRD text extraction adapters."""

    name: str = ""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from an uploaded PRD.

        Args:
            pdf_bytes: Raw PDF upload content.

        Returns:
            Page texts joined by newlines, stripped.

        Raises:
            PdfExtractionError: if the document is malformed or unreadable.
        """
