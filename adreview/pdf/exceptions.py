class PdfExtractionError(Exception):
    """Raised when a PRD document cannot be parsed as PDF text."""
