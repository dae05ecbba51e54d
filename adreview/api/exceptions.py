class RequestParsingError(ValueError):
    """Raised when a request body or form field cannot be decoded."""
