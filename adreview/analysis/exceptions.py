class AnalysisError(Exception):
    """Raised when an analysis stage fails."""


class AnalysisResponseError(AnalysisError):
    """Raised when the AI provider returns an empty or malformed response."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
