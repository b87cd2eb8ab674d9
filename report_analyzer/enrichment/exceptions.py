class EnrichmentError(Exception):
    """Raised when AI enrichment fails."""


class EnrichmentNetworkError(EnrichmentError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
