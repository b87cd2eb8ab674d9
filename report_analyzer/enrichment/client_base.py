from abc import ABC, abstractmethod

from report_analyzer.enrichment.models import EnrichmentRequest


class BaseEnrichmentClient(ABC):
    """A provider that answers an EnrichmentRequest with raw JSON text."""

    @abstractmethod
    def complete(self, request: EnrichmentRequest) -> str:
        """Send *request* and return the response body.

        Raises:
            EnrichmentNetworkError: if the provider could not be reached.
            EnrichmentError: if the provider answered without usable content.
        """
