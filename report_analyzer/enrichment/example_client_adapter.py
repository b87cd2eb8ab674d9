"""Offline enrichment client.

Used with ``ENRICHMENT_PROVIDER=example`` for local runs and tests. New
providers implement ``BaseEnrichmentClient.complete`` and are registered in
``EnricherFactory``.
"""

import json
from typing import ClassVar

from report_analyzer.enrichment.client_base import BaseEnrichmentClient
from report_analyzer.enrichment.models import EnrichmentRequest


class ExampleClientAdapter(BaseEnrichmentClient):
    """Answers every request with the same schema-valid insight."""

    CANNED_INSIGHT: ClassVar[dict[str, object]] = {
        "narrative": (
            "The report shows limited search performance data. "
            "Visibility metrics should be tracked over a longer period "
            "before drawing conclusions."
        ),
        "recommendations": [
            "Track organic traffic and rankings monthly to establish a baseline.",
            "Add a short executive summary with the three most important metrics.",
        ],
    }

    def complete(self, request: EnrichmentRequest) -> str:
        return json.dumps(self.CANNED_INSIGHT)
