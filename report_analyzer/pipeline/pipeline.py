from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from report_analyzer.analysis.models import ContentSignals
from report_analyzer.artifacts.models import ExtractionResult, MediaRoute, SourceArtifact
from report_analyzer.enrichment.models import EnrichedInsight
from report_analyzer.pipeline.models import PipelineStage
from report_analyzer.scoring.models import AnalysisSummary

ProgressReporter = Callable[[PipelineStage, int, str], None]


def _ignore_progress(stage: PipelineStage, percent: int, message: str) -> None:
    _ = stage, percent, message


@dataclass(slots=True)
class PipelineContext:
    run_id: int
    artifact: SourceArtifact | None = None
    route: MediaRoute | None = None
    extraction: ExtractionResult | None = None
    signals: ContentSignals | None = None
    summary: AnalysisSummary | None = None
    insight: EnrichedInsight | None = None
    report_progress: ProgressReporter = _ignore_progress


class PipelineStep(ABC):
    stage: ClassVar[PipelineStage]
    message: ClassVar[str]

    def applies(self, context: PipelineContext) -> bool:
        _ = context
        return True

    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
