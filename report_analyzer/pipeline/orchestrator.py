"""Async state machine that drives one artifact through the analysis pipeline."""

from report_analyzer.analysis.analyzer import ContentAnalyzer
from report_analyzer.artifacts.classifier import ArtifactClassifier
from report_analyzer.artifacts.models import SourceArtifact
from report_analyzer.config.settings import Settings
from report_analyzer.enrichment.factory import EnricherFactory
from report_analyzer.logging.logger import Log
from report_analyzer.ocr.factory import OcrExtractorFactory
from report_analyzer.pdf.factory import PdfExtractorFactory
from report_analyzer.pipeline.models import (
    STAGE_PERCENT,
    PipelineProgress,
    PipelineResult,
    PipelineStage,
)
from report_analyzer.pipeline.pipeline import PipelineContext, PipelineStep
from report_analyzer.pipeline.progress import ProgressChannel
from report_analyzer.pipeline.steps import (
    AnalyzeStep,
    ClassifyStep,
    EnrichStep,
    ExtractStep,
    ScoreStep,
)
from report_analyzer.scoring.engine import ScoringEngine


class Orchestrator:
    """Runs the pipeline steps in order and publishes progress for each one.

    Pipeline: classify -> extract -> analyze -> score -> (enrich).
    Starting a new run or calling ``reset`` makes the previous run stale: its
    progress is dropped and its result is not kept as ``latest_result``.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        channel: ProgressChannel | None = None,
    ) -> None:
        self._steps = steps
        self._channel = channel or ProgressChannel()
        self._run_counter = 0
        self._latest_result: PipelineResult | None = None

    @property
    def channel(self) -> ProgressChannel:
        return self._channel

    @property
    def latest_result(self) -> PipelineResult | None:
        return self._latest_result

    async def run(self, artifact: SourceArtifact | None) -> PipelineResult:
        """Analyze *artifact*.

        Raises:
            NoFileError: if *artifact* is None.
            UnsupportedTypeError: if the media type is not allow-listed.
            OcrFailureError: if an image could not be read.
        """
        run_id = self._start_run()
        context = PipelineContext(
            run_id=run_id,
            artifact=artifact,
            report_progress=lambda stage, percent, message: self._publish(
                run_id, stage, percent, message
            ),
        )
        Log.info(f"Run {run_id} started", artifact=artifact.name if artifact else None)

        try:
            for step in self._steps:
                if not step.applies(context):
                    continue
                self._publish(run_id, step.stage, STAGE_PERCENT[step.stage], step.message)
                context = await step.run(context)
        except Exception as exc:
            Log.error(f"Run {run_id} failed: {exc}")
            latest = self._channel.latest
            self._publish(run_id, PipelineStage.FAILED, latest.percent if latest else 0, str(exc))
            raise

        result = self._build_result(context)
        if run_id == self._run_counter:
            self._latest_result = result
        else:
            Log.info(f"Run {run_id} finished after being superseded; result not kept")
        self._publish(
            run_id,
            PipelineStage.COMPLETE,
            STAGE_PERCENT[PipelineStage.COMPLETE],
            "Analysis complete",
        )
        return result

    def reset(self) -> None:
        """Forget the latest result and invalidate any in-flight run."""
        run_id = self._start_run()
        self._latest_result = None
        self._publish(run_id, PipelineStage.IDLE, STAGE_PERCENT[PipelineStage.IDLE], "Ready")

    def _start_run(self) -> int:
        self._run_counter += 1
        self._channel.begin_run(self._run_counter)
        return self._run_counter

    def _publish(self, run_id: int, stage: PipelineStage, percent: int, message: str) -> None:
        delivered = self._channel.publish(
            PipelineProgress(stage=stage, percent=percent, message=message, run_id=run_id)
        )
        if delivered:
            Log.debug(f"Run {run_id}: {stage.value} {percent}% {message}")

    @staticmethod
    def _build_result(context: PipelineContext) -> PipelineResult:
        if context.summary is None or context.extraction is None or context.signals is None:
            raise ValueError("Pipeline finished without a summary")
        return PipelineResult(
            run_id=context.run_id,
            summary=context.summary,
            extraction=context.extraction,
            signals=context.signals,
            insight=context.insight,
        )


def build_orchestrator(
    settings: Settings,
    channel: ProgressChannel | None = None,
) -> Orchestrator:
    """Build an Orchestrator with the adapters selected by *settings*."""
    steps: list[PipelineStep] = [
        ClassifyStep(ArtifactClassifier()),
        ExtractStep(
            pdf_extractor=PdfExtractorFactory.create(settings),
            ocr_extractor=OcrExtractorFactory.create(settings),
        ),
        AnalyzeStep(ContentAnalyzer()),
        ScoreStep(ScoringEngine()),
        EnrichStep(EnricherFactory.create(settings)),
    ]
    return Orchestrator(steps, channel=channel)
