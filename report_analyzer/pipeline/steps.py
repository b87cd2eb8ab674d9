from report_analyzer.analysis.analyzer import ContentAnalyzer
from report_analyzer.artifacts.base import BaseExtractor
from report_analyzer.artifacts.classifier import ArtifactClassifier
from report_analyzer.artifacts.exceptions import NoFileError
from report_analyzer.artifacts.models import MediaRoute
from report_analyzer.enrichment.enricher import AiEnricher, should_enrich
from report_analyzer.logging.logger import Log
from report_analyzer.pipeline.models import EXTRACTION_BAND, PipelineStage
from report_analyzer.pipeline.pipeline import PipelineContext, PipelineStep
from report_analyzer.scoring.engine import ScoringEngine


class ClassifyStep(PipelineStep):
    stage = PipelineStage.CLASSIFYING
    message = "Checking file type..."

    def __init__(self, classifier: ArtifactClassifier) -> None:
        self._classifier = classifier

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.artifact is None:
            raise NoFileError("No file selected. Please upload a PDF or image file.")
        context.route = self._classifier.classify(context.artifact)
        Log.info(
            f"Classified '{context.artifact.name}' as {context.route.value}",
            media_type=context.artifact.media_type,
            size_bytes=context.artifact.size_bytes,
        )
        return context


class ExtractStep(PipelineStep):
    stage = PipelineStage.EXTRACTING
    message = "Extracting text..."

    def __init__(self, pdf_extractor: BaseExtractor, ocr_extractor: BaseExtractor) -> None:
        self._extractors = {
            MediaRoute.PAGINATED: pdf_extractor,
            MediaRoute.RASTER: ocr_extractor,
        }

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.artifact is None or context.route is None:
            raise ValueError("PipelineContext.artifact and route must be set before extraction")
        low, high = EXTRACTION_BAND

        def on_progress(fraction: float, message: str) -> None:
            context.report_progress(self.stage, low + round(fraction * (high - low)), message)

        extractor = self._extractors[context.route]
        context.extraction = await extractor.extract(context.artifact, on_progress)
        Log.info(
            f"Extracted {len(context.extraction.text)} chars from '{context.artifact.name}'",
            pages=context.extraction.page_count,
            synthetic=context.extraction.is_synthetic,
            enhanced_ocr=context.extraction.enhanced_ocr_applied,
        )
        return context


class AnalyzeStep(PipelineStep):
    stage = PipelineStage.ANALYZING
    message = "Analyzing content..."

    def __init__(self, analyzer: ContentAnalyzer) -> None:
        self._analyzer = analyzer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before analysis")
        source_name = context.artifact.name if context.artifact is not None else None
        context.signals = self._analyzer.analyze(context.extraction.text, source_name)
        Log.info(
            "Content analyzed",
            words=context.signals.word_count,
            keywords=len(context.signals.keyword_stats),
            metric_matches=context.signals.metric_match_count,
            domains=",".join(context.signals.domains.active()) or "none",
            charts=len(context.signals.charts.charts),
        )
        return context


class ScoreStep(PipelineStep):
    stage = PipelineStage.SCORING
    message = "Scoring report..."

    def __init__(self, engine: ScoringEngine) -> None:
        self._engine = engine

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.signals is None or context.extraction is None:
            raise ValueError("PipelineContext.signals must be set before scoring")
        context.summary = self._engine.score(context.signals, context.extraction.text)
        Log.info(
            f"Report scored {context.summary.score}",
            recommendations=len(context.summary.recommendations),
        )
        return context


class EnrichStep(PipelineStep):
    stage = PipelineStage.ENRICHING
    message = "Generating AI insights..."

    def __init__(self, enricher: AiEnricher | None) -> None:
        self._enricher = enricher

    def applies(self, context: PipelineContext) -> bool:
        return (
            self._enricher is not None
            and context.signals is not None
            and should_enrich(context.signals)
        )

    async def run(self, context: PipelineContext) -> PipelineContext:
        if self._enricher is None or context.signals is None or context.extraction is None:
            return context
        context.insight = await self._enricher.enrich(context.signals, context.extraction.text)
        return context
