import argparse
import asyncio
import json
import sys
from pathlib import Path

from report_analyzer.artifacts.exceptions import ArtifactError
from report_analyzer.artifacts.loader import ArtifactLoader
from report_analyzer.config.settings import Settings
from report_analyzer.logging.logger import Log
from report_analyzer.ocr.exceptions import OcrFailureError
from report_analyzer.pipeline.models import PipelineProgress
from report_analyzer.pipeline.orchestrator import build_orchestrator


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="report_analyzer",
        description="Analyze an SEO report (PDF or image) and print the result as JSON.",
    )
    parser.add_argument("file", type=Path, help="Path to the PDF or image file")
    parser.add_argument(
        "--media-type",
        default=None,
        help="Override the media type guessed from the file extension",
    )
    return parser.parse_args(argv)


def _log_progress(progress: PipelineProgress) -> None:
    Log.info(f"[{progress.percent:3d}%] {progress.stage.value}: {progress.message}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> read file -> run pipeline -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    loader = ArtifactLoader(max_bytes=settings.max_upload_bytes)
    try:
        artifact = loader.load(args.file, media_type=args.media_type)
    except (FileNotFoundError, ArtifactError) as exc:
        Log.error(str(exc))
        return 1

    orchestrator = build_orchestrator(settings)
    orchestrator.channel.subscribe(_log_progress)
    try:
        result = asyncio.run(orchestrator.run(artifact))
    except (ArtifactError, OcrFailureError) as exc:
        Log.error(str(exc))
        return 1

    json.dump(result.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
