from pathlib import Path

from report_analyzer.enrichment.exceptions import EnrichmentError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the enrichment prompt template.

    Args:
        path: Template file. Defaults to the bundled enrichment_prompt.txt.

    Raises:
        EnrichmentError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "enrichment_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EnrichmentError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the response JSON schema. Defaults to the bundled enrichment_schema.json."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "enrichment_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EnrichmentError(f"Failed to load JSON schema: {exc}") from exc
