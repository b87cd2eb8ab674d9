"""Tests for enrichment prompt template and JSON schema loading."""

import json
from pathlib import Path

import pytest

from report_analyzer.enrichment.exceptions import EnrichmentError
from report_analyzer.enrichment.prompt_loader import load_json_schema, load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{report_text}" in template
        assert "{signals_json}" in template
        assert "{json_schema}" in template
        assert "{chart_insights}" in template

    def test_default_template_formats_without_stray_braces(self) -> None:
        template = load_prompt_template()
        rendered = template.format(
            report_text="R", signals_json="S", json_schema="J", chart_insights="C"
        )
        assert "R" in rendered

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Summarize {report_text}")
        assert load_prompt_template(custom) == "Summarize {report_text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(EnrichmentError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    def test_loads_default_schema(self) -> None:
        schema = json.loads(load_json_schema())
        assert schema["required"] == ["narrative", "recommendations"]
        assert schema["additionalProperties"] is False

    def test_loads_custom_schema(self, tmp_path: Path) -> None:
        custom = tmp_path / "schema.json"
        custom.write_text('{"type": "object"}')
        assert load_json_schema(custom) == '{"type": "object"}'

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(EnrichmentError, match="Failed to load JSON schema"):
            load_json_schema(Path("/nonexistent/schema.json"))
