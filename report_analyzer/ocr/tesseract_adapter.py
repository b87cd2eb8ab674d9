from typing import Any

import pytesseract
from PIL import Image

from report_analyzer.ocr.base import BaseOcrEngine
from report_analyzer.ocr.exceptions import OcrEngineError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes text with the Tesseract engine via pytesseract."""

    DEFAULT_CONFIG: dict[str, Any] = {
        # 3 = fully automatic page segmentation; reports mix prose and figures
        "psm": 3,
        # 3 = whichever of legacy / LSTM is available
        "oem": 3,
    }

    def __init__(self, languages: str = "eng", config: dict[str, Any] | None = None) -> None:
        self._languages = languages
        self._config = {**self.DEFAULT_CONFIG, **(config or {})}

    @property
    def engine_name(self) -> str:
        return "tesseract"

    def recognize(self, image: Image.Image) -> str:
        try:
            text = pytesseract.image_to_string(
                image,
                lang=self._languages,
                config=self._build_config_string(),
            )
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrEngineError(f"Tesseract is not installed or not on PATH: {exc}") from exc
        except (pytesseract.TesseractError, RuntimeError, OSError) as exc:
            raise OcrEngineError(f"Tesseract recognition failed: {exc}") from exc
        return str(text)

    def _build_config_string(self) -> str:
        parts: list[str] = []
        for key, value in self._config.items():
            if key == "psm":
                parts.append(f"--psm {value}")
            elif key == "oem":
                parts.append(f"--oem {value}")
            else:
                parts.append(f"-c {key}={value}")
        return " ".join(parts)
