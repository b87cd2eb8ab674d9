import io
import shutil
from pathlib import Path

import pytest
from PIL import Image, ImageDraw, ImageFont

from report_analyzer.config.settings import Settings


@pytest.fixture
def test_settings() -> Settings:
    return Settings(enrichment_provider="disabled")


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def requires_tesseract() -> None:
    if shutil.which("tesseract") is None:
        pytest.skip("tesseract binary not on PATH")


@pytest.fixture
def text_screenshot_bytes() -> bytes:
    """A clean screenshot of a few lines of large black text."""
    image = Image.new("RGB", (1400, 400), "white")
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default(size=48)
    draw.text((40, 60), "Organic traffic report", fill="black", font=font)
    draw.text((40, 200), "Sessions grew 15% this month", fill="black", font=font)
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
