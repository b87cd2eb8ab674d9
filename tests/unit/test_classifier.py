import re

import pytest

from report_analyzer.artifacts.classifier import ArtifactClassifier, normalize_media_type
from report_analyzer.artifacts.exceptions import UnsupportedTypeError
from report_analyzer.artifacts.models import MediaRoute, SourceArtifact


def _artifact(media_type: str) -> SourceArtifact:
    return SourceArtifact.from_bytes(b"data", media_type, "upload")


class TestNormalizeMediaType:
    def test_lowercases(self) -> None:
        assert normalize_media_type("Application/PDF") == "application/pdf"

    def test_strips_parameters(self) -> None:
        assert normalize_media_type("image/png; charset=binary") == "image/png"


class TestArtifactClassifier:
    @pytest.mark.parametrize(
        ("media_type", "route"),
        [
            ("application/pdf", MediaRoute.PAGINATED),
            ("image/png", MediaRoute.RASTER),
            ("image/jpeg", MediaRoute.RASTER),
            ("image/jpg", MediaRoute.RASTER),
            ("image/gif", MediaRoute.RASTER),
            ("image/webp", MediaRoute.RASTER),
            ("image/tiff", MediaRoute.RASTER),
            ("image/bmp", MediaRoute.RASTER),
        ],
    )
    def test_routes_allow_listed_types(self, media_type: str, route: MediaRoute) -> None:
        assert ArtifactClassifier().classify(_artifact(media_type)) is route

    def test_routes_pdf_with_parameters(self) -> None:
        artifact = _artifact("APPLICATION/PDF; version=1.7")
        assert ArtifactClassifier().classify(artifact) is MediaRoute.PAGINATED

    def test_empty_media_type_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedTypeError, match="no media type"):
            ArtifactClassifier().classify(_artifact(""))

    @pytest.mark.parametrize("media_type", ["text/plain", "application/zip", "image/svg+xml"])
    def test_rejects_other_types(self, media_type: str) -> None:
        expected = re.escape(f"Unsupported file type '{media_type}'")
        with pytest.raises(UnsupportedTypeError, match=expected):
            ArtifactClassifier().classify(_artifact(media_type))
