from typing import ClassVar

from report_analyzer.artifacts.exceptions import UnsupportedTypeError
from report_analyzer.artifacts.models import MediaRoute, SourceArtifact


def normalize_media_type(media_type: str) -> str:
    """Lowercase a media type and drop parameters such as ``; charset=...``."""
    return media_type.split(";", 1)[0].strip().lower()


class ArtifactClassifier:
    """Routes an artifact to the paginated-document or raster-image extractor."""

    ROUTES: ClassVar[dict[str, MediaRoute]] = {
        "application/pdf": MediaRoute.PAGINATED,
        "image/png": MediaRoute.RASTER,
        "image/jpeg": MediaRoute.RASTER,
        "image/jpg": MediaRoute.RASTER,
        "image/gif": MediaRoute.RASTER,
        "image/webp": MediaRoute.RASTER,
        "image/tiff": MediaRoute.RASTER,
        "image/bmp": MediaRoute.RASTER,
    }

    def classify(self, artifact: SourceArtifact) -> MediaRoute:
        """Return the extraction route for *artifact*.

        Raises:
            UnsupportedTypeError: if the media type is empty or not allow-listed.
        """
        media_type = normalize_media_type(artifact.media_type or "")
        if not media_type:
            raise UnsupportedTypeError(
                "Unsupported file type: no media type was provided. "
                "Please upload a PDF or image file."
            )
        route = self.ROUTES.get(media_type)
        if route is None:
            raise UnsupportedTypeError(
                f"Unsupported file type '{media_type}'. Please upload a PDF or image file."
            )
        return route
