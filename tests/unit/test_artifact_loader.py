from pathlib import Path

import pytest

from report_analyzer.artifacts.exceptions import ArtifactTooLargeError
from report_analyzer.artifacts.loader import ArtifactLoader


class TestArtifactLoaderLoad:
    def test_reads_bytes_and_metadata(self, tmp_path: Path) -> None:
        path = tmp_path / "seo_report.pdf"
        path.write_bytes(b"%PDF-1.4 fake")
        artifact = ArtifactLoader(max_bytes=1024).load(path)
        assert artifact.data == b"%PDF-1.4 fake"
        assert artifact.name == "seo_report.pdf"
        assert artifact.size_bytes == 13
        assert artifact.media_type == "application/pdf"

    def test_guesses_image_media_type(self, tmp_path: Path) -> None:
        path = tmp_path / "chart.png"
        path.write_bytes(b"png")
        assert ArtifactLoader(max_bytes=1024).load(path).media_type == "image/png"

    def test_explicit_media_type_wins(self, tmp_path: Path) -> None:
        path = tmp_path / "scan.bin"
        path.write_bytes(b"x")
        artifact = ArtifactLoader(max_bytes=1024).load(path, media_type="image/tiff")
        assert artifact.media_type == "image/tiff"

    def test_unknown_extension_falls_back_to_octet_stream(self, tmp_path: Path) -> None:
        path = tmp_path / "report.unknownext"
        path.write_bytes(b"x")
        artifact = ArtifactLoader(max_bytes=1024).load(path)
        assert artifact.media_type == "application/octet-stream"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="File not found"):
            ArtifactLoader(max_bytes=1024).load(tmp_path / "missing.pdf")

    def test_file_above_ceiling_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "big.pdf"
        path.write_bytes(b"0123456789")
        with pytest.raises(ArtifactTooLargeError, match="big.pdf"):
            ArtifactLoader(max_bytes=4).load(path)


class TestArtifactLoaderAccept:
    def test_accepts_upload_at_ceiling(self) -> None:
        artifact = ArtifactLoader(max_bytes=4).accept(b"1234", "image/png", "a.png")
        assert artifact.size_bytes == 4

    def test_rejects_upload_above_ceiling(self) -> None:
        with pytest.raises(ArtifactTooLargeError):
            ArtifactLoader(max_bytes=4).accept(b"12345", "image/png", "a.png")

    def test_accepts_empty_upload(self) -> None:
        artifact = ArtifactLoader(max_bytes=4).accept(b"", "application/pdf", "empty.pdf")
        assert artifact.size_bytes == 0
