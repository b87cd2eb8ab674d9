class ArtifactError(Exception):
    """Base exception for artifact intake and classification errors."""


class UnsupportedTypeError(ArtifactError):
    """Raised when an artifact's media type is not on the allow-list."""


class NoFileError(ArtifactError):
    """Raised when the pipeline is started without an artifact."""


class ArtifactTooLargeError(ArtifactError):
    """Raised when an upload exceeds the configured byte ceiling."""
