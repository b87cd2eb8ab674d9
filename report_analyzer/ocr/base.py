from abc import ABC, abstractmethod

from PIL import Image


class BaseOcrEngine(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def recognize(self, image: Image.Image) -> str:
        """Recognize text in a decoded image.

        Args:
            image: Pillow image, already loaded.

        Returns:
            Recognized text, possibly empty.

        Raises:
            OcrEngineError: if the engine fails for any reason.
        """

    @property
    @abstractmethod
    def engine_name(self) -> str:
        """Return the name of this OCR engine."""
