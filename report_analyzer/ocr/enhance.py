from PIL import Image, ImageOps

MIN_OCR_DIMENSION = 1000


def enhance_for_ocr(image: Image.Image, threshold: int = 128) -> Image.Image:
    """Contrast-enhanced, binarized copy of *image* for a second OCR pass.

    Small images are upscaled first; chart labels are usually tiny.
    """
    gray = ImageOps.grayscale(image)
    if max(gray.size) < MIN_OCR_DIMENSION:
        gray = gray.resize(
            (gray.width * 2, gray.height * 2), Image.Resampling.LANCZOS
        )
    contrasted = ImageOps.autocontrast(gray, cutoff=2)
    return contrasted.point(lambda value: 255 if value >= threshold else 0)
