"""
OCR service wrapping Tesseract.

Turns an uploaded receipt image into recognized text plus a confidence score.
Preprocessing is limited to a grayscale conversion.
"""
from __future__ import annotations

import io
import logging

import pytesseract
from PIL import Image, UnidentifiedImageError

from app.config import settings
from app.tips.schemas import OCRResult

logger = logging.getLogger(__name__)


class OCRError(Exception):
    """The image could not be recognized."""


class OCREngine:
    """Tesseract-backed ``recognize(image) -> OCRResult``."""

    def __init__(self, language: str | None = None, tesseract_cmd: str | None = None):
        self.language = language or settings.OCR_LANGUAGE
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd or settings.TESSERACT_CMD

    def recognize(self, image_data: bytes) -> OCRResult:
        try:
            image = Image.open(io.BytesIO(image_data))
            image = image.convert("L")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise OCRError(f"Unreadable image: {e}") from e

        try:
            data = pytesseract.image_to_data(
                image, lang=self.language, output_type=pytesseract.Output.DICT
            )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as e:
            raise OCRError(f"Tesseract failed: {e}") from e

        text = _text_from_data(data)
        confidence = _mean_confidence(data.get("conf", []))
        logger.info("OCR recognized %d chars (confidence %.1f)", len(text), confidence)
        return OCRResult(text=text, confidence=confidence)


def _text_from_data(data: dict) -> str:
    """Rebuild page text from ``image_to_data`` rows.

    Words on the same line are joined with spaces; a blank line separates
    paragraphs and blocks.
    """
    lines: list[str] = []
    current: list[str] = []
    line_key = None
    para_key = None
    rows = zip(
        data.get("text", []),
        data.get("block_num", []),
        data.get("par_num", []),
        data.get("line_num", []),
    )
    for word, block, par, line in rows:
        word = str(word).strip()
        if not word:
            continue
        if (block, par, line) != line_key:
            if current:
                lines.append(" ".join(current))
                current = []
            if para_key is not None and (block, par) != para_key:
                lines.append("")
            line_key = (block, par, line)
            para_key = (block, par)
        current.append(word)
    if current:
        lines.append(" ".join(current))
    return "\n".join(lines)


def _mean_confidence(values: list) -> float:
    # Tesseract reports -1 for layout rows that carry no word
    scores = [float(v) for v in values if float(v) >= 0]
    if not scores:
        return 0.0
    return round(sum(scores) / len(scores), 2)


def get_ocr_engine() -> OCREngine:
    """FastAPI dependency."""
    return OCREngine()
