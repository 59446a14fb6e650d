"""
Numeric OCR for Voyage value regions.
"""

import logging
import re

import numpy as np

from ..processing.constants import DIGIT_WHITELIST
from .engine import OCREngine

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r'\s*([0-9]+)')


def parse_leading_int(text: str) -> int:
    """
    Parse the leading digits of OCR output.

    Leading whitespace is skipped; anything non-numeric (or empty) yields 0.

    Args:
        text: Raw OCR text.

    Returns:
        Parsed non-negative integer.
    """
    match = _LEADING_DIGITS.match(text or '')
    if match is None:
        return 0
    return int(match.group(1))


class DigitRecognizer:
    """
    Reads a single integer from an image region.

    A failed read is indistinguishable from zero at this level.
    """

    def __init__(self, engine: OCREngine, whitelist: str = DIGIT_WHITELIST):
        """
        Initialize recognizer.

        Args:
            engine: OCR engine owned by this recognizer.
            whitelist: Characters the engine may produce.
        """
        self.engine = engine
        self.engine.configure(whitelist)

    def recognize(self, region: np.ndarray, name: str = '') -> int:
        """
        Recognise the number in ``region``.

        Args:
            region: Cropped value region.
            name: Label used in debug logging.

        Returns:
            Parsed integer, 0 when nothing numeric was read.
        """
        if region.size == 0:
            return 0
        text = self.engine.recognize_text(region)
        logger.debug("For %s OCR got %r", name or 'region', text)
        return parse_leading_int(text)

    def close(self) -> None:
        """Release the underlying engine."""
        self.engine.close()
