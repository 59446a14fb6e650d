"""
PaddleOCR engine for Voyage digit recognition.

Alternative to the Tesseract backend for deployments without the Eurostile
traineddata. Runs recognition only (no text detection) on the cropped region
and keeps the whitelisted characters of the best reading.

Requires the ``paddle`` extra: ``pip install voyage_scan[paddle]``.
"""

import logging

import cv2
import numpy as np

from ..errors import AssetLoadError
from .engine import OCREngine

logger = logging.getLogger(__name__)

# Recognition works best with text lines around this height
_TARGET_HEIGHT = 48


class PaddleEngine(OCREngine):
    """
    PaddleOCR wrapper restricted to a character whitelist.

    Uses PaddleOCR for text recognition of:
    - Antimatter counter
    - Skill values
    """

    name = 'paddle'

    def __init__(self, use_gpu: bool = False, lang: str = 'en'):
        """
        Initialize the engine.

        Args:
            use_gpu: Whether to use GPU acceleration.
            lang: Language for OCR ('en', 'ch', etc.).

        Raises:
            AssetLoadError: If PaddleOCR is not installed or its models fail to load.
        """
        try:
            from paddleocr import PaddleOCR
        except ImportError as e:
            raise AssetLoadError("PaddleOCR backend requires: pip install voyage_scan[paddle]") from e

        try:
            self.ocr = PaddleOCR(use_angle_cls=False, show_log=False, lang=lang, use_gpu=use_gpu)
        except Exception as e:
            raise AssetLoadError(f"Could not initialize PaddleOCR: {e}") from e

        self._whitelist = ''

    def configure(self, whitelist: str) -> None:
        self._whitelist = whitelist

    def recognize_text(self, region: np.ndarray) -> str:
        if self.ocr is None:
            raise RuntimeError("PaddleEngine used after close()")
        if region.size == 0:
            return ''

        if region.ndim == 2:
            region = cv2.cvtColor(region, cv2.COLOR_GRAY2BGR)

        # Upscale small crops to the recognizer's preferred line height
        h, w = region.shape[:2]
        if h < _TARGET_HEIGHT:
            ratio = _TARGET_HEIGHT / h
            region = cv2.resize(region, (max(int(w * ratio), 1), _TARGET_HEIGHT),
                                interpolation=cv2.INTER_CUBIC)

        rgb = np.ascontiguousarray(region[..., ::-1])  # BGR -> RGB
        results = self.ocr.ocr(rgb, det=False, rec=True, cls=False)

        texts = []
        for page in results or []:
            for rec in page or []:
                text, _conf = rec
                texts.append(text)

        text = ''.join(texts)
        if self._whitelist:
            text = ''.join(c for c in text if c in self._whitelist)
        return text

    def close(self) -> None:
        self.ocr = None
