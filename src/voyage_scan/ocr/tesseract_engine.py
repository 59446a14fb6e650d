"""
Tesseract OCR engine for Voyage digit recognition.

Runs the Eurostile model from the project's tessdata directory through
pytesseract, restricted to a digits whitelist in numeric classify mode.
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np
import pytesseract
from PIL import Image

from ..errors import AssetLoadError
from ..processing.constants import OCR_MODEL, DEFAULT_PAGE_SEG_MODE
from .engine import OCREngine

logger = logging.getLogger(__name__)


class TesseractEngine(OCREngine):
    """
    pytesseract wrapper bound to one tessdata directory and model.

    Example:
        ```python
        engine = TesseractEngine('data/tessdata', 'Eurostile')
        engine.configure('0123456789')
        text = engine.recognize_text(region)
        engine.close()
        ```
    """

    name = 'tesseract'

    def __init__(
        self,
        tessdata_dir: Union[str, Path],
        model: str = OCR_MODEL,
        page_seg_mode: int = DEFAULT_PAGE_SEG_MODE
    ):
        """
        Initialize the engine.

        Args:
            tessdata_dir: Directory containing ``<model>.traineddata``.
            model: Tesseract language/model identifier.
            page_seg_mode: Tesseract page segmentation mode.

        Raises:
            AssetLoadError: If tesseract or the model data is unavailable.
        """
        self.tessdata_dir = Path(tessdata_dir)
        self.model = model
        self.page_seg_mode = page_seg_mode
        self._whitelist = ''
        self._config = ''
        self._closed = False

        traineddata = self.tessdata_dir / f"{model}.traineddata"
        if not traineddata.is_file():
            raise AssetLoadError(f"Could not initialize tesseract: {traineddata} not found")

        try:
            version = pytesseract.get_tesseract_version()
        except pytesseract.TesseractNotFoundError as e:
            raise AssetLoadError(f"Could not initialize tesseract: {e}") from e

        logger.debug("Tesseract %s ready with model %s", version, model)
        self._build_config()

    def _build_config(self) -> None:
        parts = [f'--tessdata-dir "{self.tessdata_dir}"', f'--psm {self.page_seg_mode}']
        if self._whitelist:
            parts.append(f'-c tessedit_char_whitelist={self._whitelist}')
            parts.append('-c classify_bln_numeric_mode=1')
        self._config = ' '.join(parts)

    def configure(self, whitelist: str) -> None:
        self._whitelist = whitelist
        self._build_config()

    def recognize_text(self, region: np.ndarray) -> str:
        if self._closed:
            raise RuntimeError("TesseractEngine used after close()")
        if region.size == 0:
            return ''

        region = np.ascontiguousarray(region)
        if region.ndim == 3:
            image = Image.fromarray(cv2.cvtColor(region, cv2.COLOR_BGR2RGB))
        else:
            image = Image.fromarray(region)

        return pytesseract.image_to_string(image, lang=self.model, config=self._config)

    def close(self) -> None:
        self._closed = True
