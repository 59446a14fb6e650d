"""
End-to-end Voyage screenshot analysis.

Stages:
- Antimatter: find the antimatter icon in the top band, OCR the counter
- Skills: jointly find the CMD and SCI icons in the bottom band, derive every
  value and star region from them, OCR values and classify stars
"""

import logging
from typing import Optional

import numpy as np

from ..assets.template_store import TemplateAssets
from ..layout.extractor import antimatter_value_rect, derive_regions
from ..matching.scale_search import ScaleSearchResult, scale_search
from ..ocr.digit_recognizer import DigitRecognizer
from ..processing.bands import crop_rect, top_band, bottom_band, to_bgr
from ..processing.constants import (
    ANTIMATTER_ICON,
    ANTIMATTER_CONFIDENCE,
    ANTIMATTER_MISREAD_LIMIT,
    ANTIMATTER_MISREAD_DIVISOR,
    BOTTOM_ANCHORS,
    SKILL_CONFIDENCE,
    ERROR_ANTIMATTER,
    ERROR_SKILLS,
)
from ..processing.layouts import LAYOUT_V1, VoyageLayout
from ..stars.star_classifier import classify_star
from ..state.voyage_result import VoyageResult

logger = logging.getLogger(__name__)


def correct_antimatter(value: int) -> int:
    """
    Undo the known antimatter misread.

    A particle effect next to the counter is sometimes read as an extra
    digit; anything above the limit is divided back down.
    """
    if value > ANTIMATTER_MISREAD_LIMIT:
        return value // ANTIMATTER_MISREAD_DIVISOR
    return value


class VoyagePipeline:
    """
    Runs the antimatter and skill stages over one screenshot.

    The pipeline holds no per-call state; the recognizer it is given must not
    be used by anyone else while ``analyze`` runs.

    Example:
        ```python
        pipeline = VoyagePipeline(assets, recognizer)
        result = pipeline.analyze(cv2.imread('voyage.png'))
        print(result.to_dict())
        ```
    """

    def __init__(self, assets: TemplateAssets, recognizer: DigitRecognizer,
                 layout: VoyageLayout = LAYOUT_V1):
        """
        Initialize pipeline.

        Args:
            assets: Reference icons of the active generation.
            recognizer: Digit recognizer for value regions.
            layout: Screen layout.
        """
        self.assets = assets
        self.recognizer = recognizer
        self.layout = layout

    def analyze(self, image: np.ndarray, file_size: int = 0) -> VoyageResult:
        """
        Analyse a decoded screenshot.

        Args:
            image: Screenshot (BGR, BGRA or grayscale array).
            file_size: Size of the encoded source, reported back unchanged.

        Returns:
            VoyageResult; ``valid`` is False with ``error`` set when a stage fails.
        """
        image = to_bgr(image)
        rows, cols = image.shape[:2]
        result = VoyageResult(input_width=cols, input_height=rows, file_size=file_size)

        antimatter = self.read_antimatter(image)
        if antimatter == 0:
            logger.warning("Antimatter not found in %dx%d image", cols, rows)
            return result.fail(ERROR_ANTIMATTER)

        result.antimatter = correct_antimatter(antimatter)
        if result.antimatter != antimatter:
            logger.debug("Corrected antimatter misread %d -> %d", antimatter, result.antimatter)

        if not self.read_skills(image, result):
            logger.warning("Skill icons not found in %dx%d image", cols, rows)
            return result.fail(ERROR_SKILLS)

        result.valid = True
        return result

    def find_antimatter(self, band: np.ndarray) -> Optional[ScaleSearchResult]:
        """Search the thresholded top band for the antimatter icon."""
        min_h, max_h, step = self.layout.top_search.heights(band.shape[0])
        return scale_search(
            band,
            {ANTIMATTER_ICON: self.assets[ANTIMATTER_ICON]},
            min_h, max_h, step,
            ANTIMATTER_CONFIDENCE,
        )

    def read_antimatter(self, image: np.ndarray) -> int:
        """
        Locate the antimatter icon and OCR the counter beside it.

        Args:
            image: BGR screenshot.

        Returns:
            Raw (uncorrected) antimatter reading, 0 if not found.
        """
        band = top_band(image, self.layout)
        match = self.find_antimatter(band)
        if match is None:
            return 0

        rect = antimatter_value_rect(
            match.anchors[ANTIMATTER_ICON], match.widths[ANTIMATTER_ICON], match.height, self.layout
        )
        logger.debug("Antimatter icon at %s height %d, value region %s",
                     match.anchors[ANTIMATTER_ICON], match.height, rect)
        return self.recognizer.recognize(crop_rect(band, rect), ANTIMATTER_ICON)

    def find_skill_anchors(self, band: np.ndarray) -> Optional[ScaleSearchResult]:
        """Jointly search the thresholded bottom band for the CMD and SCI icons."""
        min_h, max_h, step = self.layout.bottom_search.heights(band.shape[0])
        return scale_search(
            band,
            {name: self.assets[name] for name in BOTTOM_ANCHORS},
            min_h, max_h, step,
            SKILL_CONFIDENCE,
        )

    def read_skills(self, image: np.ndarray, result: VoyageResult) -> bool:
        """
        Fill every skill entry of ``result``.

        Args:
            image: BGR screenshot.
            result: Result to populate.

        Returns:
            False if the anchor icons were not found (entries untouched).
        """
        band = bottom_band(image, self.layout)
        match = self.find_skill_anchors(band)
        if match is None:
            return False

        regions = derive_regions(
            match.anchors['cmd'],
            match.anchors['sci'],
            match.widths['sci'],
            match.height,
            self.assets.widths(),
            self.layout,
        )

        for skill, region in regions.items():
            entry = result.skills[skill]
            entry.value = self.recognizer.recognize(crop_rect(band, region.value), skill)
            entry.marker = classify_star(crop_rect(band, region.star))

        logger.debug("Skills read at height %d: %s", match.height, result.skills)
        return True
