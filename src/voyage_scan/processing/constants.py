"""
Configuration constants for Voyage screenshot processing.
Includes asset locations, matching thresholds and OCR settings.
"""

from pathlib import Path

# Project paths
ROOT_DIR = Path(__file__).parents[3]
DATA_DIR = ROOT_DIR / "data"
TESSDATA_DIR = DATA_DIR / "tessdata"

# Reference icons, loaded from <base>/data/<name>.png
SKILL_NAMES = ('cmd', 'dip', 'eng', 'med', 'sci', 'sec')
ANTIMATTER_ICON = 'antimatter'
ICON_NAMES = SKILL_NAMES + (ANTIMATTER_ICON,)
ICON_EXTENSION = '.png'

# Icons solved jointly in the bottom band; every other region hangs off these
BOTTOM_ANCHORS = ('cmd', 'sci')

# OCR settings (reference deployment ships a Eurostile traineddata)
OCR_MODEL = 'Eurostile'
DIGIT_WHITELIST = '0123456789'
DEFAULT_PAGE_SEG_MODE = 6  # single uniform block, TessBaseAPI default
OCR_BACKENDS = ('tesseract', 'paddle')

# Pixels at or below this value are zeroed before matching (faded stars, texture)
ZERO_FLOOR_CUTOFF = 100

# Correlation acceptance thresholds
ANTIMATTER_CONFIDENCE = 0.8
SKILL_CONFIDENCE = 0.9

# The OCR sometimes reads an extra digit when a particle sits next to the number
ANTIMATTER_MISREAD_LIMIT = 8000
ANTIMATTER_MISREAD_DIVISOR = 10

# Star marker classification on the centred sample window (BGR means)
STAR_WINDOW_HALF = 10
STAR_EMPTY_SUM = 10
STAR_PRIMARY_FIRST_CHANNEL = 5
STAR_SECONDARY_SUM = 100

# Error strings reported in VoyageResult.error
ERROR_ANTIMATTER = "Could not read antimatter"
ERROR_SKILLS = "Could not read skill values"
ERROR_NOT_READY = "Scanner is not ready"

# Image fetching
FETCH_TIMEOUT = 10.0
