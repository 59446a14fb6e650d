"""
Image processing utilities for Voyage screenshot analysis.
"""

from .bands import (
    Rect,
    to_bgr,
    sub_mat,
    crop_rect,
    zero_floor,
    top_band_rect,
    bottom_band_rect,
    top_band,
    bottom_band,
)
from .constants import (
    SKILL_NAMES,
    ICON_NAMES,
    ANTIMATTER_ICON,
    ROOT_DIR,
    DATA_DIR,
    TESSDATA_DIR,
)
from .layouts import (
    VoyageLayout,
    SkillSlot,
    Span,
    SearchRange,
    ICON_DELTA,
    LAYOUT_V1,
    DEFAULT_LAYOUT_VERSION,
    get_layout,
    register_layout,
    layout_versions,
)

__all__ = [
    'Rect',
    'to_bgr',
    'sub_mat',
    'crop_rect',
    'zero_floor',
    'top_band_rect',
    'bottom_band_rect',
    'top_band',
    'bottom_band',
    'SKILL_NAMES',
    'ICON_NAMES',
    'ANTIMATTER_ICON',
    'ROOT_DIR',
    'DATA_DIR',
    'TESSDATA_DIR',
    'VoyageLayout',
    'SkillSlot',
    'Span',
    'SearchRange',
    'ICON_DELTA',
    'LAYOUT_V1',
    'DEFAULT_LAYOUT_VERSION',
    'get_layout',
    'register_layout',
    'layout_versions',
]
