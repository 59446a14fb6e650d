"""
Geometric region derivation for the Voyage skills panel.

Once the CMD and SCI icons are located at a common scale, every value and
star region is placed by fixed offsets from those two anchors.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from ..processing.bands import Rect
from ..processing.layouts import (
    ICON_DELTA, ROW_TOP, ROW_MIDDLE, ROW_BOTTOM, Span, VoyageLayout, offset_to_pixels
)

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


@dataclass(frozen=True)
class SkillRegions:
    """Value and star rectangles of one skill, (x0, y0, x1, y1) each."""

    value: Rect
    star: Rect


def _row_range(row: str, cmd_anchor: Point, sci_anchor: Point, height: int) -> Tuple[int, int]:
    cmd_y = cmd_anchor[1]
    sci_y = sci_anchor[1]
    if row == ROW_TOP:
        return cmd_y, cmd_y + height
    if row == ROW_MIDDLE:
        return cmd_y + height, sci_y
    if row == ROW_BOTTOM:
        return sci_y, sci_y + height
    raise ValueError(f"Unknown row band {row!r}")


def _icon_delta_edge(skill: str, anchor_x: int, scaled_width: int,
                     icon_widths: Mapping[str, int]) -> int:
    """Right edge shifted by the width difference between the skill and SCI icons."""
    sci_width = icon_widths['sci']
    width_scale = scaled_width / sci_width
    return int(anchor_x - (icon_widths[skill] - sci_width) * width_scale)


def _column_range(skill: str, span: Span, anchors: Mapping[str, Point], scaled_width: int,
                  icon_widths: Mapping[str, int]) -> Tuple[int, int]:
    anchor_x = anchors[span.anchor][0]
    edges = []
    for offset in (span.start, span.end):
        if offset == ICON_DELTA:
            edges.append(_icon_delta_edge(skill, anchor_x, scaled_width, icon_widths))
        else:
            edges.append(offset_to_pixels(anchor_x, scaled_width, offset))
    return edges[0], edges[1]


def derive_regions(
    cmd_anchor: Point,
    sci_anchor: Point,
    scaled_width: int,
    height: int,
    icon_widths: Mapping[str, int],
    layout: VoyageLayout
) -> Dict[str, SkillRegions]:
    """
    Compute the value and star regions of every skill.

    Args:
        cmd_anchor: Top-left (x, y) of the matched CMD icon.
        sci_anchor: Top-left (x, y) of the matched SCI icon.
        scaled_width: Width of the SCI icon at the accepted scale.
        height: Accepted icon height.
        icon_widths: Original (unscaled) width of each reference icon.
        layout: Screen layout holding the offset table.

    Returns:
        Skill name -> SkillRegions, in band coordinates.
    """
    anchors = {'cmd': cmd_anchor, 'sci': sci_anchor}
    regions = {}
    for skill, slot in layout.skills.items():
        y0, y1 = _row_range(slot.row, cmd_anchor, sci_anchor, height)
        vx0, vx1 = _column_range(skill, slot.value, anchors, scaled_width, icon_widths)
        sx0, sx1 = _column_range(skill, slot.star, anchors, scaled_width, icon_widths)
        regions[skill] = SkillRegions(value=(vx0, y0, vx1, y1), star=(sx0, y0, sx1, y1))
        logger.debug("%s value=%s star=%s", skill, regions[skill].value, regions[skill].star)
    return regions


def antimatter_value_rect(anchor: Point, scaled_width: int, height: int,
                          layout: VoyageLayout) -> Rect:
    """
    Region holding the antimatter digits, right of the matched icon.

    Args:
        anchor: Top-left (x, y) of the matched antimatter icon.
        scaled_width: Width of the icon at the accepted scale.
        height: Accepted icon height.
        layout: Screen layout.

    Returns:
        (x0, y0, x1, y1) in band coordinates.
    """
    x, y = anchor
    start, end = layout.antimatter_value
    return (
        offset_to_pixels(x, scaled_width, start),
        y,
        offset_to_pixels(x, scaled_width, end),
        y + height,
    )
