"""
Reference icon store for Voyage screenshot matching.

Loads the seven reference icons (six skills plus antimatter) once per
generation. A generation is never modified; reinitialization builds a new one.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

import cv2
import numpy as np

from ..errors import AssetLoadError
from ..processing.constants import ICON_NAMES, ICON_EXTENSION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateAssets:
    """
    Immutable set of reference icons.

    Attributes:
        icons: Mapping of icon name to read-only BGR array.
        generation: Sequence number of the load that produced this set.
        source_dir: Directory the icons were read from, if any.
    """

    icons: Mapping[str, np.ndarray]
    generation: int = 0
    source_dir: Optional[Path] = None

    def __getitem__(self, name: str) -> np.ndarray:
        return self.icons[name]

    def widths(self) -> Dict[str, int]:
        """Original width of every icon."""
        return {name: icon.shape[1] for name, icon in self.icons.items()}


def freeze_icons(icons: Mapping[str, np.ndarray], generation: int = 0,
                 source_dir: Optional[Path] = None) -> TemplateAssets:
    """
    Build a TemplateAssets from in-memory icons.

    Arrays are copied and marked read-only so no caller can alter a generation.

    Args:
        icons: Mapping of icon name to BGR array; must cover all ICON_NAMES.
        generation: Generation number.
        source_dir: Where the icons came from.

    Returns:
        Immutable asset set.

    Raises:
        AssetLoadError: If an icon is missing or empty.
    """
    frozen = {}
    for name in ICON_NAMES:
        icon = icons.get(name)
        if icon is None or icon.size == 0:
            raise AssetLoadError(f"Reference icon '{name}' is missing or empty")
        icon = np.array(icon, dtype=np.uint8, copy=True)
        icon.setflags(write=False)
        frozen[name] = icon
    return TemplateAssets(icons=MappingProxyType(frozen), generation=generation,
                          source_dir=source_dir)


def load_template_assets(icons_dir: Union[str, Path], generation: int = 0) -> TemplateAssets:
    """
    Load all reference icons from ``icons_dir``.

    Args:
        icons_dir: Directory containing cmd.png, dip.png, ... antimatter.png.
        generation: Generation number to stamp on the result.

    Returns:
        Immutable asset set.

    Raises:
        AssetLoadError: If any icon file is missing or unreadable.
    """
    icons_dir = Path(icons_dir)
    icons = {}
    for name in ICON_NAMES:
        path = icons_dir / f"{name}{ICON_EXTENSION}"
        icon = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if icon is None:
            raise AssetLoadError(f"Could not read reference icon {path}")
        icons[name] = icon

    assets = freeze_icons(icons, generation=generation, source_dir=icons_dir)
    logger.info("Loaded %d reference icons from %s (generation %d)",
                len(assets.icons), icons_dir, generation)
    return assets
