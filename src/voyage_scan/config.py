"""
Scanner configuration.

Defaults come from ``processing.constants``; an optional JSON file can
override any field.
"""

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

from .processing.constants import (
    ROOT_DIR,
    OCR_MODEL,
    OCR_BACKENDS,
    DEFAULT_PAGE_SEG_MODE,
    FETCH_TIMEOUT,
)
from .processing.layouts import DEFAULT_LAYOUT_VERSION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScannerConfig:
    """
    Settings for a VoyImageScanner.

    Attributes:
        base_path: Folder holding ``data/`` (icons and ``data/tessdata``).
        model: OCR model identifier.
        ocr_backend: 'tesseract' or 'paddle'.
        pool_size: Number of recognizers, i.e. maximum concurrent analyses.
        layout_version: Registered screen layout to use.
        page_seg_mode: Tesseract page segmentation mode.
        use_gpu: GPU flag for the paddle backend.
        fetch_timeout: Seconds allowed for downloading a screenshot.
    """

    base_path: Path = ROOT_DIR
    model: str = OCR_MODEL
    ocr_backend: str = 'tesseract'
    pool_size: int = 1
    layout_version: str = DEFAULT_LAYOUT_VERSION
    page_seg_mode: int = DEFAULT_PAGE_SEG_MODE
    use_gpu: bool = False
    fetch_timeout: float = FETCH_TIMEOUT

    def __post_init__(self):
        object.__setattr__(self, 'base_path', Path(self.base_path))
        if self.ocr_backend not in OCR_BACKENDS:
            raise ValueError(f"Unknown OCR backend {self.ocr_backend!r}; expected one of {OCR_BACKENDS}")
        if self.pool_size < 1:
            raise ValueError(f"pool_size must be at least 1, got {self.pool_size}")

    @property
    def icons_dir(self) -> Path:
        return self.base_path / 'data'

    @property
    def tessdata_dir(self) -> Path:
        return self.base_path / 'data' / 'tessdata'

    def with_overrides(self, **overrides) -> 'ScannerConfig':
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_json(cls, path: Optional[Union[str, Path]] = None) -> 'ScannerConfig':
        """
        Load configuration overrides from a JSON file.

        A missing file gives the defaults. An unreadable file is reported
        and also gives the defaults.

        Args:
            path: JSON file with any subset of the config fields.

        Returns:
            ScannerConfig instance.
        """
        config = cls()
        if path is None:
            return config

        path = Path(path)
        if not path.exists():
            return config

        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            known = {f.name for f in fields(cls)}
            unknown = set(data) - known
            if unknown:
                logger.warning("Ignoring unknown config keys in %s: %s", path, sorted(unknown))
            config = cls(**{k: v for k, v in data.items() if k in known})
            logger.info("Loaded scanner config from %s", path)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not load scanner config %s: %s", path, e)

        return config
