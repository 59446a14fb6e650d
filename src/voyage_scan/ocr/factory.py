"""
OCR engine construction from scanner configuration.
"""

from ..config import ScannerConfig
from .engine import OCREngine


def create_engine(config: ScannerConfig) -> OCREngine:
    """
    Create an OCR engine for the configured backend.

    Args:
        config: Scanner configuration.

    Returns:
        A fresh, unconfigured engine.

    Raises:
        AssetLoadError: If the backend cannot be initialized.
    """
    if config.ocr_backend == 'paddle':
        from .paddle_engine import PaddleEngine
        return PaddleEngine(use_gpu=config.use_gpu)

    from .tesseract_engine import TesseractEngine
    return TesseractEngine(config.tessdata_dir, config.model, config.page_seg_mode)
