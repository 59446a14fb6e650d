"""
Common interface for OCR engines used by the digit recognizer.

An engine owns mutable recognition state and must not be shared between
threads; the recognizer pool hands each caller its own instance.
"""

from typing import Callable

import numpy as np


class OCREngine:
    """
    Narrow OCR capability: configure a character whitelist, read text.

    Subclasses implement ``configure``, ``recognize_text`` and ``close``.
    """

    name = 'base'

    def configure(self, whitelist: str) -> None:
        """Restrict recognition to the characters in ``whitelist``."""
        raise NotImplementedError

    def recognize_text(self, region: np.ndarray) -> str:
        """
        Recognise text in a BGR (or grayscale) region.

        Args:
            region: Image region.

        Returns:
            Raw recognised text, possibly empty.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release the engine. The instance must not be used afterwards."""

    def __enter__(self) -> 'OCREngine':
        return self

    def __exit__(self, *exc) -> None:
        self.close()


EngineFactory = Callable[[], OCREngine]
