"""
Pool of independently initialized digit recognizers.

OCR engines keep per-call state, so concurrent analyses each borrow their own
recognizer. The pool size bounds analysis parallelism.
"""

import logging
import queue
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .digit_recognizer import DigitRecognizer
from .engine import EngineFactory

logger = logging.getLogger(__name__)


class RecognizerPool:
    """
    Fixed-size pool of DigitRecognizer instances.

    Example:
        ```python
        pool = RecognizerPool(lambda: TesseractEngine(tessdata), size=2)
        with pool.borrow() as recognizer:
            value = recognizer.recognize(region)
        pool.close()
        ```
    """

    def __init__(self, engine_factory: EngineFactory, size: int = 1):
        """
        Build ``size`` recognizers.

        Args:
            engine_factory: Callable creating a fresh OCR engine.
            size: Number of recognizers.

        Raises:
            AssetLoadError: If any engine fails to initialize. Engines
                created before the failure are closed.
        """
        if size < 1:
            raise ValueError(f"Pool size must be at least 1, got {size}")

        self._members: List[DigitRecognizer] = []
        self._idle: "queue.Queue[DigitRecognizer]" = queue.Queue()
        self._closed = False

        try:
            for _ in range(size):
                recognizer = DigitRecognizer(engine_factory())
                self._members.append(recognizer)
                self._idle.put(recognizer)
        except Exception:
            self.close()
            raise

        logger.debug("Recognizer pool ready with %d member(s)", size)

    @property
    def size(self) -> int:
        return len(self._members)

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def borrow(self, timeout: Optional[float] = None) -> Iterator[DigitRecognizer]:
        """
        Take a recognizer for exclusive use; it is returned on exit.

        Args:
            timeout: Seconds to wait for a free recognizer (None waits forever).

        Raises:
            RuntimeError: If the pool is closed.
            queue.Empty: If ``timeout`` expires.
        """
        if self._closed:
            raise RuntimeError("Recognizer pool is closed")
        recognizer = self._idle.get(timeout=timeout)
        try:
            yield recognizer
        finally:
            self._idle.put(recognizer)

    def close(self) -> None:
        """Release every engine in the pool."""
        if self._closed:
            return
        self._closed = True
        for recognizer in self._members:
            recognizer.close()
        logger.debug("Recognizer pool closed (%d member(s))", len(self._members))
