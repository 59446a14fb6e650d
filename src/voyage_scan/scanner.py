"""
High-level VoyImageScanner API.

Owns the loaded generation (reference icons plus OCR recognizers) and exposes
the two operations used by serving code: ``reinitialize`` and ``analyze``.

Lifecycle: UNINITIALIZED -> READY -> REINITIALIZING -> READY. Analyses that
arrive while the scanner is not READY are rejected with a not-ready result.
Reinitialization waits for in-flight analyses, releases the previous
generation's engines, then loads and swaps in the new generation.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from .assets.template_store import TemplateAssets, load_template_assets
from .capture.image_source import ImageSource, load_image
from .config import ScannerConfig
from .errors import ImageSourceError
from .ocr.engine import OCREngine
from .ocr.factory import create_engine
from .ocr.pool import RecognizerPool
from .pipeline.voyage_pipeline import VoyagePipeline
from .processing.constants import ERROR_NOT_READY
from .processing.layouts import VoyageLayout, get_layout
from .state.voyage_result import VoyageResult

logger = logging.getLogger(__name__)


class ScannerState(Enum):
    UNINITIALIZED = 'uninitialized'
    READY = 'ready'
    REINITIALIZING = 'reinitializing'


class Generation:
    """One loaded set of reference icons with its recognizer pool."""

    def __init__(self, assets: TemplateAssets, pool: RecognizerPool, layout: VoyageLayout):
        self.assets = assets
        self.pool = pool
        self.layout = layout

    @property
    def number(self) -> int:
        return self.assets.generation

    def close(self) -> None:
        self.pool.close()


class VoyImageScanner:
    """
    Voyage screenshot scanner service.

    Example:
        ```python
        scanner = VoyImageScanner(ScannerConfig(base_path='/srv/datacore'))
        if not scanner.reinitialize():
            raise SystemExit("assets missing")

        result = scanner.analyze('https://example.com/voyage.png')
        print(result.to_dict())
        ```
    """

    def __init__(
        self,
        config: Optional[ScannerConfig] = None,
        engine_factory: Optional[Callable[[ScannerConfig], OCREngine]] = None
    ):
        """
        Create an uninitialized scanner; call ``reinitialize`` before use.

        Args:
            config: Scanner settings (defaults if None).
            engine_factory: Builds one OCR engine from the config; defaults
                to the configured backend.
        """
        self.config = config or ScannerConfig()
        self._engine_factory = engine_factory or create_engine

        self._cond = threading.Condition()
        self._reinit_lock = threading.Lock()
        self._state = ScannerState.UNINITIALIZED
        self._generation: Optional[Generation] = None
        self._generation_count = 0
        self._in_flight = 0

    @property
    def state(self) -> ScannerState:
        with self._cond:
            return self._state

    @property
    def generation(self) -> Optional[Generation]:
        with self._cond:
            return self._generation

    @property
    def ready(self) -> bool:
        return self.state is ScannerState.READY

    def reinitialize(self, force_retrain: bool = False) -> bool:
        """
        (Re)load reference icons and OCR engines from disk.

        Args:
            force_retrain: Requested by callers that also refreshed the asset
                corpus; everything is reloaded from disk either way.

        Returns:
            True when the scanner is READY with the new generation, False if
            loading failed (the scanner is then UNINITIALIZED).
        """
        with self._reinit_lock:
            logger.info("Reinitializing voyage scanner (force=%s, base=%s)",
                        force_retrain, self.config.base_path)

            with self._cond:
                self._state = ScannerState.REINITIALIZING
                self._cond.wait_for(lambda: self._in_flight == 0)
                previous, self._generation = self._generation, None

            # Engines of the old generation go away before new ones are built
            if previous is not None:
                previous.close()
                logger.debug("Released generation %d", previous.number)

            try:
                generation = self._load_generation()
            except Exception as e:
                logger.error("Voyage scanner initialization failed: %s", e)
                with self._cond:
                    self._state = ScannerState.UNINITIALIZED
                    self._cond.notify_all()
                return False

            with self._cond:
                self._generation = generation
                self._state = ScannerState.READY
                self._cond.notify_all()

            logger.info("Voyage scanner ready (generation %d, %d recognizer(s), layout %s)",
                        generation.number, generation.pool.size, generation.layout.version)
            return True

    def _load_generation(self) -> Generation:
        self._generation_count += 1
        layout = get_layout(self.config.layout_version)
        assets = load_template_assets(self.config.icons_dir, generation=self._generation_count)
        pool = RecognizerPool(lambda: self._engine_factory(self.config), self.config.pool_size)
        return Generation(assets, pool, layout)

    def analyze(self, source: ImageSource) -> VoyageResult:
        """
        Analyse a Voyage screenshot.

        Never raises: failures are reported through ``valid``/``error``.

        Args:
            source: URL, file path, encoded bytes, PIL Image or BGR array.

        Returns:
            VoyageResult for the screenshot.
        """
        # Fetching and decoding happen before any recognizer is taken
        try:
            image, file_size = load_image(source, timeout=self.config.fetch_timeout)
        except ImageSourceError as e:
            logger.warning("%s", e)
            return VoyageResult().fail(f"Could not load image: {e}")

        with self._cond:
            if self._state is not ScannerState.READY:
                logger.warning("Analysis rejected, scanner is %s", self._state.value)
                result = VoyageResult(input_width=image.shape[1], input_height=image.shape[0],
                                      file_size=file_size)
                return result.fail(ERROR_NOT_READY)
            generation = self._generation
            self._in_flight += 1

        try:
            with generation.pool.borrow() as recognizer:
                pipeline = VoyagePipeline(generation.assets, recognizer, generation.layout)
                return pipeline.analyze(image, file_size)
        except Exception as e:
            logger.exception("Voyage analysis failed")
            result = VoyageResult(input_width=image.shape[1], input_height=image.shape[0],
                                  file_size=file_size)
            return result.fail(f"Analysis failed: {e}")
        finally:
            with self._cond:
                self._in_flight -= 1
                self._cond.notify_all()

    def close(self) -> None:
        """Release the active generation and return to UNINITIALIZED."""
        with self._reinit_lock:
            with self._cond:
                # Stop accepting analyses before draining the running ones
                self._state = ScannerState.UNINITIALIZED
                self._cond.wait_for(lambda: self._in_flight == 0)
                previous, self._generation = self._generation, None
            if previous is not None:
                previous.close()

    def __enter__(self) -> 'VoyImageScanner':
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def create_voyage_scanner(config: Optional[ScannerConfig] = None) -> VoyImageScanner:
    """
    Create and initialize a VoyImageScanner.

    Args:
        config: Scanner settings.

    Returns:
        Scanner instance; check ``ready`` to see whether initialization worked.
    """
    scanner = VoyImageScanner(config)
    scanner.reinitialize()
    return scanner
