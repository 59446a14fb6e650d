"""
Exceptions raised by the Voyage scanner components.
"""


class VoyageScanError(Exception):
    """Base class for scanner errors."""


class AssetLoadError(VoyageScanError):
    """A reference icon or OCR model could not be loaded."""


class ImageSourceError(VoyageScanError):
    """The screenshot could not be fetched or decoded."""
