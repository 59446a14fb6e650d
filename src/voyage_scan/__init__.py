"""
Voyage Screenshot Analysis

Reads a Voyage summary screenshot and extracts:
- Antimatter count
- Value of the six skills (CMD, DIP, ENG, MED, SCI, SEC)
- Primary / secondary skill markers
"""

__version__ = "0.1.0"

from .config import ScannerConfig
from .errors import AssetLoadError, ImageSourceError, VoyageScanError
from .scanner import ScannerState, VoyImageScanner, create_voyage_scanner
from .stars import StarMarker
from .state import SkillEntry, VoyageResult

__all__ = [
    'ScannerConfig',
    'AssetLoadError',
    'ImageSourceError',
    'VoyageScanError',
    'ScannerState',
    'VoyImageScanner',
    'create_voyage_scanner',
    'StarMarker',
    'SkillEntry',
    'VoyageResult',
]
