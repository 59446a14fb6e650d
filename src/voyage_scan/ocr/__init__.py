"""
OCR module for Voyage digit recognition.
"""

from .digit_recognizer import DigitRecognizer, parse_leading_int
from .engine import OCREngine, EngineFactory
from .factory import create_engine
from .pool import RecognizerPool

__all__ = [
    'DigitRecognizer',
    'parse_leading_int',
    'OCREngine',
    'EngineFactory',
    'create_engine',
    'RecognizerPool',
]
