"""Star marker classification module."""

from .star_classifier import StarMarker, classify_star

__all__ = ['StarMarker', 'classify_star']
