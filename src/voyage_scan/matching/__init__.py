"""Multi-scale icon matching."""

from .scale_search import ScaleSearchResult, match_template, rescale_to_height, scale_search

__all__ = ['ScaleSearchResult', 'match_template', 'rescale_to_height', 'scale_search']
