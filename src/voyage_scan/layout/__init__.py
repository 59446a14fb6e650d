"""Layout-driven region extraction."""

from .extractor import SkillRegions, derive_regions, antimatter_value_rect

__all__ = ['SkillRegions', 'derive_regions', 'antimatter_value_rect']
