"""
Voyage analysis results.
"""

from .voyage_result import SkillEntry, VoyageResult

__all__ = ['SkillEntry', 'VoyageResult']
