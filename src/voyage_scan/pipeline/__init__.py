"""Voyage analysis pipeline."""

from .voyage_pipeline import VoyagePipeline, correct_antimatter

__all__ = ['VoyagePipeline', 'correct_antimatter']
