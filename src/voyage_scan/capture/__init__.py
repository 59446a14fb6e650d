"""
Screenshot loading module.
"""

from .image_source import ImageSource, is_url, fetch_bytes, decode_image, load_image

__all__ = ['ImageSource', 'is_url', 'fetch_bytes', 'decode_image', 'load_image']
