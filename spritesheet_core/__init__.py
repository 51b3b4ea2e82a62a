"""
SpriteSheet Combine Core Package
Composites positioned images into a single PNG sprite sheet.
"""

from .image_descriptor import ImageDescriptor, DecodedImage, Point
from .combiner import SpriteCombiner, combine, combine_sync
from .errors import CombineError, DecodeError, EmptyInputError, WriteError, LayoutError, ConfigError

__all__ = [
    'ImageDescriptor',
    'DecodedImage',
    'Point',
    'SpriteCombiner',
    'combine',
    'combine_sync',
    'CombineError',
    'DecodeError',
    'EmptyInputError',
    'WriteError',
    'LayoutError',
    'ConfigError'
]
