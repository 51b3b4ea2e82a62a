"""
Canvas sizing and allocation for SpriteSheet Combine.
"""

import logging
from typing import Sequence, Tuple

from PIL import Image

from .errors import EmptyInputError
from .image_descriptor import DecodedImage

logger = logging.getLogger(__name__)

# Extra pixels on each axis, absorbs slack in upstream layout measurement
CANVAS_MARGIN = 10


def canvas_size(records: Sequence[DecodedImage]) -> Tuple[int, int]:
    """
    Calculate the smallest canvas that holds every allotted box.

    The rightmost and bottommost boxes are found independently and need
    not belong to the same image.

    Args:
        records: Decoded images with resolved descriptors

    Returns:
        (width, height) before the margin is added
    """
    if not records:
        raise EmptyInputError()

    width = max(record.right for record in records)
    height = max(record.bottom for record in records)
    return width, height


def create_canvas(width: int, height: int) -> Image.Image:
    """Allocate a fully transparent RGBA canvas with the margin added."""
    size = (width + CANVAS_MARGIN, height + CANVAS_MARGIN)
    logger.debug(f"Allocating canvas {size[0]}x{size[1]}")
    return Image.new('RGBA', size, (0, 0, 0, 0))


def build_canvas(records: Sequence[DecodedImage]) -> Image.Image:
    width, height = canvas_size(records)
    return create_canvas(width, height)
