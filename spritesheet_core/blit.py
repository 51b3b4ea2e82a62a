"""
Blit engine for SpriteSheet Combine.
Copies the visible part of each source image into its box on the canvas.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from PIL import Image

from .image_descriptor import DecodedImage, ImageDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlitRect:
    """Source rectangle and destination offset for one blit."""
    src_x: int
    src_y: int
    width: int
    height: int
    dst_x: int
    dst_y: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def source_box(self) -> Tuple[int, int, int, int]:
        return (self.src_x, self.src_y, self.src_x + self.width, self.src_y + self.height)


def axis_span(pos: int, box: int, origin: int, fit_offset: int) -> Tuple[int, int, int]:
    """
    Compute the blit span along one axis.

    A positive position pushes the image into its box, so the room left
    in the box shrinks by pos. Zero or negative position hides the leading
    -pos pixels of the source, leaving origin + pos visible.

    Args:
        pos: Position of the image inside its box on this axis
        box: Allotted box size on this axis
        origin: True image size on this axis
        fit_offset: Box offset on the canvas on this axis

    Returns:
        (source start, extent, destination start)
    """
    if pos > 0:
        return 0, min(origin, box - pos), fit_offset + pos
    return -pos, min(origin + pos, box), fit_offset


def blit_rect(descriptor: ImageDescriptor) -> BlitRect:
    """Compute both axes of the blit independently for a resolved descriptor."""
    src_x, width, dst_x = axis_span(
        descriptor.position.x, descriptor.width, descriptor.origin_width, descriptor.fit.x
    )
    src_y, height, dst_y = axis_span(
        descriptor.position.y, descriptor.height, descriptor.origin_height, descriptor.fit.y
    )
    return BlitRect(src_x, src_y, width, height, dst_x, dst_y)


def _clip_to_bounds(rect: BlitRect, source_size, canvas_size) -> BlitRect:
    # No-op when the declared origin size matches the decoded image
    width = min(rect.width, source_size[0] - rect.src_x, canvas_size[0] - rect.dst_x)
    height = min(rect.height, source_size[1] - rect.src_y, canvas_size[1] - rect.dst_y)
    return BlitRect(rect.src_x, rect.src_y, width, height, rect.dst_x, rect.dst_y)


def blit(record: DecodedImage, canvas: Image.Image) -> BlitRect:
    """
    Copy the visible region of a decoded image onto the canvas.

    Pixels are overwritten, alpha included. The source image is never
    modified and canvas pixels outside the rectangle are left untouched.

    Args:
        record: Decoded image with a resolved descriptor
        canvas: RGBA canvas to draw on

    Returns:
        The rectangle that was copied (empty if nothing was copied)
    """
    rect = _clip_to_bounds(blit_rect(record.descriptor), record.image.size, canvas.size)

    if rect.is_empty:
        logger.debug(f"Nothing visible for {record.descriptor.path}, skipping")
        return rect

    region = record.image.crop(rect.source_box)
    canvas.paste(region, (rect.dst_x, rect.dst_y))
    return rect
