"""
Image descriptor data structures for SpriteSheet Combine.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class Point:
    """Integer 2D offset."""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class ImageDescriptor:
    """Describes where a single source image goes in the sprite sheet.

    origin_width/origin_height are the true pixel dimensions of the source.
    width/height are the allotted box in the output; position shifts the
    image inside that box and fit is the top-left of the box on the canvas.
    Missing dimensions are filled in from the decoded image.
    """

    path: Path
    fit: Point = field(default_factory=Point)
    position: Point = field(default_factory=Point)
    width: Optional[int] = None
    height: Optional[int] = None
    origin_width: Optional[int] = None
    origin_height: Optional[int] = None

    def __post_init__(self):
        """Ensure path is a Path object, fit lies on the canvas and sizes are non-negative."""
        if isinstance(self.path, str):
            object.__setattr__(self, 'path', Path(self.path))
        if self.fit.x < 0 or self.fit.y < 0:
            raise ValueError(f"Fit offset must be non-negative, got ({self.fit.x}, {self.fit.y}) for {self.path}")
        for name in ('width', 'height', 'origin_width', 'origin_height'):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value} for {self.path}")

    @property
    def is_resolved(self) -> bool:
        return None not in (self.width, self.height, self.origin_width, self.origin_height)

    def resolve(self, image_size) -> 'ImageDescriptor':
        """
        Fill in missing dimensions from the decoded image size.

        Args:
            image_size: (width, height) of the decoded image

        Returns:
            Descriptor with every dimension set
        """
        origin_width = self.origin_width if self.origin_width is not None else image_size[0]
        origin_height = self.origin_height if self.origin_height is not None else image_size[1]
        return replace(
            self,
            origin_width=origin_width,
            origin_height=origin_height,
            width=self.width if self.width is not None else origin_width,
            height=self.height if self.height is not None else origin_height,
        )


@dataclass
class DecodedImage:
    """A resolved descriptor together with its decoded RGBA pixels."""

    descriptor: ImageDescriptor
    image: Image.Image

    @property
    def right(self) -> int:
        return self.descriptor.fit.x + self.descriptor.width

    @property
    def bottom(self) -> int:
        return self.descriptor.fit.y + self.descriptor.height
