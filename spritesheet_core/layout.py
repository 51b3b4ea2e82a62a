"""
Layout file reading and writing for SpriteSheet Combine.

A layout is the JSON produced by an external packing step. It is either a
list of image entries or an object with an "images" list:

    {
        "images": [
            {"path": "icon.png", "width": 16, "height": 16,
             "position": {"x": 0, "y": 0}, "fit": {"x": 0, "y": 0}}
        ]
    }

originWidth/originHeight and width/height are optional and default to the
decoded image size.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import LayoutError
from .image_descriptor import DecodedImage, ImageDescriptor, Point

logger = logging.getLogger(__name__)


def _point(entry: dict, key: str, required: bool) -> Point:
    value = entry.get(key)
    if value is None:
        if required:
            raise LayoutError(f"image entry {entry.get('path')!r} is missing '{key}'")
        return Point()
    if not isinstance(value, dict):
        raise LayoutError(f"'{key}' must be an object with x and y")
    return Point(_int(value, 'x', 0), _int(value, 'y', 0))


def _int(entry: dict, key: str, default=None):
    value = entry.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise LayoutError(f"'{key}' must be an integer, got {value!r}")
    return value


def descriptor_from_dict(entry: dict, base_dir: Optional[Path] = None) -> ImageDescriptor:
    """
    Build a descriptor from one layout entry.

    Args:
        entry: Layout entry using camelCase keys
        base_dir: Directory that relative image paths are resolved against

    Returns:
        ImageDescriptor for the entry
    """
    if not isinstance(entry, dict):
        raise LayoutError(f"image entry must be an object, got {type(entry).__name__}")
    if 'path' not in entry:
        raise LayoutError("image entry is missing 'path'")

    path = Path(entry['path'])
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path

    try:
        return ImageDescriptor(
            path=path,
            fit=_point(entry, 'fit', required=True),
            position=_point(entry, 'position', required=False),
            width=_int(entry, 'width'),
            height=_int(entry, 'height'),
            origin_width=_int(entry, 'originWidth'),
            origin_height=_int(entry, 'originHeight'),
        )
    except ValueError as e:
        raise LayoutError(str(e)) from e


def descriptor_to_dict(descriptor: ImageDescriptor) -> dict:
    """Convert a descriptor back to a layout entry."""
    return {
        'path': str(descriptor.path),
        'originWidth': descriptor.origin_width,
        'originHeight': descriptor.origin_height,
        'width': descriptor.width,
        'height': descriptor.height,
        'position': {'x': descriptor.position.x, 'y': descriptor.position.y},
        'fit': {'x': descriptor.fit.x, 'y': descriptor.fit.y},
    }


def load_layout(path: Path, base_dir: Optional[Path] = None) -> List[ImageDescriptor]:
    """
    Load image descriptors from a layout file.

    Args:
        path: Layout JSON file
        base_dir: Directory for relative image paths (default: layout file's directory)

    Returns:
        Descriptors in file order

    Raises:
        LayoutError: If the file cannot be read or is malformed
    """
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise LayoutError(f"cannot read layout: {e}", path) from e
    except json.JSONDecodeError as e:
        raise LayoutError(f"invalid JSON: {e}", path) from e

    entries = data.get('images') if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise LayoutError("layout must be a list of images or an object with an 'images' list", path)

    base_dir = Path(base_dir) if base_dir is not None else path.parent
    descriptors = [descriptor_from_dict(entry, base_dir) for entry in entries]
    logger.info(f"Loaded {len(descriptors)} image descriptors from {path}")
    return descriptors


def dump_layout(records: Sequence[DecodedImage], path: Path) -> None:
    """Write the resolved layout, decoded sizes included, for stylesheet generators."""
    data = {'images': [descriptor_to_dict(record.descriptor) for record in records]}
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise LayoutError(f"cannot write layout: {e}", Path(path)) from e
