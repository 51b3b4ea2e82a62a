"""
Concurrent image decoding for SpriteSheet Combine.
"""

import asyncio
import logging
from typing import List, Sequence

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError
from .image_descriptor import DecodedImage, ImageDescriptor

logger = logging.getLogger(__name__)

SUPPORTED_FORMAT = 'PNG'


def decode_image(descriptor: ImageDescriptor) -> DecodedImage:
    """
    Decode one source image into RGBA pixels.

    Args:
        descriptor: Descriptor of the image to decode

    Returns:
        DecodedImage with the descriptor's missing dimensions resolved

    Raises:
        DecodeError: If the file is missing, unreadable, too large or not a PNG
    """
    path = descriptor.path
    try:
        with Image.open(path) as img:
            if img.format != SUPPORTED_FORMAT:
                raise DecodeError(path, f"unsupported format {img.format}, expected {SUPPORTED_FORMAT}")
            img.load()
            rgba = img.convert('RGBA')
    except FileNotFoundError as e:
        raise DecodeError(path, "file not found") from e
    except UnidentifiedImageError as e:
        raise DecodeError(path, "not a valid image") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(path, str(e)) from e
    except (OSError, SyntaxError, ValueError) as e:
        raise DecodeError(path, str(e)) from e

    resolved = descriptor.resolve(rgba.size)
    if (resolved.origin_width, resolved.origin_height) != rgba.size:
        logger.warning(
            f"{path.name}: declared size {resolved.origin_width}x{resolved.origin_height} "
            f"differs from decoded size {rgba.width}x{rgba.height}"
        )
    return DecodedImage(resolved, rgba)


async def decode_all(descriptors: Sequence[ImageDescriptor]) -> List[DecodedImage]:
    """
    Decode every descriptor concurrently and wait for all of them.

    Each decode runs on the default thread pool and fills its own result
    slot, so results come back in input order. The first failure is
    propagated.

    Args:
        descriptors: Images to decode

    Returns:
        One DecodedImage per descriptor, in input order
    """
    logger.info(f"Decoding {len(descriptors)} images")
    tasks = [asyncio.to_thread(decode_image, descriptor) for descriptor in descriptors]
    return list(await asyncio.gather(*tasks))
