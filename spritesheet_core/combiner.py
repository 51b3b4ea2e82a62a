"""
Pipeline orchestration for SpriteSheet Combine.
Decodes the source images, composites them and writes the sprite sheet.
"""

import asyncio
import logging
import os
import stat
import tempfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image

from .blit import blit
from .canvas import build_canvas
from .errors import EmptyInputError, WriteError
from .image_descriptor import DecodedImage, ImageDescriptor
from .loader import decode_all
from .logger import log_combine

OUTPUT_FORMAT = 'PNG'


def _output_mode(output_path: Path) -> int:
    """Permission bits for the output: kept from an existing file, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(os.stat(output_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class SpriteCombiner:
    """Combines positioned images into a single PNG sprite sheet.

    Fit rectangles are expected not to overlap. Images are composited in
    input order, so overlapping pixels take the value of the later image.
    """

    def __init__(self):
        """Initialize the combiner."""
        self.logger = logging.getLogger(__name__)

    async def combine(self, descriptors: Sequence[ImageDescriptor], output_path: Path,
                      log_path: Optional[Path] = None,
                      project_name: Optional[str] = None) -> List[DecodedImage]:
        """
        Decode, composite and write a sprite sheet.

        Returns only once the output file is completely written. On failure
        no output file is created and any existing one is left as it was.

        Args:
            descriptors: Images and their placements
            output_path: Path of the PNG to write
            log_path: Optional path for a run summary log
            project_name: Name used in the summary log (defaults to output stem)

        Returns:
            One DecodedImage per descriptor, in input order
        """
        output_path = Path(output_path)
        project_name = project_name or output_path.stem
        start_time = datetime.now()
        canvas_size = (0, 0)
        images_placed = 0

        self.logger.info(f"Combining {len(descriptors)} images into {output_path}")

        try:
            if not descriptors:
                raise EmptyInputError()

            records = await decode_all(descriptors)

            canvas = build_canvas(records)
            canvas_size = canvas.size
            self.logger.info(f"Canvas dimensions: {canvas.width}x{canvas.height}")

            for record in records:
                rect = blit(record, canvas)
                if not rect.is_empty:
                    images_placed += 1

            await asyncio.to_thread(self._write_png, canvas, output_path)

        except Exception as e:
            self.logger.error(f"Error combining sprite sheet: {e}")
            if log_path:
                log_combine(
                    log_path=log_path,
                    project_name=project_name,
                    timestamp=start_time,
                    num_files=len(descriptors),
                    output_path=output_path,
                    canvas_size=canvas_size,
                    process_time=(datetime.now() - start_time).total_seconds(),
                    images_placed=images_placed,
                    error=str(e)
                )
            raise

        if log_path:
            log_combine(
                log_path=log_path,
                project_name=project_name,
                timestamp=start_time,
                num_files=len(descriptors),
                output_path=output_path,
                canvas_size=canvas_size,
                process_time=(datetime.now() - start_time).total_seconds(),
                images_placed=images_placed
            )

        self.logger.info(f"Sprite sheet completed: {output_path} ({images_placed} images placed)")
        return records

    def _write_png(self, canvas: Image.Image, output_path: Path) -> None:
        """
        Encode the canvas and move it onto output_path atomically.

        Args:
            canvas: Composited canvas
            output_path: Final PNG path

        Raises:
            WriteError: If encoding or writing fails
        """
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=output_path.parent, prefix=f".{output_path.name}.", suffix='.tmp'
            )
            with os.fdopen(fd, 'wb') as f:
                canvas.save(f, format=OUTPUT_FORMAT)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, _output_mode(output_path))
            os.replace(tmp_name, output_path)
        except (OSError, ValueError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise WriteError(output_path, str(e)) from e


async def combine(descriptors: Sequence[ImageDescriptor], output_path: Path,
                  log_path: Optional[Path] = None) -> List[DecodedImage]:
    """Combine descriptors into a sprite sheet at output_path."""
    return await SpriteCombiner().combine(descriptors, output_path, log_path=log_path)


def combine_sync(descriptors: Sequence[ImageDescriptor], output_path: Path,
                 log_path: Optional[Path] = None) -> List[DecodedImage]:
    """Run combine() to completion from synchronous code."""
    return asyncio.run(combine(descriptors, output_path, log_path=log_path))
