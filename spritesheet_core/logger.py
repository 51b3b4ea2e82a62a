"""
Logging system for SpriteSheet Combine.
Handles console logging setup and per-run summary logs.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple


def setup_logging(log_level: int = logging.INFO) -> None:
    """Setup basic logging configuration."""
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def log_combine(log_path: Path, project_name: str, timestamp: datetime,
                num_files: int, output_path: Path, canvas_size: Tuple[int, int],
                process_time: float, images_placed: int,
                error: Optional[str] = None) -> None:
    """
    Write a summary of one combine run to a file.

    Args:
        log_path: Path to log file
        project_name: Name of the sprite sheet
        timestamp: Start timestamp
        num_files: Number of input images
        output_path: Path to output PNG
        canvas_size: Final canvas dimensions (width, height), margin included
        process_time: Processing time in seconds
        images_placed: Number of images copied onto the canvas
        error: Error message if any
    """

    log_content = f"""SpriteSheet Combine - Run Log
{'=' * 50}

Project Information:
    Project Name: {project_name}
    Timestamp: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}

Input Parameters:
    Input Files: {num_files}
    Images Placed: {images_placed}

Output Information:
    Output Path: {output_path.name}
    Canvas Size: {canvas_size[0]} x {canvas_size[1]} pixels
    Total Pixels: {canvas_size[0] * canvas_size[1]:,}
    Output Format: PNG (RGBA)

Process Information:
    Processing Time: {process_time:.2f} seconds
    Completion Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}

"""

    if error:
        log_content += f"""Error Information:
    Error: {error}
    Status: FAILED

"""

    status = "FAILED" if error else "SUCCESS"

    log_content += f"""Summary:
    Project: {project_name}
    Files Placed: {images_placed}/{num_files}
    Final Status: {status}

"""

    # Write to log file
    try:
        with open(log_path, 'w', encoding='utf-8') as f:
            f.write(log_content)
    except OSError as e:
        logger = logging.getLogger(__name__)
        logger.error(f"Failed to write log file {log_path}: {e}")


def generate_log_filename(project_name: str) -> str:
    """
    Generate standardized log filename.

    Args:
        project_name: Name of the sprite sheet

    Returns:
        Formatted log filename
    """
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return f"{project_name}_{timestamp}_combine.log"
