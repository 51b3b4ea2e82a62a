"""
Exceptions raised by the SpriteSheet Combine pipeline.
"""

from pathlib import Path
from typing import Optional


class CombineError(Exception):
    """Base class for every failure of a combine operation."""


class DecodeError(CombineError):
    """A source image is missing, unreadable or not a PNG."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not decode {path}: {reason}")
        self.path = path
        self.reason = reason


class EmptyInputError(CombineError, ValueError):
    """No image descriptors were supplied."""

    def __init__(self, message: str = "Cannot combine an empty list of images"):
        super().__init__(message)


class WriteError(CombineError):
    """The sprite sheet could not be encoded or written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
        self.reason = reason


class LayoutError(CombineError):
    """A layout file is malformed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class ConfigError(CombineError):
    """A config file cannot be read or is not valid JSON."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
