"""Utility modules for the photo album library."""

from .image import ImageProcessor
from .file_utils import FileUtils
from .date_utils import DateUtils, parse_date_string

__all__ = [
    'ImageProcessor',
    'FileUtils',
    'DateUtils',
    'parse_date_string',
]
