"""Photo import pipeline."""

from .importer import PhotoImporter

__all__ = [
    'PhotoImporter',
]
