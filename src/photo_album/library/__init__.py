"""User registry, session handling and photo search."""

from .repository import LibraryRepository
from .search import PhotoSearch

__all__ = [
    'LibraryRepository',
    'PhotoSearch',
]
