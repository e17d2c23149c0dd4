"""Photo Album - personal photo library with albums, tags and search."""

__version__ = "0.1.0"
__author__ = "Photo Album Team"
__description__ = "Personal photo library with albums, tag metadata and date/tag search"

from .core.config import Config, get_config
from .core.logger import get_logger, setup_logging
from .models import Admin, Album, Photo, Tag, User, import_photo
from .library.repository import LibraryRepository
from .library.search import PhotoSearch
from .storage.store import PersistenceStore

__all__ = [
    'Config',
    'get_config',
    'get_logger',
    'setup_logging',
    'Admin',
    'Album',
    'Photo',
    'Tag',
    'User',
    'import_photo',
    'LibraryRepository',
    'PhotoSearch',
    'PersistenceStore',
]
