"""Entity models for the photo album library."""

from .photo import Photo, Tag, import_photo
from .album import Album, PhotoTable
from .user import ADMIN_USERNAME, DEFAULT_TAG_TYPES, STOCK_USERNAME, Admin, User

__all__ = [
    'Photo',
    'Tag',
    'import_photo',
    'Album',
    'PhotoTable',
    'User',
    'Admin',
    'ADMIN_USERNAME',
    'STOCK_USERNAME',
    'DEFAULT_TAG_TYPES',
]
