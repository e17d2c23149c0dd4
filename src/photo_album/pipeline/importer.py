"""Turns image files on disk into photos and adds them to albums."""

from pathlib import Path
from typing import Optional, Union

from ..core.config import get_config
from ..core.logger import get_logger
from ..models.album import Album
from ..models.photo import Photo, import_photo
from ..utils.file_utils import FileUtils
from ..utils.image import ImageProcessor

logger = get_logger(__name__)


class PhotoImporter:
    """Builds photos from files, using the file's modification time as the photo date."""

    def __init__(self, config=None):
        self.config = config or get_config()
        self.image_processor = ImageProcessor(self.config.library.allowed_extensions)
        self.logger = logger

    def import_file(self, file_path: Union[str, Path]) -> Optional[Photo]:
        """Create a photo for a readable image file, or None if it cannot be imported."""
        path = Path(file_path).expanduser().resolve()

        validation = self.image_processor.validate_image(path)
        if not validation['is_valid']:
            logger.warning(f"Skipping {path}: {'; '.join(validation['errors'])}")
            return None

        try:
            last_modified = path.stat().st_mtime
        except OSError as e:
            logger.warning(f"Skipping {path}: cannot read modification time: {e}")
            return None

        return import_photo(path, last_modified)

    def import_directory(self, directory: Union[str, Path], album: Album) -> int:
        """Import every supported image directly inside directory into album.

        Files that fail to decode or are already in the album are skipped.
        Returns the number of photos added.
        """
        added = 0
        for file_path in FileUtils.find_files(directory, recursive=False):
            if not self.image_processor.is_supported_image(file_path):
                continue

            photo = self.import_file(file_path)
            if photo is not None and album.add_photo(photo):
                added += 1

        logger.info(f"Imported {added} photo(s) from {directory} into album '{album.name}'")
        return added
