"""Album model and the per-user photo table albums point into."""

from datetime import datetime
from typing import Dict, Iterator, List, Optional

from photo_album.models.photo import Photo


class PhotoTable:
    """Photos of one user keyed by file path, with a count of albums listing each.

    Albums hold paths into the table, so a photo listed in several albums is a
    single object and edits to its caption or tags show up everywhere. An entry
    is dropped once the last album releases it.
    """

    def __init__(self):
        self._photos: Dict[str, Photo] = {}
        self._refs: Dict[str, int] = {}

    def acquire(self, photo: Photo) -> Photo:
        """Register one more album reference and return the shared instance."""
        shared = self._photos.setdefault(photo.file_path, photo)
        self._refs[photo.file_path] = self._refs.get(photo.file_path, 0) + 1
        return shared

    def release(self, file_path: str) -> None:
        """Drop one album reference; forget the photo when none remain."""
        count = self._refs.get(file_path, 0) - 1
        if count > 0:
            self._refs[file_path] = count
        else:
            self._refs.pop(file_path, None)
            self._photos.pop(file_path, None)

    def get(self, file_path: str) -> Optional[Photo]:
        return self._photos.get(file_path)

    def photos(self) -> List[Photo]:
        return list(self._photos.values())

    def __contains__(self, file_path: str) -> bool:
        return file_path in self._photos

    def __len__(self) -> int:
        return len(self._photos)


class Album:
    """Named, ordered collection of photos without duplicate paths."""

    def __init__(self, name: str, table: Optional[PhotoTable] = None):
        self.name = name
        self._table = table if table is not None else PhotoTable()
        self._paths: List[str] = []

    @property
    def photos(self) -> List[Photo]:
        """Copy of the album's photos in insertion order."""
        return [self._table.get(path) for path in self._paths]

    @property
    def photo_count(self) -> int:
        return len(self._paths)

    @property
    def earliest_date(self) -> Optional[datetime]:
        """Oldest photo date, or None for an empty album."""
        if not self._paths:
            return None
        return min(photo.date_time for photo in self.photos)

    @property
    def latest_date(self) -> Optional[datetime]:
        """Newest photo date, or None for an empty album."""
        if not self._paths:
            return None
        return max(photo.date_time for photo in self.photos)

    def add_photo(self, photo: Photo) -> bool:
        """Append a photo; returns False if one with the same path is already here.

        If the owner already knows the path from another album, that instance is
        shared rather than the one passed in.
        """
        if photo.file_path in self._paths:
            return False
        self._table.acquire(photo)
        self._paths.append(photo.file_path)
        return True

    def remove_photo(self, photo: Photo) -> bool:
        """Remove a photo; returns False if it is not in this album."""
        if photo.file_path not in self._paths:
            return False
        self._paths.remove(photo.file_path)
        self._table.release(photo.file_path)
        return True

    def clear(self) -> None:
        """Release every photo, as when the album is deleted."""
        for path in self._paths:
            self._table.release(path)
        self._paths = []

    def __contains__(self, photo: Photo) -> bool:
        return photo.file_path in self._paths

    def __iter__(self) -> Iterator[Photo]:
        return iter(self.photos)

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Album):
            return NotImplemented
        return self.name == other.name

    __hash__ = None

    def __repr__(self) -> str:
        return f"<Album(name={self.name!r}, photos={len(self._paths)})>"
