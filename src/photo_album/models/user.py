"""User and admin roster models."""

from typing import Iterable, List, Optional

from photo_album.models.album import Album, PhotoTable
from photo_album.models.photo import Photo

ADMIN_USERNAME = "admin"
STOCK_USERNAME = "stock"
DEFAULT_TAG_TYPES = ("location", "person")


class User:
    """A library account with its albums and tag-type vocabulary."""

    def __init__(self, username: str, tag_types: Optional[Iterable[str]] = None):
        self._username = username
        self._albums: List[Album] = []
        self._photos = PhotoTable()
        self._tag_types: List[str] = []
        for tag_type in (DEFAULT_TAG_TYPES if tag_types is None else tag_types):
            self.add_tag_type(tag_type)

    @property
    def username(self) -> str:
        return self._username

    @property
    def albums(self) -> List[Album]:
        """Copy of the album list in creation order."""
        return list(self._albums)

    @property
    def tag_types(self) -> List[str]:
        return list(self._tag_types)

    def get_album(self, name: str) -> Optional[Album]:
        """Find an album by exact name."""
        for album in self._albums:
            if album.name == name:
                return album
        return None

    def create_album(self, name: str) -> Optional[Album]:
        """Create an album; returns None if the name is blank or already used."""
        if not name or not name.strip() or self.get_album(name) is not None:
            return None

        album = Album(name, self._photos)
        self._albums.append(album)
        return album

    def delete_album(self, name: str) -> bool:
        """Delete an album and release its photos."""
        album = self.get_album(name)
        if album is None:
            return False

        album.clear()
        self._albums.remove(album)
        return True

    def rename_album(self, old_name: str, new_name: str) -> bool:
        """Rename in place; fails if old_name is missing or new_name is taken."""
        album = self.get_album(old_name)
        if album is None or not new_name or not new_name.strip():
            return False
        if self.get_album(new_name) is not None:
            return False

        album.name = new_name
        return True

    def add_tag_type(self, tag_type: str) -> bool:
        """Add a tag type to the vocabulary; returns False if blank or already known."""
        if not tag_type or not tag_type.strip() or tag_type in self._tag_types:
            return False
        self._tag_types.append(tag_type)
        return True

    def _owns(self, album: Album) -> bool:
        return any(album is own for own in self._albums)

    def find_photo(self, file_path: str) -> Optional[Photo]:
        """Look up a photo held by any of this user's albums."""
        return self._photos.get(file_path)

    def all_photos(self) -> List[Photo]:
        """Every photo across all albums, first occurrence wins, in album order."""
        seen = set()
        result = []
        for album in self._albums:
            for photo in album.photos:
                if photo.file_path not in seen:
                    seen.add(photo.file_path)
                    result.append(photo)
        return result

    def copy_photo(self, photo: Photo, destination: Album) -> bool:
        """List a photo in another album as well."""
        if not self._owns(destination):
            return False
        return destination.add_photo(photo)

    def move_photo(self, photo: Photo, source: Album, destination: Album) -> bool:
        """Move a photo between albums; nothing changes if either step would fail."""
        if source is destination or not self._owns(source) or not self._owns(destination):
            return False
        if photo not in source or photo in destination:
            return False

        destination.add_photo(photo)
        source.remove_photo(photo)
        return True

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, User):
            return NotImplemented
        return self._username == other._username

    def __hash__(self) -> int:
        return hash(self._username)

    def __repr__(self) -> str:
        return f"<User(username={self._username!r}, albums={len(self._albums)})>"


class Admin:
    """Roster of every valid username.

    The reserved admin identifier authenticates an administrative session and is
    never itself a user. The stock user is on the roster from the start.
    """

    def __init__(self, usernames: Optional[Iterable[str]] = None):
        self._usernames: List[str] = []
        for username in (usernames if usernames is not None else [STOCK_USERNAME]):
            self.add_username(username)

    @staticmethod
    def admin_username() -> str:
        return ADMIN_USERNAME

    @property
    def usernames(self) -> List[str]:
        return list(self._usernames)

    def add_username(self, username: str) -> bool:
        """Add a username; returns False if present or reserved."""
        if username in self._usernames or username == ADMIN_USERNAME:
            return False
        self._usernames.append(username)
        return True

    def remove_username(self, username: str) -> bool:
        if username not in self._usernames:
            return False
        self._usernames.remove(username)
        return True

    def __contains__(self, username: str) -> bool:
        return username in self._usernames

    def __repr__(self) -> str:
        return f"<Admin(usernames={self._usernames!r})>"
