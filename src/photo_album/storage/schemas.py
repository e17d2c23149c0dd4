"""Record schemas for the on-disk admin and user files.

Each entity has an explicit record type and an encode/decode pair so the file
format does not depend on the in-memory object layout. Albums store photo paths
that index into the user's ``photos`` list, mirroring the photo table.
"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from photo_album.models.photo import Photo, Tag
from photo_album.models.user import Admin, User

SCHEMA_VERSION = 1


class VersionedRecord(BaseModel):
    """Base for top-level records."""

    schema_version: int = Field(default=SCHEMA_VERSION, description="Record format version")

    @field_validator('schema_version')
    @classmethod
    def check_version(cls, value: int) -> int:
        if value < 1 or value > SCHEMA_VERSION:
            raise ValueError(f"Unsupported schema version: {value}")
        return value


class TagRecord(BaseModel):
    """Tag record schema."""
    name: str
    value: str


class PhotoRecord(BaseModel):
    """Photo record schema."""
    file_path: str
    caption: str
    date_time: datetime
    tags: List[TagRecord] = []


class AlbumRecord(BaseModel):
    """Album record schema; photos are file paths in display order."""
    name: str
    photos: List[str] = []


class UserRecord(VersionedRecord):
    """Complete record of one user."""
    username: str
    tag_types: List[str] = []
    photos: List[PhotoRecord] = []
    albums: List[AlbumRecord] = []


class AdminRecord(VersionedRecord):
    """Roster of valid usernames."""
    usernames: List[str] = []


def encode_tag(tag: Tag) -> TagRecord:
    return TagRecord(name=tag.name, value=tag.value)


def decode_tag(record: TagRecord) -> Tag:
    return Tag(record.name, record.value)


def encode_photo(photo: Photo) -> PhotoRecord:
    return PhotoRecord(
        file_path=photo.file_path,
        caption=photo.caption,
        date_time=photo.date_time,
        tags=[encode_tag(tag) for tag in photo.tags],
    )


def decode_photo(record: PhotoRecord) -> Photo:
    return Photo(
        record.file_path,
        record.date_time,
        caption=record.caption,
        tags=[decode_tag(tag) for tag in record.tags],
    )


def encode_user(user: User) -> UserRecord:
    """Build the record for a user, writing each shared photo once."""
    return UserRecord(
        username=user.username,
        tag_types=user.tag_types,
        photos=[encode_photo(photo) for photo in user.all_photos()],
        albums=[
            AlbumRecord(name=album.name, photos=[photo.file_path for photo in album.photos])
            for album in user.albums
        ],
    )


def decode_user(record: UserRecord) -> User:
    """Rebuild a user from its record.

    Raises ValueError when the record contradicts the model's invariants, such
    as duplicate album names or an album listing an unknown photo.
    """
    user = User(record.username, tag_types=record.tag_types)
    photos: Dict[str, Photo] = {}
    for photo_record in record.photos:
        if photo_record.file_path in photos:
            raise ValueError(f"Duplicate photo record: {photo_record.file_path}")
        photos[photo_record.file_path] = decode_photo(photo_record)

    for album_record in record.albums:
        album = user.create_album(album_record.name)
        if album is None:
            raise ValueError(f"Invalid or duplicate album name: {album_record.name!r}")
        for path in album_record.photos:
            if path not in photos:
                raise ValueError(f"Album {album_record.name!r} references unknown photo: {path}")
            if not album.add_photo(photos[path]):
                raise ValueError(f"Album {album_record.name!r} lists {path} twice")

    return user


def encode_admin(admin: Admin) -> AdminRecord:
    return AdminRecord(usernames=admin.usernames)


def decode_admin(record: AdminRecord) -> Admin:
    return Admin(usernames=record.usernames)
