"""Photo and tag models."""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from photo_album.utils.date_utils import DateUtils, Timestamp


@dataclass(frozen=True)
class Tag:
    """A (name, value) pair such as ("location", "New Brunswick").

    Tags compare by exact, case-sensitive match on both fields and double as
    search predicates.
    """

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


class Photo:
    """A photo file and its metadata.

    Identity is the absolute file path alone; caption, date and tags may change
    without affecting equality.
    """

    def __init__(
        self,
        file_path: str,
        date_time: Timestamp,
        caption: Optional[str] = None,
        tags: Optional[List[Tag]] = None,
    ):
        self._file_path = str(file_path)
        self._date_time = DateUtils.normalize_timestamp(date_time)
        self.caption = caption if caption is not None else os.path.basename(self._file_path)
        self._tags: List[Tag] = []
        for tag in tags or []:
            self.add_tag(tag)

    @property
    def file_path(self) -> str:
        """Absolute path of the photo file."""
        return self._file_path

    @property
    def file_name(self) -> str:
        """Base name of the photo file."""
        return os.path.basename(self._file_path)

    @property
    def date_time(self) -> datetime:
        """Date the photo was taken, to whole seconds."""
        return self._date_time

    @property
    def tags(self) -> List[Tag]:
        """Copy of the photo's tags in the order they were added."""
        return list(self._tags)

    def add_tag(self, tag: Tag) -> bool:
        """Add a tag; returns False if an equal tag is already present."""
        if tag in self._tags:
            return False
        self._tags.append(tag)
        return True

    def remove_tag(self, tag: Tag) -> bool:
        """Remove a tag; returns False if it was not present."""
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        return True

    def tags_by_name(self, name: str) -> List[Tag]:
        """Get all tags of the given type."""
        return [tag for tag in self._tags if tag.name == name]

    def has_tag(self, name: str, value: str) -> bool:
        """Check if the photo carries the exact (name, value) tag."""
        return Tag(name, value) in self._tags

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Photo):
            return NotImplemented
        return self._file_path == other._file_path

    def __hash__(self) -> int:
        return hash(self._file_path)

    def __repr__(self) -> str:
        return f"<Photo(file_path={self._file_path!r}, date_time={self._date_time.isoformat()})>"


def import_photo(absolute_path: Union[str, Path], last_modified: Timestamp) -> Photo:
    """Create a photo for a file whose path and modification time are already known.

    The caption defaults to the file's base name.
    """
    return Photo(str(absolute_path), last_modified)
