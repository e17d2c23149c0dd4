"""Date-range and tag searches over one user's photos."""

from datetime import date
from typing import Callable, Iterable, List, Optional

from ..core.logger import get_logger
from ..models.album import Album
from ..models.photo import Photo, Tag
from ..models.user import User
from ..utils.date_utils import DateUtils

logger = get_logger(__name__)


class PhotoSearch:
    """Read-only queries across every album of a user.

    Each query walks the albums in order and returns the matching photos
    themselves, each at most once, in the order first encountered.
    """

    def __init__(self, user: User):
        self.user = user

    def _collect(self, predicate: Callable[[Photo], bool]) -> List[Photo]:
        return [photo for photo in self.user.all_photos() if predicate(photo)]

    def by_date_range(self, start: Optional[date], end: Optional[date]) -> Optional[List[Photo]]:
        """Photos dated on any day from start through end, inclusive.

        Returns None if a bound is missing or start is after end.
        """
        start = DateUtils.to_date(start)
        end = DateUtils.to_date(end)
        if not DateUtils.is_valid_date_range(start, end):
            logger.debug(f"Rejected date range {start} .. {end}")
            return None

        lower, upper = DateUtils.day_bounds(start, end)
        return self._collect(lambda photo: lower <= photo.date_time < upper)

    def by_tag(self, name: str, value: str) -> List[Photo]:
        """Photos carrying the exact (name, value) tag."""
        tag = Tag(name, value)
        return self._collect(lambda photo: tag in photo.tags)

    def by_all_tags(self, first: Tag, second: Tag) -> List[Photo]:
        """Photos carrying both tags."""
        def matches(photo: Photo) -> bool:
            tags = photo.tags
            return first in tags and second in tags

        return self._collect(matches)

    def by_any_tag(self, first: Tag, second: Tag) -> List[Photo]:
        """Photos carrying at least one of the tags."""
        def matches(photo: Photo) -> bool:
            tags = photo.tags
            return first in tags or second in tags

        return self._collect(matches)

    def save_as_album(self, name: str, photos: Iterable[Photo]) -> Optional[Album]:
        """Create an album holding the given photos.

        Returns None if the album name is unavailable. Photos already in the
        new album are skipped.
        """
        album = self.user.create_album(name)
        if album is None:
            return None

        for photo in photos:
            album.add_photo(photo)

        logger.info(f"Created album '{name}' for '{self.user.username}' with {album.photo_count} photo(s)")
        return album
