"""Tests for photo search."""

from datetime import date, datetime

import pytest

from photo_album.library import PhotoSearch
from photo_album.models import Photo, Tag, User

NYC = Tag("location", "NYC")
PARIS = Tag("location", "Paris")
SAM = Tag("person", "Sam")


@pytest.fixture
def alice():
    """User whose photos are spread over two albums, one of them listed in both."""
    user = User("alice")
    trip = user.create_album("Trip")
    home = user.create_album("Home")

    a = Photo("/photos/a.jpg", datetime(2023, 6, 1, 0, 0, 0), tags=[NYC, SAM])
    b = Photo("/photos/b.jpg", datetime(2023, 6, 5, 12, 0, 0), tags=[NYC])
    c = Photo("/photos/c.jpg", datetime(2023, 6, 10, 23, 59, 59), tags=[PARIS, SAM])
    d = Photo("/photos/d.jpg", datetime(2023, 6, 11, 0, 0, 0), tags=[Tag("location", "nyc")])

    trip.add_photo(a)
    trip.add_photo(b)
    home.add_photo(c)
    home.add_photo(a)
    home.add_photo(d)
    return user


def names(photos):
    return [photo.file_name for photo in photos]


@pytest.mark.unit
class TestDateSearch:
    """Searching by a range of calendar days."""

    def test_endpoints_are_inclusive(self, alice):
        results = PhotoSearch(alice).by_date_range(date(2023, 6, 1), date(2023, 6, 10))

        assert names(results) == ["a.jpg", "b.jpg", "c.jpg"]

    def test_day_after_end_is_excluded(self, alice):
        results = PhotoSearch(alice).by_date_range(date(2023, 6, 10), date(2023, 6, 10))

        assert names(results) == ["c.jpg"]

    def test_time_of_day_in_bounds_is_ignored(self, alice):
        results = PhotoSearch(alice).by_date_range(
            datetime(2023, 6, 1, 18, 0, 0), datetime(2023, 6, 5, 1, 0, 0)
        )

        assert names(results) == ["a.jpg", "b.jpg"]

    def test_no_matches(self, alice):
        assert PhotoSearch(alice).by_date_range(date(2020, 1, 1), date(2020, 12, 31)) == []

    def test_start_after_end_is_invalid(self, alice):
        assert PhotoSearch(alice).by_date_range(date(2023, 6, 10), date(2023, 6, 1)) is None

    @pytest.mark.parametrize("start,end", [
        (None, date(2023, 6, 1)),
        (date(2023, 6, 1), None),
        (None, None),
    ])
    def test_missing_bound_is_invalid(self, alice, start, end):
        assert PhotoSearch(alice).by_date_range(start, end) is None


@pytest.mark.unit
class TestTagSearch:
    """Searching by one or two tags."""

    def test_single_tag(self, alice):
        assert names(PhotoSearch(alice).by_tag("location", "NYC")) == ["a.jpg", "b.jpg"]

    def test_tag_match_is_case_sensitive(self, alice):
        assert names(PhotoSearch(alice).by_tag("location", "nyc")) == ["d.jpg"]
        assert PhotoSearch(alice).by_tag("Location", "NYC") == []

    def test_all_tags(self, alice):
        assert names(PhotoSearch(alice).by_all_tags(NYC, SAM)) == ["a.jpg"]

    def test_any_tag(self, alice):
        assert names(PhotoSearch(alice).by_any_tag(PARIS, SAM)) == ["a.jpg", "c.jpg"]

    def test_all_is_intersection_and_any_is_union(self, alice):
        search = PhotoSearch(alice)
        with_nyc = set(search.by_tag(NYC.name, NYC.value))
        with_sam = set(search.by_tag(SAM.name, SAM.value))

        assert set(search.by_all_tags(NYC, SAM)) == with_nyc & with_sam
        assert set(search.by_any_tag(NYC, SAM)) == with_nyc | with_sam

    def test_photo_in_two_albums_appears_once(self, alice):
        results = PhotoSearch(alice).by_tag("person", "Sam")

        assert names(results) == ["a.jpg", "c.jpg"]

    def test_results_are_the_stored_photos(self, alice):
        result = PhotoSearch(alice).by_tag("location", "Paris")[0]
        result.caption = "Eiffel"

        assert result is alice.find_photo("/photos/c.jpg")
        assert alice.get_album("Home").photos[0].caption == "Eiffel"


@pytest.mark.unit
class TestSaveAsAlbum:
    """Turning search results into an album."""

    def test_creates_album_with_results(self, alice):
        search = PhotoSearch(alice)
        album = search.save_as_album("Sam", search.by_tag("person", "Sam"))

        assert album is not None
        assert names(album.photos) == ["a.jpg", "c.jpg"]
        assert alice.get_album("Sam") is album
        assert album.photos[0] is alice.get_album("Trip").photos[0]

    def test_existing_name_is_rejected(self, alice):
        search = PhotoSearch(alice)

        assert search.save_as_album("Trip", search.by_tag("location", "Paris")) is None
        assert names(alice.get_album("Trip").photos) == ["a.jpg", "b.jpg"]

    def test_empty_results_make_empty_album(self, alice):
        album = PhotoSearch(alice).save_as_album("Nothing", [])

        assert album is not None
        assert album.photo_count == 0
