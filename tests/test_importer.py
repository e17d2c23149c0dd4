"""Tests for importing image files."""

from datetime import datetime

import pytest

from photo_album.models import Album
from photo_album.pipeline import PhotoImporter
from photo_album.utils import ImageProcessor


@pytest.fixture
def importer(test_config):
    return PhotoImporter(test_config)


@pytest.mark.unit
class TestImageProcessor:
    """Image file checks."""

    def test_supported_extensions(self):
        processor = ImageProcessor()

        assert processor.is_supported_image("a.JPG")
        assert processor.is_supported_image("b.png")
        assert not processor.is_supported_image("c.txt")

    def test_custom_extensions(self):
        processor = ImageProcessor([".PNG"])

        assert processor.is_supported_image("b.png")
        assert not processor.is_supported_image("a.jpg")

    def test_validate_real_image(self, temp_dir, make_image):
        validation = ImageProcessor().validate_image(make_image(temp_dir / "a.jpg"))

        assert validation['is_valid'] is True
        assert validation['errors'] == []

    def test_validate_missing_file(self, temp_dir):
        validation = ImageProcessor().validate_image(temp_dir / "missing.jpg")

        assert validation['is_valid'] is False
        assert validation['exists'] is False

    def test_validate_corrupt_file(self, temp_dir):
        path = temp_dir / "broken.png"
        path.write_bytes(b"\x00\x01garbage")

        validation = ImageProcessor().validate_image(path)

        assert validation['is_valid'] is False
        assert validation['is_readable'] is False


@pytest.mark.unit
class TestPhotoImporter:
    """Building photos from files."""

    def test_import_file(self, importer, temp_dir, make_image):
        path = make_image(temp_dir / "holiday.jpg", datetime(2023, 6, 10, 14, 45, 5))

        photo = importer.import_file(path)

        assert photo.file_path == str(path.resolve())
        assert photo.caption == "holiday.jpg"
        assert photo.date_time == datetime(2023, 6, 10, 14, 45, 5)
        assert photo.tags == []

    def test_import_relative_path(self, importer, temp_dir, make_image, monkeypatch):
        make_image(temp_dir / "holiday.jpg")
        monkeypatch.chdir(temp_dir)

        photo = importer.import_file("holiday.jpg")

        assert photo.file_path == str((temp_dir / "holiday.jpg").resolve())

    def test_import_rejects_non_images(self, importer, temp_dir):
        text_file = temp_dir / "notes.txt"
        text_file.write_text("hello")
        fake_jpeg = temp_dir / "fake.jpg"
        fake_jpeg.write_text("hello")

        assert importer.import_file(text_file) is None
        assert importer.import_file(fake_jpeg) is None
        assert importer.import_file(temp_dir / "missing.jpg") is None

    def test_import_directory(self, importer, temp_dir, make_image):
        make_image(temp_dir / "b.jpg")
        make_image(temp_dir / "a.png")
        make_image(temp_dir / "sub" / "c.jpg")
        (temp_dir / "readme.txt").write_text("skip me")
        album = Album("Imported")

        assert importer.import_directory(temp_dir, album) == 2
        assert [photo.file_name for photo in album.photos] == ["a.png", "b.jpg"]

    def test_import_directory_twice_adds_nothing(self, importer, temp_dir, make_image):
        make_image(temp_dir / "a.jpg")
        album = Album("Imported")
        importer.import_directory(temp_dir, album)

        assert importer.import_directory(temp_dir, album) == 0
        assert album.photo_count == 1

    def test_import_missing_directory(self, importer, temp_dir):
        assert importer.import_directory(temp_dir / "nowhere", Album("Imported")) == 0
