"""Durable storage of the admin roster and user records."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional
from urllib.parse import quote, unquote

from ..core.config import get_config
from ..core.logger import get_logger
from ..models.user import Admin, User
from ..pipeline.importer import PhotoImporter
from ..utils.file_utils import FileUtils
from .schemas import (
    AdminRecord, UserRecord, decode_admin, decode_user, encode_admin, encode_user
)

logger = get_logger(__name__)


@dataclass
class LibraryState:
    """Everything read by a load: the roster and the users that could be read."""
    admin: Admin
    users: Dict[str, User] = field(default_factory=dict)


class PersistenceStore:
    """Reads and writes one JSON record per user plus one admin record.

    Writes replace whole records atomically. Failures are logged and reported as
    False; a user whose record cannot be read is left out of the loaded state
    without affecting anyone else.
    """

    def __init__(self, config=None, importer: Optional[PhotoImporter] = None):
        self.config = config or get_config()
        self.importer = importer or PhotoImporter(self.config)

    @property
    def admin_file(self) -> Path:
        return self.config.admin_file

    @property
    def users_dir(self) -> Path:
        return self.config.users_dir

    def user_file(self, username: str) -> Path:
        """Record path for a username; percent-encoding keeps any name a single safe file name."""
        return self.users_dir / f"{quote(username, safe='')}{self.config.storage.record_suffix}"

    def load(self) -> LibraryState:
        """Load the roster and every readable user, provisioning the stock account."""
        FileUtils.ensure_directory(self.users_dir)

        admin = self._load_admin()
        state = LibraryState(admin=admin)

        for username in admin.usernames:
            user = self.load_user(username)
            if user is not None:
                state.users[username] = user

        self._provision_stock(state)

        logger.info(f"Loaded {len(state.users)} of {len(admin.usernames)} user(s) from {self.config.data_dir}")
        return state

    def _load_admin(self) -> Admin:
        stock = self.config.library.stock_username

        if not self.admin_file.exists():
            admin = Admin(usernames=[stock])
            self.save_admin(admin)
            return admin

        try:
            record = AdminRecord.model_validate_json(self.admin_file.read_text(encoding='utf-8'))
            return decode_admin(record)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load admin record {self.admin_file}: {e}")
            return self._rebuild_admin()

    def _rebuild_admin(self) -> Admin:
        """Recover the roster from the user records present on disk."""
        admin = Admin(usernames=[self.config.library.stock_username])
        suffix = self.config.storage.record_suffix

        for record_path in FileUtils.find_files(self.users_dir, f"*{suffix}", recursive=False):
            admin.add_username(unquote(record_path.name[:-len(suffix)]))

        logger.warning(f"Rebuilt admin roster from user records: {admin.usernames}")
        return admin

    def load_user(self, username: str) -> Optional[User]:
        """Read one user record; returns None if it is missing or unreadable."""
        path = self.user_file(username)

        if not path.exists():
            logger.warning(f"No record for user '{username}' at {path}")
            return None

        try:
            record = UserRecord.model_validate_json(path.read_text(encoding='utf-8'))
            if record.username != username:
                raise ValueError(f"record belongs to '{record.username}'")
            return decode_user(record)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load user '{username}' from {path}: {e}")
            return None

    def _provision_stock(self, state: LibraryState) -> None:
        """Make sure the stock user and album exist; fill the album once while it is empty."""
        stock_name = self.config.library.stock_username
        album_name = self.config.library.stock_album

        stock = state.users.get(stock_name)
        changed = False

        if stock is None:
            stock = User(stock_name, tag_types=self.config.library.default_tag_types)
            state.users[stock_name] = stock
            changed = True

        if state.admin.add_username(stock_name):
            self.save_admin(state.admin)

        album = stock.get_album(album_name)
        if album is None:
            album = stock.create_album(album_name)
            changed = True

        if album.photo_count == 0:
            if self.importer.import_directory(self.config.stock_images_dir, album) > 0:
                changed = True

        if changed:
            self.save_user(stock)

    def save_admin(self, admin: Admin) -> bool:
        """Overwrite the admin record."""
        content = encode_admin(admin).model_dump_json(indent=self.config.storage.indent)
        if not FileUtils.atomic_write(self.admin_file, content):
            logger.error("Error saving admin roster")
            return False
        return True

    def save_user(self, user: User) -> bool:
        """Overwrite one user's record with all of its albums, photos and tags."""
        content = encode_user(user).model_dump_json(indent=self.config.storage.indent)
        if not FileUtils.atomic_write(self.user_file(user.username), content):
            logger.error(f"Error saving user '{user.username}'")
            return False
        return True

    def save_all(self, admin: Admin, users: Iterable[User]) -> bool:
        """Save the roster and every user, continuing past individual failures."""
        ok = self.save_admin(admin)
        for user in users:
            ok = self.save_user(user) and ok
        return ok

    def delete_user_record(self, username: str) -> bool:
        """Remove a user's record file if it exists."""
        return FileUtils.safe_delete(self.user_file(username))
