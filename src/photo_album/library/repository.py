"""Registry of all users and the active session."""

from typing import Dict, List, Optional

from ..core.config import get_config
from ..core.logger import audit_log, get_logger
from ..models.user import ADMIN_USERNAME, Admin, User
from ..storage.store import PersistenceStore

logger = get_logger(__name__)


class LibraryRepository:
    """Owns the loaded users, the admin roster and the logged-in session.

    Construct one per run and pass it to whatever needs it. Entity mutations
    are not saved automatically; call ``save_all`` once a unit of work is
    complete. ``logout`` (or leaving the ``with`` block) always saves.
    """

    def __init__(self, config=None, store: Optional[PersistenceStore] = None):
        self.config = config or get_config()
        self.store = store or PersistenceStore(self.config)

        state = self.store.load()
        self._admin: Admin = state.admin
        self._users: Dict[str, User] = state.users
        self._current_user: Optional[User] = None
        self._admin_session = False

    def __enter__(self) -> "LibraryRepository":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logout()

    @property
    def admin(self) -> Admin:
        return self._admin

    @property
    def current_user(self) -> Optional[User]:
        """The logged-in user, or None for no session or an admin session."""
        return self._current_user

    @property
    def is_admin_session(self) -> bool:
        return self._admin_session

    @property
    def stock_username(self) -> str:
        return self.config.library.stock_username

    def authenticate(self, username: str) -> bool:
        """Start a session for a loaded user or for the admin identity."""
        if username == ADMIN_USERNAME:
            self._current_user = None
            self._admin_session = True
            audit_log("login", username=username, role="admin")
            return True

        user = self._users.get(username)
        if user is None:
            logger.info(f"Login refused for unknown user '{username}'")
            return False

        self._current_user = user
        self._admin_session = False
        audit_log("login", username=username, role="user")
        return True

    def get_user(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def get_all_usernames(self) -> List[str]:
        """Usernames on the roster, in the order they were added."""
        return self._admin.usernames

    def create_user(self, username: str) -> Optional[User]:
        """Register and persist a new user; None if the name is blank, reserved or taken."""
        if not username or not username.strip():
            return None
        if username == ADMIN_USERNAME or username in self._users or username in self._admin:
            return None

        user = User(username, tag_types=self.config.library.default_tag_types)
        self._users[username] = user
        self._admin.add_username(username)

        self.store.save_user(user)
        self.store.save_admin(self._admin)

        audit_log("create_user", username=username)
        return user

    def delete_user(self, username: str) -> bool:
        """Remove a user and its record; the stock user cannot be deleted."""
        if username == self.stock_username:
            return False
        if username not in self._users and username not in self._admin:
            return False

        user = self._users.pop(username, None)
        self._admin.remove_username(username)
        self.store.delete_user_record(username)
        self.store.save_admin(self._admin)

        if user is not None and self._current_user is user:
            self._current_user = None

        audit_log("delete_user", username=username)
        return True

    def save_all(self) -> bool:
        """Persist the roster and every loaded user."""
        return self.store.save_all(self._admin, self._users.values())

    def logout(self) -> bool:
        """Save everything and end the session."""
        saved = self.save_all()
        if self._current_user is not None or self._admin_session:
            name = ADMIN_USERNAME if self._admin_session else self._current_user.username
            audit_log("logout", username=name)
        self._current_user = None
        self._admin_session = False
        return saved
