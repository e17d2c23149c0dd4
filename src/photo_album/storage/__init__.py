"""Persistence of the admin roster and user records."""

from .schemas import SCHEMA_VERSION, AdminRecord, UserRecord
from .store import LibraryState, PersistenceStore

__all__ = [
    'SCHEMA_VERSION',
    'AdminRecord',
    'UserRecord',
    'LibraryState',
    'PersistenceStore',
]
