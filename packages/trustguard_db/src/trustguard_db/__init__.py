"""Database layer: SQLModel models, session management, storage errors."""

from trustguard_db.client import get_engine, get_session, init_db
from trustguard_db.errors import StorageError, StorageErrorCode
from trustguard_db.models import InterestArea, UserProfile, WaitlistEntry

__all__ = [
    "InterestArea",
    "StorageError",
    "StorageErrorCode",
    "UserProfile",
    "WaitlistEntry",
    "get_engine",
    "get_session",
    "init_db",
]
