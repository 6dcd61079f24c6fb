# Storage/database.py
import logging
from pathlib import Path
from typing import Optional, Tuple

from sqlmodel import SQLModel, create_engine

import config
from Auth.credentials import CredentialStore
from Auth.models import Account
from errors import StorageError
from Feedback.models import FeedbackRecord
from Feedback.store import FeedbackStore
from Storage.records import JsonFileCollection, SqlCollection

logger = logging.getLogger(__name__)

USERS_FILE = "users.json"
FEEDBACK_FILE = "feedback.json"

_credentials: Optional[CredentialStore] = None
_feedback: Optional[FeedbackStore] = None


def open_stores(
    data_dir: Optional[Path] = None, database_url: Optional[str] = None
) -> Tuple[CredentialStore, FeedbackStore]:
    """Build both stores on the configured backend and read them once."""
    if data_dir is None and database_url is None:
        database_url = config.DATABASE_URL
    try:
        if database_url:
            engine = create_engine(
                database_url,
                echo=False,
                connect_args={"check_same_thread": False} if database_url.startswith("sqlite") else {},
            )
            SQLModel.metadata.create_all(engine)
            accounts = SqlCollection(engine, Account)
            feedback = SqlCollection(engine, FeedbackRecord)
            logger.info("Using SQL storage")
        else:
            data_dir = Path(data_dir or config.DATA_DIR)
            accounts = JsonFileCollection(data_dir / USERS_FILE, Account)
            feedback = JsonFileCollection(data_dir / FEEDBACK_FILE, FeedbackRecord)
            logger.info("Using JSON file storage in %s", data_dir)
        accounts.list_all()
        feedback.list_all()
    except Exception as e:
        raise StorageError(f"Could not initialise storage: {e}") from e
    return CredentialStore(accounts), FeedbackStore(feedback)


def init_db(data_dir: Optional[Path] = None, database_url: Optional[str] = None) -> None:
    global _credentials, _feedback
    _credentials, _feedback = open_stores(data_dir, database_url)


def get_credential_store() -> CredentialStore:
    if _credentials is None:
        raise StorageError("Storage not initialised")
    return _credentials


def get_feedback_store() -> FeedbackStore:
    if _feedback is None:
        raise StorageError("Storage not initialised")
    return _feedback
