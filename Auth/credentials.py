# Auth/credentials.py
import logging
import threading
from typing import Optional

import config
from Auth.models import Account
from Auth.security import hash_password, verify_password
from errors import AuthError, ConflictError, ValidationError
from Storage.records import Collection

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class CredentialStore:
    """Owner accounts keyed by normalised email."""

    def __init__(self, accounts: Collection[Account]):
        self.accounts = accounts
        self._lock = threading.Lock()

    def signup(self, email: Optional[str], password: Optional[str], name: Optional[str] = None) -> Account:
        if not email or not email.strip() or not password:
            raise ValidationError("Missing email or password")
        email = normalize_email(email)
        # lookup and append under one lock so two signups cannot both pass the check
        with self._lock:
            if self.accounts.find_by("email", email):
                raise ConflictError("User exists")
            account = Account(
                email=email,
                name=name or "",
                password_hash=hash_password(password),
                role=config.OWNER_ROLE,
            )
            account = self.accounts.append(account)
        logger.info("Account #%s created for %s", account.id, email)
        return account

    def login(self, email: Optional[str], password: Optional[str]) -> Account:
        email = normalize_email(email)
        account = self.accounts.find_by("email", email) if email else None
        if not account or not verify_password(password or "", account.password_hash):
            logger.info("Failed login for %s", email or "<empty>")
            raise AuthError(INVALID_CREDENTIALS)
        return account

    def find(self, email: Optional[str]) -> Optional[Account]:
        return self.accounts.find_by("email", normalize_email(email))
