# Auth/security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

import config
from errors import AuthError

logger = logging.getLogger(__name__)

# fixed work factor; changing it only affects newly created hashes
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__time_cost=3,
    argon2__memory_cost=65536,
    argon2__parallelism=2,
)

PEPPER = config.PEPPER
SECRET_KEY = config.JWT_SECRET
ALGORITHM = config.JWT_ALGORITHM
ACCESS_TOKEN_EXPIRE = timedelta(days=config.TOKEN_EXPIRE_DAYS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password + PEPPER)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain + PEPPER, hashed)


def create_access_token(account, issued_at: Optional[datetime] = None) -> str:
    """Sign ``{id, email, role}`` with a fixed 7-day horizon from ``issued_at``."""
    issued = issued_at or datetime.now(timezone.utc)
    to_encode = {
        "id": account.id,
        "email": account.email,
        "role": account.role,
        "iat": issued,
        "exp": issued + ACCESS_TOKEN_EXPIRE,
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Return the embedded claims; signature and expiry are the only checks."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.info("Rejected token: %s", e)
        raise AuthError("Invalid token")


def using_default_secret() -> bool:
    return SECRET_KEY == config.DEFAULT_JWT_SECRET
