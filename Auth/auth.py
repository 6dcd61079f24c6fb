# Auth/auth.py
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from Auth.security import decode_token
from errors import AuthError

# auto_error=False: a missing header must produce our own "Unauthorized"
bearer = HTTPBearer(auto_error=False)


def get_current_claims(
    request: Request,
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Dict[str, Any]:
    """
    Auth gate for protected routes.

    Reads ``Authorization: Bearer <token>``, verifies signature and expiry and
    stores the claims on ``request.state.user``. Claims are not re-checked
    against the credential store and the token is never refreshed.
    """
    if creds is None or not creds.credentials:
        raise AuthError("Unauthorized")
    claims = decode_token(creds.credentials)
    request.state.user = claims
    return claims
