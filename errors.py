# errors.py
"""Error taxonomy shared by the stores, the auth gate and the HTTP layer.

Every error carries a human-readable ``message`` and the HTTP status it maps
to; ``main.py`` turns them into ``{"error": message}`` responses.
"""


class SehYaatriError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SehYaatriError):
    """Missing or malformed required input."""
    status_code = 400


class ConflictError(SehYaatriError):
    """Uniqueness violation (e.g. email already registered)."""
    status_code = 400


class AuthError(SehYaatriError):
    """Bad credentials or a missing/invalid/expired token."""
    status_code = 401


class StorageError(SehYaatriError):
    status_code = 500
