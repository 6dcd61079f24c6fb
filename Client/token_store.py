# Client/token_store.py
import os
from pathlib import Path
from typing import Optional

import config


class TokenStore:
    """Owner token kept in a file so it survives restarts of the client."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or config.TOKEN_FILE)

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        token = self.path.read_text(encoding="utf-8").strip()
        return token or None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        os.chmod(self.path, 0o600)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
