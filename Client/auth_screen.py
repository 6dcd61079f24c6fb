# Client/auth_screen.py
from typing import Optional

from Client.api import ApiClient, ApiError
from Client.token_store import TokenStore

MODES = ("login", "signup")


class AuthScreen:
    """
    Sign-in / sign-up screen.

    Both modes send email, password and name; name is ignored by login.
    A returned token is written to the token store, which moves the screen
    to its authenticated view. Signing out only forgets the token locally.
    """

    def __init__(self, api: ApiClient, tokens: TokenStore):
        self.api = api
        self.tokens = tokens
        self.mode = "login"
        self.email = ""
        self.password = ""
        self.name = ""
        self.token: Optional[str] = tokens.load()
        self.error: Optional[str] = None
        self.loading = False

    @property
    def authenticated(self) -> bool:
        return self.token is not None

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}")
        self.mode = mode

    def toggle(self) -> str:
        self.mode = "signup" if self.mode == "login" else "login"
        return self.mode

    def submit(self) -> bool:
        if self.loading:
            return False
        self.error = None
        self.loading = True
        try:
            token = self.api.authenticate(self.mode, self.email, self.password, self.name)
        except ApiError as e:
            self.error = e.message or "Error"
            return False
        finally:
            self.loading = False
        self.tokens.save(token)
        self.token = token
        self.password = ""
        return True

    @property
    def feedback_link(self) -> Optional[str]:
        return self.api.feedback_url if self.authenticated else None

    def sign_out(self) -> None:
        self.tokens.clear()
        self.token = None
