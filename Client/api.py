# Client/api.py
from typing import Any, Dict, List, Optional

import requests

import config
from errors import SehYaatriError


class ApiError(SehYaatriError):
    """Server-supplied error message, or the transport failure text."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None,
                 timeout: float = config.REQUEST_TIMEOUT):
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def feedback_url(self) -> str:
        return f"{self.base_url}/api/feedback"

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(str(e)) from e
        try:
            data = r.json()
        except ValueError:
            data = {}
        if not r.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiError(message or r.text or "Error", r.status_code)
        return data

    # -- auth --------------------------------------------------------------
    def authenticate(self, mode: str, email: str, password: str, name: str = "") -> str:
        """POST the same three fields to login or signup and return the token."""
        path = "/api/auth/login" if mode == "login" else "/api/auth/signup"
        data = self._request("POST", path, json={"email": email, "password": password, "name": name})
        return data["token"]

    def signup(self, email: str, password: str, name: str = "") -> str:
        return self.authenticate("signup", email, password, name)

    def login(self, email: str, password: str) -> str:
        return self.authenticate("login", email, password)

    # -- feedback ----------------------------------------------------------
    def submit_feedback(self, payload: Dict[str, Any], email: Optional[str] = None) -> None:
        self._request("POST", "/api/feedback", json={"payload": payload, "email": email})

    def list_feedback(self, token: str) -> List[Dict[str, Any]]:
        data = self._request("GET", "/api/feedback", headers={"Authorization": f"Bearer {token}"})
        return data["feedback"]
