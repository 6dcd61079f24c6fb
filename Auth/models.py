# Auth/models.py
from typing import Optional

from pydantic import BaseModel
from sqlmodel import Field, SQLModel

from config import OWNER_ROLE


class Account(SQLModel, table=True):
    __tablename__ = "accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True, nullable=False)
    name: str = ""
    password_hash: str
    role: str = Field(default=OWNER_ROLE)

    def public(self) -> dict:
        """Account without the password hash."""
        return {"id": self.id, "email": self.email, "name": self.name, "role": self.role}


# Fields are optional here so that missing values reach the credential
# store and come back as a 400/401 with a readable message.
class SignupIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class TokenOut(BaseModel):
    token: str
