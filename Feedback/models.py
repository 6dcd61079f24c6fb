# Feedback/models.py
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedbackRecord(SQLModel, table=True):
    __tablename__ = "feedback"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_email: Optional[str] = None
    payload: Any = Field(sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utcnow)

    def public(self) -> dict:
        created = self.created_at
        if created.tzinfo is None:          # sqlite hands back naive datetimes
            created = created.replace(tzinfo=timezone.utc)
        return {
            "id": self.id,
            "userEmail": self.user_email,
            "data": self.payload,
            "createdAt": created.isoformat(),
        }


class FeedbackIn(BaseModel):
    payload: Any = None
    email: Optional[str] = None
