# Feedback/store.py
import logging
from typing import Any, List, Optional

from errors import ValidationError
from Feedback.models import FeedbackRecord, utcnow
from Storage.records import Collection

logger = logging.getLogger(__name__)


class FeedbackStore:
    """Append-only feedback documents; the payload is stored verbatim."""

    def __init__(self, records: Collection[FeedbackRecord]):
        self.records = records

    def append(self, payload: Any, email: Optional[str] = None) -> FeedbackRecord:
        if not payload:
            raise ValidationError("Missing payload")
        record = FeedbackRecord(user_email=email or None, payload=payload, created_at=utcnow())
        record = self.records.append(record)
        logger.info("Feedback #%s stored", record.id)
        return record

    def list_all(self) -> List[FeedbackRecord]:
        """Newest first: plain reverse of insertion order."""
        return list(reversed(self.records.list_all()))
