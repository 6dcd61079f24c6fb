# Storage/records.py
"""Append-only record collections.

Callers only see ``list_all`` / ``append`` / ``find_by``; whether the records
live in a flat JSON file or in a SQL database is decided in ``database.py``.
"""
import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, select

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=SQLModel)


class Collection(ABC, Generic[M]):
    model: Type[M]

    @abstractmethod
    def list_all(self) -> List[M]:
        """All records in insertion order."""

    @abstractmethod
    def append(self, record: M) -> M:
        """Assign the next id to ``record``, persist it and return it."""

    def find_by(self, field: str, value: Any) -> Optional[M]:
        for record in self.list_all():
            if getattr(record, field) == value:
                return record
        return None


class JsonFileCollection(Collection[M]):
    """JSON array on disk, read in full and rewritten in full on every append."""

    def __init__(self, path: Path, model: Type[M]):
        self.path = Path(path)
        self.model = model
        self._lock = threading.Lock()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self._write([])

    def _read(self) -> List[dict]:
        rows = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(rows, list):
            raise ValueError(f"{self.path} does not contain a JSON array")
        return rows

    def _write(self, rows: List[dict]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(rows, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, self.path)

    def list_all(self) -> List[M]:
        return [self.model.model_validate(row) for row in self._read()]

    def append(self, record: M) -> M:
        # single writer per collection; the whole read-modify-write is one step
        with self._lock:
            rows = self._read()
            record.id = max((row["id"] for row in rows), default=0) + 1
            rows.append(record.model_dump(mode="json"))
            self._write(rows)
        logger.debug("Appended %s #%s to %s", self.model.__name__, record.id, self.path)
        return record


class SqlCollection(Collection[M]):
    """Table-backed collection; ids come from the primary key."""

    def __init__(self, engine: Engine, model: Type[M]):
        self.engine = engine
        self.model = model

    def list_all(self) -> List[M]:
        with Session(self.engine) as s:
            return list(s.exec(select(self.model).order_by(self.model.id)).all())

    def append(self, record: M) -> M:
        record.id = None
        with Session(self.engine) as s:
            s.add(record)
            s.commit()
            s.refresh(record)
        return record

    def find_by(self, field: str, value: Any) -> Optional[M]:
        with Session(self.engine) as s:
            return s.exec(
                select(self.model).where(getattr(self.model, field) == value)
            ).first()
