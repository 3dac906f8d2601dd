from __future__ import annotations

from datetime import datetime
from typing import Protocol

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import SQLAlchemyError

from recruit_form.db.session import create_draft_engine, draft_sessionmaker
from recruit_form.models import RfDraftEntry


class StorageError(Exception):
    pass


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class SqlKeyValueStore:
    """Durable store backed by the ``rf_draft_entry`` table."""

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or create_draft_engine()
        self._sessions = draft_sessionmaker(self._engine)

    def get(self, key: str) -> str | None:
        try:
            with self._sessions() as session:
                return session.execute(select(RfDraftEntry.value).where(RfDraftEntry.key == key)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not read '{key}'") from exc

    def set(self, key: str, value: str) -> None:
        try:
            with self._sessions() as session:
                entry = session.get(RfDraftEntry, key)
                if entry is None:
                    session.add(RfDraftEntry(key=key, value=value))
                else:
                    entry.value = value
                    entry.updated_at = datetime.utcnow()
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not write '{key}'") from exc

    def remove(self, key: str) -> None:
        try:
            with self._sessions() as session:
                session.execute(delete(RfDraftEntry).where(RfDraftEntry.key == key))
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not remove '{key}'") from exc
