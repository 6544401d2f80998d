"""SQLAlchemy implementation of StateStore."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from furnmart.infra.db.models.saved_state import SavedStateRow
from furnmart.ports.state_store import StateStore

# Dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlStateStore(StateStore):
    """
    Stores one engine's state as a JSON document in the saved_states table.

    - One row per key, written with a single INSERT ... ON CONFLICT DO UPDATE
    - Concurrent saves to the same key are last-write-wins: each save replaces
      the whole document, and no save fails because another request created
      the row first
    - Leaves commit/rollback to the session owner (one session per request)
    """

    def __init__(self, session: Session, key: str) -> None:
        """
        Initialize store with database session.

        Args:
            session: SQLAlchemy session for database operations
            key: Identifies whose state this is (e.g. "cart:<id>")
        """
        if not key:
            raise ValueError("key cannot be empty")
        self._session = session
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, state: dict[str, Any]) -> None:
        insert = _UPSERT_INSERTS.get(self._session.get_bind().dialect.name)
        if insert is None:
            # No native upsert; merge still replaces the document
            self._session.merge(SavedStateRow(key=self._key, payload=state))
            self._session.flush()
            return

        stmt = insert(SavedStateRow).values(key=self._key, payload=state)
        stmt = stmt.on_conflict_do_update(
            index_elements=[SavedStateRow.key],
            set_={"payload": stmt.excluded.payload, "updated_at": func.now()},
        )
        self._session.execute(stmt)

    def load(self) -> dict[str, Any] | None:
        query = select(SavedStateRow.payload).where(SavedStateRow.key == self._key)
        return self._session.execute(query).scalar_one_or_none()
