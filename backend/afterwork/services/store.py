"""User record store: document-per-user persistence with merge writes.

Reads return the full record; writes merge the given fields into the
existing row (creating it when absent) and never replace it wholesale.
Every SQLAlchemy failure surfaces as StoreError.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from afterwork.errors import StoreError
from afterwork.models.health import HealthCheck
from afterwork.models.user import UserRecord

logger = logging.getLogger(__name__)

_PROTECTED_FIELDS = ("user_id",)


class UserRecordStore:
    """Keyed access to UserRecord rows through a session factory."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, user_id: str) -> Optional[UserRecord]:
        """Fetch a single record, or None when the user has never been seen."""
        try:
            with self._session_factory() as db:
                return db.query(UserRecord).filter(UserRecord.user_id == user_id).first()
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to read user {user_id}: {exc}") from exc

    def merge(self, user_id: str, /, **fields: Any) -> UserRecord:
        """Merge ``fields`` into the user's record, creating it if needed."""
        try:
            with self._session_factory() as db:
                record = db.query(UserRecord).filter(UserRecord.user_id == user_id).first()
                if record is None:
                    record = UserRecord(user_id=user_id)
                    db.add(record)
                for field, value in fields.items():
                    if field in _PROTECTED_FIELDS or field not in UserRecord.__table__.columns:
                        raise StoreError(f"Unknown or protected field: {field}")
                    if isinstance(value, datetime) and value.tzinfo is not None:
                        value = value.astimezone(timezone.utc)
                    setattr(record, field, value)
                db.commit()
                db.refresh(record)
                logger.debug("Merged %s into user %s", sorted(fields), user_id)
                return record
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to write user {user_id}: {exc}") from exc

    def list_all(self) -> list[UserRecord]:
        try:
            with self._session_factory() as db:
                return db.query(UserRecord).order_by(UserRecord.user_id).all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to list users: {exc}") from exc

    def list_user_ids(self) -> list[str]:
        return [record.user_id for record in self.list_all()]

    def write_heartbeat(self, timestamp: datetime) -> None:
        """Overwrite the single health-check row."""
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone(timezone.utc)
        try:
            with self._session_factory() as db:
                check = db.query(HealthCheck).filter(HealthCheck.check_id == "check").first()
                if check is None:
                    check = HealthCheck(check_id="check", timestamp=timestamp)
                    db.add(check)
                else:
                    check.timestamp = timestamp
                db.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to write heartbeat: {exc}") from exc
