"""UserRecord ORM model: one preference/status document per chat user."""
from sqlalchemy import Column, String, Boolean, DateTime, JSON
from afterwork.database import Base


class UserRecord(Base):
    __tablename__ = "users"

    user_id = Column(String(64), primary_key=True)  # chat sender id
    name = Column(String(200), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)
    notifications = Column(Boolean, nullable=True)
    channels = Column(JSON, nullable=True)  # ordered, duplicates kept
    work_start = Column(String(5), nullable=True)  # "HH:MM" or "H:MM"
    work_end = Column(String(5), nullable=True)
    manual_override = Column(Boolean, nullable=True)
    override_until = Column(DateTime(timezone=True), nullable=True)
    current_status = Column(String(100), nullable=True)
    last_processed = Column(DateTime(timezone=True), nullable=True)
