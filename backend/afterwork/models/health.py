"""HealthCheck ORM model: heartbeat row written by GET /health."""
from sqlalchemy import Column, String, DateTime
from afterwork.database import Base


class HealthCheck(Base):
    __tablename__ = "health"

    check_id = Column(String(32), primary_key=True, default="check")
    timestamp = Column(DateTime(timezone=True), nullable=False)
