from afterwork.models.user import UserRecord
from afterwork.models.health import HealthCheck

__all__ = ["UserRecord", "HealthCheck"]
