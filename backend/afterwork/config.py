"""Application configuration via environment variables."""
import pytz
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./afterwork.db"
    BOT_AUTH_TOKEN: str = ""
    BOT_API_URL: str = "https://cliq.zoho.com/api/v2/bots/afterworkbuddy/message"
    BOT_INCOMING_URL: str = "https://cliq.zoho.com/api/v2/bots/afterworkbuddy/incoming"
    NOTIFY_TIMEOUT_SECONDS: float = 10.0
    PORT: int = 3000
    TIMEZONE: str = "UTC"  # IANA tz used for "now" when evaluating work hours
    ENABLE_SCHEDULER: bool = True
    SWEEP_INTERVAL_CRON_MINUTE: str = "*/30"
    SWEEP_BOUNDARY_HOURS: str = "9,17"
    SWEEP_BOUNDARY_DAYS: str = "mon-fri"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def tz(self):
        return pytz.timezone(self.TIMEZONE)
