"""Service context: the store, notifier and settings handed to every handler."""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from fastapi import Request
from sqlalchemy.engine import Engine

from afterwork.config import Settings
from afterwork.database import make_engine, make_session_factory
from afterwork.services.notifier import Notifier
from afterwork.services.store import UserRecordStore


@dataclass
class ServiceContext:
    settings: Settings
    store: UserRecordStore
    notifier: Notifier
    clock: Callable[[], datetime]
    engine: Optional[Engine] = None

    def now(self) -> datetime:
        return self.clock()

    def close(self) -> None:
        self.notifier.close()
        if self.engine is not None:
            self.engine.dispose()


def build_context(settings: Settings, notifier: Optional[Notifier] = None) -> ServiceContext:
    """Wire the collaborators described by ``settings``."""
    engine = make_engine(settings.DATABASE_URL)
    tz = settings.tz
    return ServiceContext(
        settings=settings,
        store=UserRecordStore(make_session_factory(engine)),
        notifier=notifier or Notifier(
            settings.BOT_API_URL,
            settings.BOT_AUTH_TOKEN,
            timeout=settings.NOTIFY_TIMEOUT_SECONDS,
        ),
        clock=lambda: datetime.now(tz),
        engine=engine,
    )


def get_context(request: Request) -> ServiceContext:
    """FastAPI dependency returning the context attached at app creation."""
    return request.app.state.context
