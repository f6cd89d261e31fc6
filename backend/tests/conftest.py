"""Pytest fixtures: file-backed SQLite database and a recording notifier."""
import json
from datetime import datetime

import httpx
import pytest
import pytz
from fastapi.testclient import TestClient

from afterwork.config import Settings
from afterwork.main import create_app
from afterwork.services.notifier import Notifier

# Monday 2026-10-19, 10:30 UTC
MONDAY_MORNING = datetime(2026, 10, 19, 10, 30, tzinfo=pytz.UTC)


class RecordingTransport(httpx.BaseTransport):
    """httpx transport that records bot messages instead of sending them."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"ok": self.status_code < 400})

    @property
    def messages(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture(scope="function")
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file with the scheduler off."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        BOT_AUTH_TOKEN="test-token",
        BOT_API_URL="https://bot.example.test/message",
        ENABLE_SCHEDULER=False,
    )


@pytest.fixture(scope="function")
def transport():
    return RecordingTransport()


@pytest.fixture(scope="function")
def app(settings, transport):
    notifier = Notifier(settings.BOT_API_URL, settings.BOT_AUTH_TOKEN, transport=transport)
    return create_app(settings, notifier=notifier)


@pytest.fixture(scope="function")
def client(app):
    """TestClient; entering it runs startup, which creates the tables."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def ctx(app, client):
    """Service context with the clock pinned to a Monday morning."""
    context = app.state.context
    context.clock = lambda: MONDAY_MORNING
    return context


@pytest.fixture(scope="function")
def send_command(client):
    """Helper: POST /incoming as a chat user and return the response."""

    def _send(text: str, user_id: str = "u1", name: str = "Ada"):
        return client.post("/incoming", json={
            "sender": {"id": user_id, "name": name},
            "message": {"text": text},
        })

    return _send
