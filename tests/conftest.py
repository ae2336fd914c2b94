import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.context import PanelContext
from app.errors import SideEffectFailed
from app.services.store import MemoryStore
from main import create_app


class RecordingShell:
    """Stands in for ShellExecutor: records every notification, optionally failing."""

    def __init__(self):
        self.calls = []
        self.fail_with = None

    async def run(self, text):
        self.calls.append(text)
        if self.fail_with:
            raise SideEffectFailed(self.fail_with)
        return text


class StubAi:
    def __init__(self, text="Use Paper instead of Vanilla."):
        self.text = text
        self.calls = 0

    def get_suggestions(self, prompt=None, max_tokens=100):
        self.calls += 1
        return self.text


@pytest.fixture
def settings():
    return Settings(
        store_backend="memory",
        panel_name="Lonely",
        panel_user_id="user1",
        admin_username="admin",
        admin_password="admin",
        openai_api_key="",
        ai_retry_delay=0,
        log_level="WARNING",
    )


@pytest.fixture
def shell():
    return RecordingShell()


@pytest.fixture
def context(settings, shell):
    return PanelContext(settings, store=MemoryStore(), shell=shell, ai=StubAi())


@pytest.fixture
def store(context):
    return context.store


@pytest.fixture
def dispatcher(context):
    return context.dispatcher


@pytest.fixture
def client(context):
    with TestClient(create_app(context=context)) as test_client:
        yield test_client
