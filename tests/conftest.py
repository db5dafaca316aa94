import httpx
import pytest
from fastapi.testclient import TestClient
from chat_relay.main import create_app
from chat_relay.settings import Settings


@pytest.fixture
def relay_settings():
    return Settings(OLLAMA_URL="http://ollama.test:11434", OLLAMA_MODEL="llama3:8b")


@pytest.fixture
def make_relay(relay_settings):
    """Returns a factory: handler (+ settings overrides) -> TestClient wired to a fake Ollama."""
    clients = []

    def _make(handler, **overrides):
        cfg = relay_settings.model_copy(update=overrides)
        app = create_app(cfg, transport=httpx.MockTransport(handler))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)
