import json

import httpx
import pytest
from fastapi.testclient import TestClient

from deposit_relay.app.core.config import Settings
from deposit_relay.app.main import create_app

ENGINE_URL = "https://engine.example.com"
ACCESS_TOKEN = "test-access-token"
BACKEND_WALLET = "0x" + "b" * 40
CONTRACT = "0x" + "c" * 40
CHAIN_ID = "84532"
USER_ADDRESS = "0x" + "a" * 40


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ENGINE_URL=ENGINE_URL,
        ENGINE_ACCESS_TOKEN=ACCESS_TOKEN,
        BACKEND_WALLET_ADDRESS=BACKEND_WALLET,
        CONTRACT_ADDRESS=CONTRACT,
        CHAIN_ID=CHAIN_ID,
    )


class EngineStub:
    """Records outbound requests and answers with a fixed reply."""

    def __init__(self, status_code=200, payload=None, error=None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {"result": {"queueId": "abc123"}}
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def engine():
    return EngineStub()


@pytest.fixture
def make_client(settings):
    def _make(stub):
        app = create_app(settings, transport=httpx.MockTransport(stub))
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client, engine):
    return make_client(engine)


@pytest.fixture
def engine_stub():
    return EngineStub
