"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - relay_config: RelayConfig pointing at a fake Ollama host
    - fake_ollama: Scriptable stand-in for the Ollama HTTP API
    - chat_relay: ChatRelay wired to fake_ollama through httpx.MockTransport
    - upload_dir / upload_ingestor: Ingestor writing under tmp_path
    - async_client: HTTPX client for API testing with both services overridden
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import app
from src.relay.chat_relay import ChatRelay, get_chat_relay
from src.relay.config import RelayConfig
from src.relay.ollama_client import OllamaClient
from src.storage.config import StorageConfig
from src.storage.ingestor import UploadIngestor, get_upload_ingestor
from tests.fakes import OLLAMA_TEST_URL, FakeOllama


@pytest.fixture
def relay_config() -> RelayConfig:
    """Return relay configuration for the fake Ollama host."""
    return RelayConfig(base_url=OLLAMA_TEST_URL, default_model="llama3", timeout=5.0)


@pytest.fixture
def fake_ollama() -> FakeOllama:
    """Return a fresh fake Ollama server."""
    return FakeOllama()


@pytest.fixture
def chat_relay(relay_config: RelayConfig, fake_ollama: FakeOllama) -> ChatRelay:
    """Create a ChatRelay whose HTTP calls go to fake_ollama."""
    client = OllamaClient(relay_config, transport=httpx.MockTransport(fake_ollama.handler))
    return ChatRelay(config=relay_config, client=client)


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Return a not-yet-created upload directory under tmp_path."""
    return tmp_path / "uploads"


@pytest.fixture
def upload_ingestor(upload_dir: Path) -> UploadIngestor:
    """Create an UploadIngestor writing to upload_dir."""
    return UploadIngestor(StorageConfig(upload_dir=upload_dir))


@pytest.fixture
async def async_client(
    chat_relay: ChatRelay,
    upload_ingestor: UploadIngestor,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_chat_relay] = lambda: chat_relay
    app.dependency_overrides[get_upload_ingestor] = lambda: upload_ingestor

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
