"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- A scripted provider double that counts calls
- httpx clients backed by MockTransport (no network)
- FastAPI TestClient with the generator dependency overridden
"""

import json
from typing import Callable, Generator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from promptpage.ai.codegen import CodeGenerator
from promptpage.ai.providers.base import AIProvider, ProviderType
from promptpage.deps import get_code_generator
from promptpage.main import app


# ---------------------------------------------------------------------------
# PROVIDER DOUBLES
# ---------------------------------------------------------------------------

class FakeProvider(AIProvider):
    """Provider double returning a fixed text or raising a fixed error."""

    provider_type = ProviderType.OPENAI

    def __init__(self, text: str = "", error: Optional[Exception] = None):
        self.model = "fake-model"
        self.text = text
        self.error = error
        self.calls: List[dict] = []

    async def generate(self, prompt: str, timeout: Optional[float] = None) -> str:
        self.calls.append({"prompt": prompt, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(text="```html\n<html><body>Hi</body></html>\n```")


# ---------------------------------------------------------------------------
# HTTP DOUBLES
# ---------------------------------------------------------------------------

def chat_completion(content: str) -> dict:
    """Build a minimal chat-completions response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def make_http_client() -> Callable[[Callable], httpx.AsyncClient]:
    """
    Factory for AsyncClients whose requests are answered by a handler.

    The handler receives the httpx.Request and returns an httpx.Response.
    """
    def _make(handler: Callable) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def json_handler(recorded_requests):
    """Handler factory answering with a status code and JSON body."""
    def _make(body, status_code: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if isinstance(body, (dict, list)):
                return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"))
            return httpx.Response(status_code, content=body)
        return handler

    return _make


# ---------------------------------------------------------------------------
# APP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def client(fake_provider: FakeProvider) -> Generator[TestClient, None, None]:
    """
    Create a test client whose generator uses the fake provider.
    """
    generator = CodeGenerator(provider=fake_provider)
    app.dependency_overrides[get_code_generator] = lambda: generator

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
