import os

# Credentials must exist before src.main builds the app
os.environ.setdefault("OPENAI_API_KEY", "sk-test-openai")
os.environ.setdefault("CONVERTAPI_SECRET", "test-convertapi-secret")

import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_completion_client, get_conversion_client
from src.clients.completion import CompletionClient
from src.clients.conversion import ConversionClient
from src.main import app


@pytest.fixture
def fake_openai_url():
    return "http://fake-openai:9999/v1"


@pytest.fixture
def fake_convertapi_url():
    return "http://fake-convertapi:9999"


@pytest.fixture
def sample_completion():
    return {
        "id": "cmpl-123",
        "object": "text_completion",
        "model": "text-davinci-003",
        "choices": [
            {"text": "\n\nHello there!  ", "index": 0, "finish_reason": "stop"},
            {"text": "second choice", "index": 1, "finish_reason": "stop"},
        ],
    }


@pytest.fixture
def sample_conversion():
    return {
        "ConversionCost": 1,
        "Files": [
            {
                "FileName": "report.docx",
                "FileExt": "docx",
                "FileSize": 20480,
                "FileId": "abc123",
                "Url": "https://v2.convertapi.com/d/abc123/report.docx",
            }
        ],
    }


def _json_transport(status_code=200, json=None, content=None, calls=None):
    """MockTransport answering every request with the same response"""
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=json)

    return httpx.MockTransport(handler)


def _raising_transport(exc_type):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("boom", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def mock_completion_client(mocker):
    mock_client = mocker.AsyncMock(spec=CompletionClient)
    app.dependency_overrides[get_completion_client] = lambda: mock_client
    yield mock_client
    app.dependency_overrides.pop(get_completion_client, None)


@pytest.fixture
def mock_conversion_client(mocker):
    mock_client = mocker.AsyncMock(spec=ConversionClient)
    app.dependency_overrides[get_conversion_client] = lambda: mock_client
    yield mock_client
    app.dependency_overrides.pop(get_conversion_client, None)


@pytest.fixture
def json_transport():
    return _json_transport


@pytest.fixture
def raising_transport():
    return _raising_transport
