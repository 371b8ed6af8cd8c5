"""Shared fixtures for the Jina MCP server tests."""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from core.dispatcher import ToolDispatcher
from core.jina_client import JinaSearchClient
from tests.factories import BASE_URL, make_response


@pytest.fixture
def sample_results() -> list[dict[str, Any]]:
    """A single upstream hit."""
    return [{"id": "a", "score": 0.9, "data": {}}]


@pytest.fixture
def mock_httpx_client(sample_results: list[dict[str, Any]]) -> AsyncMock:
    """Mocked httpx.AsyncClient answering every POST with sample_results."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.post.return_value = make_response(200, {"results": sample_results})
    return client


@pytest.fixture
async def jina_client(mock_httpx_client: AsyncMock) -> AsyncGenerator[JinaSearchClient, None]:
    """A JinaSearchClient whose HTTP client is replaced by the mock."""
    client = JinaSearchClient(api_key="test-key", base_url=BASE_URL, timeout_seconds=5.0)
    # Replace the internal httpx client with our mock
    await client.client.aclose()
    client.client = mock_httpx_client
    yield client


@pytest.fixture
def dispatcher(jina_client: JinaSearchClient) -> ToolDispatcher:
    """A dispatcher wired to the mocked client."""
    return ToolDispatcher(jina_client)
