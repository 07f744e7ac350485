"""Shared pytest fixtures."""

from typing import Any, Optional, Union
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from vue_weekly.core import LLMResponse, UsageMetrics

Route = Union[httpx.Response, Exception]


def make_response(url: str, status_code: int = 200, text: Optional[str] = None, json: Any = None) -> httpx.Response:
    request = httpx.Request("GET", url)
    if json is not None:
        return httpx.Response(status_code, json=json, request=request)
    return httpx.Response(status_code, text=text or "", request=request)


class HttpRoutes:
    """URL to canned response table used by the patched httpx client."""

    def __init__(self) -> None:
        self.routes: dict[str, Route] = {}
        self.calls: list[tuple[str, Optional[dict[str, str]]]] = []

    def add_text(self, url: str, text: str, status_code: int = 200) -> None:
        self.routes[url] = make_response(url, status_code, text=text)

    def add_json(self, url: str, payload: Any, status_code: int = 200) -> None:
        self.routes[url] = make_response(url, status_code, json=payload)

    def add_status(self, url: str, status_code: int) -> None:
        self.routes[url] = make_response(url, status_code, text="error")

    def add_error(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def headers_for(self, url: str) -> Optional[dict[str, str]]:
        for called_url, headers in self.calls:
            if called_url == url:
                return headers
        return None

    def __call__(self, url: str, headers: Optional[dict[str, str]] = None, **kwargs: Any) -> httpx.Response:
        self.calls.append((url, headers))
        route = self.routes.get(url)
        if route is None:
            return make_response(url, 404, text="not found")
        if isinstance(route, Exception):
            raise route
        return route


@pytest.fixture
def http_routes():
    """Patch httpx.AsyncClient so GET requests are answered from a route table."""
    routes = HttpRoutes()

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = False
        mock_client.get.side_effect = routes
        mock_client_class.return_value = mock_client
        yield routes


class MockLLMClient:
    """In-memory LLM backend that records the messages it receives."""

    name = "mock"
    model = "mock-model"

    def __init__(self, text: str = "# Vue.js Weekly Newsletter\n\n## Highlights\n\nAll good.") -> None:
        self.text = text
        self.calls: list[tuple[list, Any]] = []

    async def generate(self, messages, options=None) -> LLMResponse:
        self.calls.append((messages, options))
        return LLMResponse(
            text=self.text,
            usage=UsageMetrics(input_tokens=1200, output_tokens=800, cache_read_input_tokens=300),
        )


@pytest.fixture
def mock_llm() -> MockLLMClient:
    return MockLLMClient()
