"""Pytest configuration and fixtures."""

import json
from typing import Any, Optional

import httpx
import pytest

from core.client import MessageBirdClient
from core.config import Settings


class FakeMessageBird:
    """Stands in for the MessageBird API behind an httpx.MockTransport.

    Records every request and answers with whatever was configured via
    ``reply()`` or ``fail_with()``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._payload: Any = {"id": "abc"}
        self._content: Optional[bytes] = None
        self._error: Optional[Exception] = None

    def reply(self, status: int = 200, payload: Any = None, content: Optional[bytes] = None) -> None:
        self._status = status
        self._payload = payload
        self._content = content

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._content is not None:
            return httpx.Response(self._status, content=self._content)
        if self._payload is None:
            return httpx.Response(self._status)
        return httpx.Response(self._status, json=self._payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def api() -> FakeMessageBird:
    return FakeMessageBird()


@pytest.fixture
def client(settings, api) -> MessageBirdClient:
    return MessageBirdClient(settings, transport=httpx.MockTransport(api.handler))
