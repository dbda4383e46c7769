"""Shared fixtures: settings and a RevenueCat client backed by a mock transport."""

from typing import Any, Callable

import httpx
import pytest

from rcframes.api.frames import get_revenuecat_client
from rcframes.core.config import Settings, get_settings
from rcframes.main import app
from rcframes.services.frames.upstream import RevenueCatClient


class FakeRevenueCat:
    """Records upstream requests and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {"metrics": []}
        self.raw_body: bytes | None = None
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.json_body)

    def client(self) -> RevenueCatClient:
        return RevenueCatClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def revenuecat(settings: Settings):
    """Install a fake upstream and settings on the app for one test."""
    fake = FakeRevenueCat()
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_revenuecat_client] = fake.client
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def overview_payload() -> Callable[..., dict[str, Any]]:
    def build(*metrics: dict[str, Any]) -> dict[str, Any]:
        return {"object": "overview_metrics", "metrics": list(metrics)}

    return build
