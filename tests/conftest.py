"""Shared fixtures: a fake processor and a TestClient wired to it."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from paygate.config import Settings, get_settings
from paygate.main import app
from paygate.routers.payment_intent import get_processor_factory


class FakeProcessor:
    """Records every call; returns a fixed secret or raises a preset error."""

    def __init__(self, client_secret: str = "secret_abc", error: Optional[Exception] = None):
        self.client_secret = client_secret
        self.error = error
        self.calls: List[tuple] = []
        self.api_keys: List[str] = []

    def __call__(self, api_key: str) -> "FakeProcessor":
        # stands in for the factory too, so the key handed over is observable
        self.api_keys.append(api_key)
        return self

    def create_intent(self, amount, currency, method_types):
        self.calls.append((amount, currency, method_types))
        if self.error is not None:
            raise self.error
        return self.client_secret


@pytest.fixture
def processor() -> FakeProcessor:
    return FakeProcessor()


@pytest.fixture
def settings() -> Settings:
    return Settings(stripe_secret_key="sk_test_123")


@pytest.fixture
def client(processor, settings):
    app.dependency_overrides[get_processor_factory] = lambda: processor
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
