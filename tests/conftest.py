import pytest

from infra_bunny.lib.provider import ProviderSettings
from .fake_api import FakeAPI, FakeClient


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(api) -> FakeClient:
    return FakeClient(api)


@pytest.fixture
def settings(client, monkeypatch) -> ProviderSettings:
    """Provider settings whose client is the fake API"""
    settings = ProviderSettings(api_key="test-key")
    monkeypatch.setattr(ProviderSettings, "client", lambda self: client)
    return settings
