import json

import httpx
import pytest

from orchid.config import ROOT_DIR, Settings, get_settings
from orchid.services.data_loader import DataLoader, FixtureStore
from orchid.services.randomizer import Randomizer

DATA_DIR = ROOT_DIR / "data"
UPSTREAM = "http://upstream.test/api/"


def unavailable(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503)


def _read(name: str) -> list[dict]:
    with open(DATA_DIR / f"{name}.json", "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def products_fixture() -> list[dict]:
    return _read("products")


@pytest.fixture
def users_fixture() -> list[dict]:
    return _read("users")


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, API_URL=UPSTREAM, DATA_DIR=DATA_DIR, RANDOMIZE=False)


@pytest.fixture
def make_loader(settings):
    """Build a DataLoader whose upstream API is answered by ``handler``."""

    def _make(handler=unavailable, **overrides) -> DataLoader:
        cfg = settings.model_copy(update=overrides) if overrides else settings
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return DataLoader(cfg, client, store=FixtureStore(cfg.DATA_DIR), randomizer=Randomizer(seed=1234))

    return _make


@pytest.fixture
def make_client():
    """AsyncClient rooted at a fake site origin, answered by ``handler``."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url="http://testserver", transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def site_env(monkeypatch):
    """Environment-driven settings with the cached instance reset around the test."""
    for name in ("SITE", "BASE_URL", "API_URL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
