"""Orchid Dashboard: data loader (remote API first, bundled JSON fixtures as fallback)."""
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, get_args

import httpx

from orchid.config import Settings
from orchid.core.errors import FixtureUnavailableError, UnknownEndpointError
from orchid.schemas.common import parse_list_payload
from orchid.schemas.entity import Endpoint
from orchid.services.randomizer import Randomizer

logger = logging.getLogger(__name__)

KNOWN_ENDPOINTS: tuple[str, ...] = get_args(Endpoint)

Record = dict[str, Any]


class FixtureStore:
    """Owns the bundled fixtures. Each file is read once and kept as a read-only snapshot."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._snapshots: dict[str, tuple[MappingProxyType, ...]] = {}

    def _load(self, endpoint: str) -> tuple[MappingProxyType, ...]:
        path = self.data_dir / f"{endpoint}.json"
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise FixtureUnavailableError(endpoint, str(exc)) from exc
        if not isinstance(data, list):
            raise FixtureUnavailableError(endpoint, f"expected a JSON array in {path.name}")
        logger.info("Loaded %d %s from %s", len(data), endpoint, path)
        return tuple(MappingProxyType(dict(r)) for r in data if isinstance(r, dict))

    def snapshot(self, endpoint: str) -> list[Record]:
        """Return fresh copies of the stored records. Raises FixtureUnavailableError."""
        if endpoint not in self._snapshots:
            self._snapshots[endpoint] = self._load(endpoint)
        return [dict(r) for r in self._snapshots[endpoint]]


def unwrap_items(payload: Any) -> list[Record]:
    """Pull the record list out of any supported envelope. Raises MalformedPayloadError on non-record items."""
    return parse_list_payload(payload).normalize(page=1, limit=0).data


class DataLoader:
    """Resolves an entity type to its records.

    Reads prefer availability: any remote failure falls back to the fixture,
    and a missing fixture degrades to an empty list. No retries, no caching
    of results between calls.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient,
        store: FixtureStore | None = None,
        randomizer: Randomizer | None = None,
    ):
        self.settings = settings
        self.client = client
        self.store = store or FixtureStore(settings.DATA_DIR)
        self.randomizer = randomizer or Randomizer(seed=settings.RANDOM_SEED)

    @staticmethod
    def check_endpoint(endpoint: str) -> None:
        if endpoint not in KNOWN_ENDPOINTS:
            raise UnknownEndpointError(endpoint)

    def endpoint_url(self, endpoint: str) -> str:
        return f"{self.settings.API_URL}{endpoint}"

    async def fetch_remote(self, endpoint: str, params: dict | None = None) -> Any:
        """Single GET against the upstream API. Raises httpx.HTTPError on failure."""
        url = self.endpoint_url(endpoint)
        logger.debug("Fetching %s params=%s", url, params)
        response = await self.client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    def fixture(self, endpoint: str) -> list[Record]:
        """Fixture records, or an empty list when the fixture cannot be read."""
        try:
            return self.store.snapshot(endpoint)
        except FixtureUnavailableError as exc:
            logger.error("Could not load local data for %s: %s", endpoint, exc.reason)
            return []

    def materialize(self, endpoint: str, records: list[Record]) -> list[Record]:
        """Apply the randomize layer when enabled. Never mutates ``records``."""
        if not self.settings.RANDOMIZE:
            return records
        return self.randomizer.randomize(endpoint, records)

    def read_fixture(self, endpoint: str) -> list[Record]:
        self.check_endpoint(endpoint)
        return self.materialize(endpoint, self.fixture(endpoint))

    async def fetch_data(self, endpoint: str, params: dict | None = None) -> list[Record]:
        """Records for ``endpoint`` from the API, falling back to the bundled fixture."""
        self.check_endpoint(endpoint)
        try:
            records = unwrap_items(await self.fetch_remote(endpoint, params=params))
        except (httpx.HTTPError, ValueError) as exc:
            # ValueError covers invalid JSON and MalformedPayloadError
            logger.warning("API fetch failed for %s, using local data: %s", endpoint, exc)
            records = self.fixture(endpoint)
        return self.materialize(endpoint, records)
