"""Orchid Dashboard: refresh of a rendered entity table from fresh data."""
import logging
from typing import Any, MutableMapping, Sequence

from orchid.api.router import ENDPOINTS_TO_OPERATIONS
from orchid.services.data_loader import DataLoader

logger = logging.getLogger(__name__)


class TableRefresher:
    """
    Re-fetches an entity collection and rewrites the bound cells of a table.

    Each row is a mapping of binding key -> displayed text. Only keys present
    in the fetched record at the same index are overwritten.
    """

    def __init__(self, entity_type: str, loader: DataLoader):
        if entity_type not in ENDPOINTS_TO_OPERATIONS:
            raise ValueError("Wrong CRUD type!")
        self.entity_type = entity_type
        self.loader = loader

    async def update(self, rows: Sequence[MutableMapping[str, str]]) -> Sequence[MutableMapping[str, str]]:
        new_data = await self.loader.fetch_data(self.entity_type)

        for row, record in zip(rows, new_data):
            for key in list(row):
                if key not in record:
                    continue
                value: Any = record[key]
                row[key] = "" if value is None else str(value)

        logger.debug("Refreshed %d %s rows", min(len(rows), len(new_data)), self.entity_type)
        return rows
