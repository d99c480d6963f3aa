"""Orchid Dashboard: UserService (reads against the upstream API with fixture fallback).

Reads prefer availability: when the upstream call fails for any reason the
bundled ``users.json`` is used instead. Writes go through ``CrudService``,
which surfaces every failure.
"""
import logging
from typing import Any

import httpx

from orchid.schemas.common import ListResult, parse_list_payload, unwrap_record
from orchid.services.data_loader import DataLoader

logger = logging.getLogger(__name__)


class UserService:
    """User listing, pagination and lookup."""

    ENDPOINT = "users"
    LIST_LIMIT = 100

    def __init__(self, loader: DataLoader):
        self.loader = loader

    async def get_users(self) -> list[dict[str, Any]]:
        return await self.loader.fetch_data(
            self.ENDPOINT, params={"page": 1, "limit": self.LIST_LIMIT}
        )

    async def get_users_paginated(self, page: int = 1, limit: int = 10) -> ListResult:
        try:
            payload = await self.loader.fetch_remote(self.ENDPOINT, params={"page": page, "limit": limit})
            result = parse_list_payload(payload).normalize(page, limit)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Paginated users fetch failed, slicing local data: %s", exc)
            local = self.loader.fixture(self.ENDPOINT)
            start = (page - 1) * limit
            result = ListResult(data=local[start:start + limit], total=len(local), page=page, limit=limit)
        return result.model_copy(update={"data": self.loader.materialize(self.ENDPOINT, result.data)})

    def _local_user(self, user_id: int | str) -> dict[str, Any] | None:
        return next(
            (u for u in self.loader.fixture(self.ENDPOINT) if str(u.get("id")) == str(user_id)),
            None,
        )

    async def get_user_by_id(self, user_id: int | str) -> dict[str, Any] | None:
        """Single user, or None when the API answers 404 or the id is unknown locally."""
        try:
            record = unwrap_record(await self.loader.fetch_remote(f"{self.ENDPOINT}/{user_id}"))
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404:
                return None
            logger.warning("User %s fetch failed (%s), using local data", user_id, exc.response.status_code)
            return self._local_user(user_id)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("User %s fetch failed, using local data: %s", user_id, exc)
            return self._local_user(user_id)

        if not isinstance(record, dict):
            logger.warning("User %s response was not a record, using local data", user_id)
            return self._local_user(user_id)
        return record
