"""Orchid Dashboard: generic CRUD client driven by an EntityConfig.

Every operation is one request against ``/api/{entity_type}`` (or the
config's endpoint overrides). Failures are raised as ``CrudServiceError``
naming the entity and the HTTP status text; nothing is retried here.
"""
from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO, Generic, Mapping, Sequence, TypeVar, Union

import httpx
from pydantic import BaseModel

from orchid.config import get_settings
from orchid.core.errors import CrudServiceError
from orchid.core.urls import url
from orchid.schemas.common import ImportResult, ListResult, parse_list_payload, unwrap_record
from orchid.schemas.entity import EntityConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

EntityId = Union[int, str]
FileInput = Union[bytes, BinaryIO, tuple]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _filter_params(filters: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Filters in iteration order, dropping empty strings and None."""
    if not filters:
        return []
    return [(key, _stringify(value)) for key, value in filters.items() if value != "" and value is not None]


def build_list_query(
    config: EntityConfig,
    page: int | None = None,
    limit: int | None = None,
    sort_by: str | None = None,
    sort_direction: str | None = None,
    search: str | None = None,
    filters: Mapping[str, Any] | None = None,
) -> list[tuple[str, str]]:
    """Ordered query params: page, limit, sort/order, search, then filters."""
    default_sort = config.default_sort
    if page is None:
        page = 1
    if limit is None:
        limit = config.pagination.default_page_size
    if sort_by is None and default_sort is not None:
        sort_by = default_sort.field
    if sort_direction is None and default_sort is not None:
        sort_direction = default_sort.direction

    params = [("page", str(page)), ("limit", str(limit))]
    if sort_by:
        params.append(("sort", sort_by))
        params.append(("order", sort_direction or "asc"))
    if search and config.search.enabled:
        params.append(("search", search))
    params.extend(_filter_params(filters))
    return params


class CrudService(Generic[T]):
    """List/create/update/delete/bulk/import/export/get for one entity type."""

    def __init__(
        self,
        config: EntityConfig,
        client: httpx.AsyncClient,
        model: type[T] | None = None,
        owns_client: bool = False,
    ):
        self.config = config
        self.entity_type = config.type
        self.client = client
        self.model = model
        self._owns_client = owns_client

    async def __aenter__(self) -> CrudService[T]:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    # ── helpers ──────────────────────────────────────────────────────────────

    @property
    def base_path(self) -> str:
        return f"/api/{self.entity_type}"

    def _path(self, operation: str, suffix: str = "") -> str:
        overrides = self.config.endpoints
        override = getattr(overrides, operation, None) if overrides else None
        return f"{override or self.base_path}{suffix}"

    @property
    def _singular(self) -> str:
        return self.config.name.lower()

    @property
    def _plural(self) -> str:
        return self.config.plural_name.lower()

    async def _send(self, method: str, url: str, action: str, label: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            message = f"Failed to {action} {label}: {exc}"
            logger.warning("%s", message)
            raise CrudServiceError(message, entity=label, status_code=0, status_text=str(exc)) from exc
        return response

    def _error(self, action: str, label: str, response: httpx.Response) -> CrudServiceError:
        message = f"Failed to {action} {label}: {response.reason_phrase}"
        logger.warning("%s (HTTP %s %s)", message, response.request.method, response.status_code)
        return CrudServiceError(
            message,
            entity=label,
            status_code=response.status_code,
            status_text=response.reason_phrase,
        )

    def _coerce(self, record: Any) -> Any:
        if self.model is not None and isinstance(record, dict):
            return self.model.model_validate(record)
        return record

    # ── operations ───────────────────────────────────────────────────────────

    async def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        sort_by: str | None = None,
        sort_direction: str | None = None,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> ListResult:
        params = build_list_query(self.config, page, limit, sort_by, sort_direction, search, filters)
        page = int(params[0][1])
        limit = int(params[1][1])

        response = await self._send("GET", self._path("list"), "fetch", self._plural, params=params)
        if not response.is_success:
            raise self._error("fetch", self._plural, response)

        try:
            result = parse_list_payload(response.json()).normalize(page, limit)
        except ValueError as exc:
            logger.warning("Unrecognized %s list response, returning an empty page: %s", self.entity_type, exc)
            result = ListResult(data=[], total=0, page=page, limit=limit)
        return result.model_copy(update={"data": [self._coerce(r) for r in result.data]})

    async def get_by_id(self, id: EntityId) -> Any | None:
        """The record, or None when the backend answers 404. Resolved under the list override."""
        response = await self._send("GET", self._path("list", f"/{id}"), "fetch", self._singular)
        if response.status_code == 404:
            return None
        if not response.is_success:
            raise self._error("fetch", self._singular, response)
        return self._coerce(unwrap_record(response.json()))

    async def create(self, data: Mapping[str, Any]) -> Any:
        response = await self._send("POST", self._path("create"), "create", self._singular, json=dict(data))
        if not response.is_success:
            raise self._error("create", self._singular, response)
        return self._coerce(unwrap_record(response.json()))

    async def update(self, id: EntityId, data: Mapping[str, Any]) -> Any:
        response = await self._send(
            "PUT", self._path("update", f"/{id}"), "update", self._singular, json=dict(data)
        )
        if not response.is_success:
            raise self._error("update", self._singular, response)
        return self._coerce(unwrap_record(response.json()))

    async def delete(self, id: EntityId) -> None:
        response = await self._send("DELETE", self._path("delete", f"/{id}"), "delete", self._singular)
        if not response.is_success:
            raise self._error("delete", self._singular, response)

    async def bulk_delete(self, ids: Sequence[EntityId]) -> None:
        response = await self._send(
            "DELETE", self._path("bulk", "/bulk"), "bulk delete", self._plural, json={"ids": list(ids)}
        )
        if not response.is_success:
            raise self._error("bulk delete", self._plural, response)

    async def bulk_update(self, ids: Sequence[EntityId], data: Mapping[str, Any]) -> Sequence[Any]:
        response = await self._send(
            "PUT",
            self._path("bulk", "/bulk"),
            "bulk update",
            self._plural,
            json={"ids": list(ids), "data": dict(data)},
        )
        if not response.is_success:
            raise self._error("bulk update", self._plural, response)
        records = unwrap_record(response.json())
        if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
            return []
        return [self._coerce(r) for r in records]

    async def import_file(self, file: FileInput, mapping: Mapping[str, str] | None = None) -> ImportResult:
        """Upload a file for the backend to parse. Mapping and validation are enforced there."""
        data = {"mapping": json.dumps(dict(mapping))} if mapping else None
        response = await self._send(
            "POST", f"{self.base_path}/import", "import", self._plural, files={"file": file}, data=data
        )
        if not response.is_success:
            raise self._error("import", self._plural, response)
        return ImportResult.model_validate(unwrap_record(response.json()))

    async def export(
        self,
        format: str,
        fields: Sequence[str] | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Raw export blob, returned exactly as the backend sent it."""
        export_config = self.config.export
        if export_config is not None and format not in export_config.formats:
            raise ValueError(
                f"Unsupported export format '{format}' for {self._plural}. "
                f"Allowed: {', '.join(export_config.formats)}"
            )

        params = [("format", format)]
        if fields:
            params.append(("fields", ",".join(fields)))
        params.extend(_filter_params(filters))

        response = await self._send("GET", f"{self.base_path}/export", "export", self._plural, params=params)
        if not response.is_success:
            raise self._error("export", self._plural, response)
        return response.content


def create_crud_service(
    config: EntityConfig,
    client: httpx.AsyncClient | None = None,
    model: type[T] | None = None,
) -> CrudService[T]:
    """Build a CrudService. Without a client, one rooted at the site URL (origin + base path) is created and owned."""
    if client is not None:
        return CrudService(config, client, model=model)
    owned = httpx.AsyncClient(base_url=url(), timeout=get_settings().HTTP_TIMEOUT_SECONDS)
    return CrudService(config, owned, model=model, owns_client=True)
