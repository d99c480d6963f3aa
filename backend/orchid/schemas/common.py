"""Orchid Dashboard: response envelopes.

A list response from the backend arrives in one of three shapes. It is
classified once, at the boundary, into a tagged union and normalized to
``ListResult`` straight away:

* ``PaginatedEnvelope`` - ``{success, data: {items, total, page, limit, total_pages}}``
* ``StandardEnvelope`` - ``{data: [...], total?, page?, limit?}``
* ``BareArray`` - ``[...]``
"""
from typing import Annotated, Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError

from orchid.core.errors import MalformedPayloadError

T = TypeVar("T")


class ListResult(BaseModel, Generic[T]):
    """Canonical list result handed to callers."""

    data: list[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10


class PageData(BaseModel):
    items: list[dict[str, Any]]
    total: int | None = None
    page: int | None = None
    limit: int | None = None
    total_pages: int | None = None


class PaginatedEnvelope(BaseModel):
    kind: Literal["paginated"] = "paginated"
    success: bool | None = None
    message: str | None = None
    data: PageData

    def normalize(self, page: int, limit: int) -> ListResult:
        items = self.data.items
        return ListResult(
            data=items,
            total=self.data.total or len(items),
            page=self.data.page or page,
            limit=self.data.limit or limit,
        )


class StandardEnvelope(BaseModel):
    kind: Literal["standard"] = "standard"
    data: list[dict[str, Any]]
    total: int | None = None
    page: int | None = None
    limit: int | None = None

    def normalize(self, page: int, limit: int) -> ListResult:
        return ListResult(
            data=self.data,
            total=self.total or len(self.data),
            page=self.page or page,
            limit=self.limit or limit,
        )


class BareArray(BaseModel):
    kind: Literal["bare"] = "bare"
    items: list[dict[str, Any]]

    def normalize(self, page: int, limit: int) -> ListResult:
        return ListResult(data=self.items, total=len(self.items), page=page, limit=limit)


ListEnvelope = Annotated[
    Union[PaginatedEnvelope, StandardEnvelope, BareArray],
    Field(discriminator="kind"),
]


def parse_list_payload(payload: Any) -> ListEnvelope:
    """Classify a decoded JSON body. Raises MalformedPayloadError for unknown shapes.

    Items must be JSON objects; an array holding anything else is malformed.
    """
    if not isinstance(payload, (list, dict)):
        raise MalformedPayloadError(f"Unexpected list payload type: {type(payload).__name__}")

    data = payload.get("data") if isinstance(payload, dict) else None
    try:
        if isinstance(payload, list):
            return BareArray(items=payload)
        if isinstance(data, dict) and isinstance(data.get("items"), list):
            return PaginatedEnvelope.model_validate(payload)
        if isinstance(data, list):
            return StandardEnvelope.model_validate(payload)
    except ValidationError as exc:
        raise MalformedPayloadError(f"Invalid list envelope: {exc}") from exc
    raise MalformedPayloadError("List payload has neither data.items nor a data array")


def unwrap_record(payload: Any) -> Any:
    """Strip a ``{success, data}`` envelope from a single-record response if present."""
    if isinstance(payload, dict) and "success" in payload and "data" in payload:
        return payload["data"]
    return payload


class ImportRowError(BaseModel):
    row: int
    message: str


class ImportResult(BaseModel):
    """Summary returned by the backend after an import."""

    successful: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)


# ── Outgoing envelopes ───────────────────────────────────────────────────────

def success_response(data: Any) -> dict:
    return {"success": True, "data": data}


def message_response(message: str) -> dict:
    return {"success": True, "message": message}


def error_response(message: str) -> dict:
    return {"error": message}
