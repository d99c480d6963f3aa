"""Orchid Dashboard: entity endpoint router.

Maps ``/api/{entity}`` to the read operation of that entity type. Only the
read path is real: POST/PUT validate the JSON body and echo the current
collection, DELETE acknowledges without deleting anything.
"""
import logging
from typing import Any, Awaitable, Callable

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from orchid.api.deps import Loader
from orchid.schemas.common import error_response, message_response, success_response
from orchid.services.data_loader import DataLoader
from orchid.services.product_service import ProductService
from orchid.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

Operation = Callable[[DataLoader], Awaitable[list[dict[str, Any]]]]


async def get_products(loader: DataLoader) -> list[dict[str, Any]]:
    return await ProductService(loader).get_products()


async def get_users(loader: DataLoader) -> list[dict[str, Any]]:
    return await UserService(loader).get_users()


ENDPOINTS_TO_OPERATIONS: dict[str, Operation] = {
    "products": get_products,
    "users": get_users,
}


def parse_type_param(entity: str | None) -> str | None:
    if not entity or entity not in ENDPOINTS_TO_OPERATIONS:
        return None
    return entity


def _operation_or_404(entity: str) -> Operation:
    name = parse_type_param(entity)
    if name is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown entity type: {entity}")
    return ENDPOINTS_TO_OPERATIONS[name]


async def _echo_write(entity: str, request: Request, loader: DataLoader) -> JSONResponse:
    operation = _operation_or_404(entity)
    try:
        await request.json()
    except ValueError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_response("Invalid JSON"))
    # No persistence: echo the current collection
    logger.info("%s /api/%s accepted without persisting", request.method, entity)
    data = await operation(loader)
    return JSONResponse(content=success_response(data))


@router.get("/{entity}")
async def list_entities(entity: str, loader: Loader) -> list[dict[str, Any]]:
    """Full collection for an entity type."""
    operation = _operation_or_404(entity)
    return await operation(loader)


@router.get("/{entity}/{id}")
async def get_entity(entity: str, id: str, loader: Loader) -> dict[str, Any]:
    operation = _operation_or_404(entity)
    records = await operation(loader)
    record = next((r for r in records if str(r.get("id")) == id), None)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} {id} not found")
    return record


@router.post("/{entity}")
async def create_entity(entity: str, request: Request, loader: Loader) -> JSONResponse:
    return await _echo_write(entity, request, loader)


@router.put("/{entity}")
async def update_entity(entity: str, request: Request, loader: Loader) -> JSONResponse:
    return await _echo_write(entity, request, loader)


@router.delete("/{entity}")
async def delete_entity(entity: str) -> dict:
    _operation_or_404(entity)
    return message_response("Resource deleted")
