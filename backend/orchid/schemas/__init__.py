"""Orchid Dashboard: pydantic schemas."""
from orchid.schemas.common import ImportResult, ListResult, parse_list_payload
from orchid.schemas.entity import EntityConfig, Endpoint
from orchid.schemas.records import BaseEntity, Product, User

__all__ = [
    "BaseEntity",
    "Endpoint",
    "EntityConfig",
    "ImportResult",
    "ListResult",
    "Product",
    "User",
    "parse_list_payload",
]
