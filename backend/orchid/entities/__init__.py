"""Orchid Dashboard: entity registry.

Configs are imported lazily on first lookup and memoized, so every caller
shares the same ``EntityConfig`` instance.
"""
import importlib
from functools import lru_cache

from orchid.core.errors import UnknownEntityTypeError
from orchid.schemas.entity import EntityConfig

# type key -> "module:attribute", in registration order
ENTITY_REGISTRY: dict[str, str] = {
    "users": "orchid.entities.users:USERS_CONFIG",
    "products": "orchid.entities.products:PRODUCTS_CONFIG",
}


@lru_cache
def get_entity_config(entity_type: str) -> EntityConfig:
    """Resolve a type key to its config. Raises UnknownEntityTypeError if unregistered."""
    target = ENTITY_REGISTRY.get(entity_type)
    if target is None:
        raise UnknownEntityTypeError(entity_type)
    module_name, attr = target.split(":")
    return getattr(importlib.import_module(module_name), attr)


def get_available_entity_types() -> list[str]:
    return list(ENTITY_REGISTRY)
