"""Orchid Dashboard: record shapes for the managed entity types."""
from pydantic import BaseModel, ConfigDict


class BaseEntity(BaseModel):
    """Any record with a unique id."""

    model_config = ConfigDict(extra="allow")

    id: int | str


class Product(BaseEntity):
    name: str
    category: str
    technology: str
    description: str
    price: str
    discount: str = ""


class User(BaseEntity):
    name: str
    email: str
    avatar: str = ""
    biography: str = ""
    position: str = ""
    country: str = ""
    status: str = "active"
