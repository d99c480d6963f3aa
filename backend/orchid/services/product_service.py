"""Orchid Dashboard: ProductService (read path served from the bundled fixture)."""
from typing import Any

from orchid.services.data_loader import DataLoader


class ProductService:
    """Product reads. The fixture is the source of truth; randomized when enabled."""

    ENDPOINT = "products"

    def __init__(self, loader: DataLoader):
        self.loader = loader

    async def get_products(self) -> list[dict[str, Any]]:
        return self.loader.read_fixture(self.ENDPOINT)
