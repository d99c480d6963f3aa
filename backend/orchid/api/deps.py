"""Orchid Dashboard: FastAPI dependencies."""
from typing import Annotated

from fastapi import Depends, Request

from orchid.services.data_loader import DataLoader


async def get_data_loader(request: Request) -> DataLoader:
    """The DataLoader built in the app lifespan (owns the fixture store and HTTP client)."""
    return request.app.state.data_loader


Loader = Annotated[DataLoader, Depends(get_data_loader)]
