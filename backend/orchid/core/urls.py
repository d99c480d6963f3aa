"""Orchid Dashboard: app-wide URL helpers."""
from orchid.config import get_settings


def url(path: str = "") -> str:
    """Absolute site URL for ``path`` (origin + base path)."""
    settings = get_settings()
    return f"{settings.SITE}{settings.BASE_URL}{path}"
