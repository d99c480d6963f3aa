"""Orchid Dashboard backend: entity-driven CRUD over a REST API with fixture fallback."""

__version__ = "0.1.0"
