"""Orchid Dashboard: error taxonomy shared by the loader, registry and CRUD client."""


class UnknownEndpointError(LookupError):
    """Raised when a data endpoint name is not one of the known entity types."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Unknown endpoint: {endpoint}")


class UnknownEntityTypeError(LookupError):
    """Raised when an entity type has no registered configuration."""

    def __init__(self, entity_type: str):
        self.entity_type = entity_type
        super().__init__(f"Unknown entity type: {entity_type}")


class FixtureUnavailableError(Exception):
    """Raised when a bundled JSON fixture cannot be read."""

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Fixture for {endpoint} unavailable: {reason}")


class MalformedPayloadError(ValueError):
    """Raised when a response body matches none of the known envelope shapes."""


class CrudServiceError(Exception):
    """Raised for any failed CRUD request. Carries the HTTP status of the failure."""

    def __init__(self, message: str, entity: str, status_code: int, status_text: str):
        self.message = message
        self.entity = entity
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(message)
