"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ApiError(Exception):
    """Raised when the CRM backend answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, url: str = ""):
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(f"API Error: {status_code} {message}")


class AuthenticationError(ApiError):
    """Raised for 401 responses, after the session has been cleared."""


class TransportError(Exception):
    """Raised when the request never produced an HTTP response.

    Wraps connection failures and timeouts from the HTTP library.
    """

    def __init__(self, message: str, url: str = ""):
        self.message = message
        self.url = url
        super().__init__(f"Request to {url or 'backend'} failed: {message}")
