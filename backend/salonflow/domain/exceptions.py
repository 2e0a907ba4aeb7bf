"""Domain-specific exceptions — framework-independent."""


class MalformedPayloadError(Exception):
    """Raised when a request body cannot be interpreted as a key/value object."""

    def __init__(self, received_type: str):
        self.received_type = received_type
        super().__init__(f"Request body must be a JSON object, got {received_type}")


class AuthenticationError(Exception):
    """Raised when no principal can be resolved for a request."""

    def __init__(self, reason: str = "Unauthorized"):
        self.reason = reason
        super().__init__(reason)
