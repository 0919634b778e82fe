class ConfigurationError(RuntimeError):
    """A required setting (secret, URI) is missing."""


class EmailDeliveryError(RuntimeError):
    pass


class APIError(Exception):
    """Error that is answered to the client as ``{"message": ...}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(APIError):
    status_code = 400


# Reported as 400 like the other signup errors.
class Conflict(APIError):
    status_code = 400


class Unauthorized(APIError):
    status_code = 401


class NotFound(APIError):
    status_code = 404


class Internal(APIError):
    status_code = 500
