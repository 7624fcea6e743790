# server/core/errors.py

INTERNAL_ERROR = "Internal server error"
MISSING_FIELDS = "Please provide all required fields"


class ApiError(Exception):
    """
    Base class for errors that end a request.
    Rendered to the caller as {"message": message} with status_code.
    """
    status_code = 500
    message = INTERNAL_ERROR

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    message = MISSING_FIELDS


class AuthError(ApiError):
    """Missing token or bad credentials (401), rejected token (403)."""
    status_code = 401
    message = "Unauthorized"


class NotFoundError(ApiError):
    status_code = 404
    message = "Not found"


class StoreFault(ApiError):
    pass


class HashingFault(ApiError):
    pass


class HashingError(HashingFault):
    pass


class ComparisonError(HashingFault):
    pass


class InvalidTokenError(Exception):
    """Token signature is invalid, the token is malformed or it has expired."""
