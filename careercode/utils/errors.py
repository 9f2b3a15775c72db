"""
Application errors and the handler that turns them into `{message}` responses.
"""
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class Unauthenticated(AppError):
    """No session token was supplied."""
    def __init__(self, message: str = "Unauthorized Access"):
        super().__init__(message, status_code=401)


class InvalidToken(Unauthenticated):
    """The session token failed verification (expired, forged, malformed)."""
    def __init__(self, message: str = "Could not verify/decode token. Unauthorized access."):
        super().__init__(message)


class Forbidden(AppError):
    def __init__(self, message: str = "Forbidden Access"):
        super().__init__(message, status_code=403)


class NotFound(AppError):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class InvalidIdentifier(AppError):
    """A path identifier is not a valid ObjectId."""
    def __init__(self, message: str = "Invalid ID"):
        super().__init__(message, status_code=400)


class StoreUnavailable(AppError):
    def __init__(self, message: str = "Database connection failed"):
        super().__init__(message, status_code=503)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
