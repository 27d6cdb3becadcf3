"""
Error responses shared by the routers.

Every handled failure reaches the client as ``{"error": <message>}``.
"""
from bson.errors import InvalidId
from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pymongo.errors import PyMongoError
import structlog

from .identity import ProviderError

logger = structlog.get_logger()

# Schema violations, malformed ids and driver failures
STORE_ERRORS = (ValidationError, InvalidId, PyMongoError)
IDENTITY_ERRORS = (ProviderError, PyMongoError)


def _format_error(err) -> str:
    location = ".".join(str(part) for part in err["loc"])
    # Model-level errors carry no location
    return f"{location}: {err['msg']}" if location else err["msg"]


def error_message(exc: Exception) -> str:
    """Raw message of a collaborator error, flattened for pydantic errors"""
    if isinstance(exc, ValidationError):
        return "; ".join(_format_error(err) for err in exc.errors())
    return str(exc)


def error_response(exc: Exception, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    message = error_message(exc)
    logger.warning("Request failed", status_code=status_code, error=message)
    return JSONResponse(status_code=status_code, content={"error": message})


def not_found(message: str) -> JSONResponse:
    logger.info("Not found", error=message)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": message})
