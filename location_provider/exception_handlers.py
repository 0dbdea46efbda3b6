from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from location_provider.errors import InvalidIpError
from location_provider.logger import logger

INVALID_IP_MESSAGE = "The supplied IP address is not a valid IPv4 or IPv6 address."


def _error_body(code: str, message: str) -> dict[str, str]:
    return {"code": code, "message": message}


def _jsonable_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Stringify pydantic error contexts, which may hold exception instances."""
    jsonable: list[dict[str, Any]] = []
    for error in errors:
        item = dict(error)
        if isinstance(item.get("ctx"), dict):
            item["ctx"] = {key: str(value) for key, value in item["ctx"].items()}
        jsonable.append(item)
    return jsonable


def _validation_error_body(exc: ValidationError) -> dict[str, str]:
    """Collapse pydantic errors into one `code`/`message` pair.

    Any error located at the `ip` parameter wins, whether the location is
    ("query", "ip") or just ("ip",).
    """
    for error in _jsonable_errors(exc.errors()):
        location = error.get("loc", ())
        if location and location[-1] == "ip":
            return _error_body("invalid_ip", INVALID_IP_MESSAGE)
    return _error_body("invalid_request", "Invalid request parameters")


async def pydantic_validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """400 for query models that fail validation while dependencies are resolved."""
    logger.info(
        f"Rejected request parameters path={request.url.path} method={request.method} "
        f"errors={_jsonable_errors(exc.errors())}"
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_validation_error_body(exc))


async def invalid_ip_exception_handler(request: Request, exc: InvalidIpError) -> JSONResponse:
    """400 when no usable IP address could be taken from the request."""
    logger.info(f"No usable IP address path={request.url.path} method={request.method} error={exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body("invalid_ip", str(exc)))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception {exc!r} path={request.url.path} method={request.method}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("internal_error", "An unexpected error occurred while processing the request."),
    )
