# student_crud/core/handlers.py
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from student_crud.core.exceptions import BaseAPIException
from student_crud.core.logging import logger


def error_timestamp() -> str:
    """ISO-8601 UTC timestamp stamped on every error payload, whatever the protocol."""
    return datetime.now(timezone.utc).isoformat()


def error_content(status_code: int, code: str, message: str, details: Optional[Any] = None) -> dict:
    return {
        "success": False,
        "timestamp": error_timestamp(),
        "status": status_code,
        "error": {
            "code": code,
            "message": message,
            "details": details
        }
    }

# 1. Custom domain errors (StudentNotFoundException, BadRequestException...)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    logger.info(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(exc.status_code, exc.code, exc.message, exc.details),
    )

# 2. Validation errors raised by pydantic when the body has the wrong shape
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # "body.age" -> "age"
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field] = error["msg"]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_content(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "VALIDATION_ERROR",
            "Input validation failed",
            details
        ),
    )

# 3. Standard HTTP errors (unknown URL, wrong method...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(exc.status_code, "HTTP_ERROR", str(exc.detail)),
    )

# 4. Anything else: collaborator failure, bug, driver error
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            str(exc)
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
