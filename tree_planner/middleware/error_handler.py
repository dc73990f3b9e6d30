"""
Global error handling middleware.
"""
import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Callable

from tree_planner.domain.exceptions import (
    CatalogUnavailableError,
    InvalidInputError,
    NotFoundError,
)


logger = logging.getLogger(__name__)


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Report malformed request bodies as 400 instead of FastAPI's 422.
    """
    logger.warning(
        f"Request validation failed: {len(exc.errors())} errors",
        extra={
            "path": request.url.path,
            "method": request.method,
        }
    )
    return message_response(status.HTTP_400_BAD_REQUEST, "Invalid input")


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Catches domain and unhandled exceptions and returns consistent
    ``{"message": ...}`` error responses.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        """
        Process the request and handle any exceptions.

        Args:
            request: The incoming request
            call_next: The next middleware or route handler

        Returns:
            Response object
        """
        try:
            response = await call_next(request)
            return response

        except InvalidInputError as e:
            logger.warning(
                f"Invalid input: {e.message}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                }
            )
            return message_response(status.HTTP_400_BAD_REQUEST, e.message)

        except NotFoundError as e:
            logger.info(
                f"Not found: {e.message}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                }
            )
            return message_response(status.HTTP_404_NOT_FOUND, e.message)

        except CatalogUnavailableError as e:
            # Detail stays in the logs
            logger.error(
                f"Catalog unavailable: {e.message}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                }
            )
            return message_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal server error",
            )

        except Exception as e:
            logger.exception(
                f"Unhandled exception: {str(e)}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                }
            )
            return message_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal server error",
            )
