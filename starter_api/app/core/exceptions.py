"""
Application exceptions and their HTTP mapping.

Services raise these domain errors instead of ``HTTPException`` so
that they stay usable outside a request.  ``register_exception_handlers``
translates them into JSON responses:

* ``StoreError`` -> 500 with a generic body; the cause is only logged.
* ``InvalidInputError`` -> 400 with the validation message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StarterError(Exception):
    """Base class for errors raised by the application."""


class StoreError(StarterError):
    """The user store could not complete an operation."""


class InvalidInputError(StarterError):
    """A request failed validation at the service boundary."""


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


async def _invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for the application's domain errors."""
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(InvalidInputError, _invalid_input_handler)
