"""Error Handlers: global exception handlers for the payment API.

Invariants:
    - PaymentError -> {"code", "message"} with the error's http_status
    - Exception (catch-all) -> server_error, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from gateway.core.errors import PaymentError, ServerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_payment_error_handler(app)
    _register_generic_error_handler(app)


def _register_payment_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PaymentError)
    async def payment_error_handler(request: Request, exc: PaymentError):
        level = logging.ERROR if exc.http_status >= 500 else logging.INFO
        logger.log(
            level,
            f"PaymentError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ServerError().to_response(),
        )
