import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from mittirang.errors import ERROR_STATUS_MAP, VALIDATION_ERRORS, ErrorType

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Custom exception that services can raise."""

    def __init__(self, error_type: ErrorType, message: str):
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class ProductValidationError(AppException):
    """A create/update payload was rejected before anything was persisted."""

    def __init__(self, error_type: ErrorType, message: str):
        if error_type not in VALIDATION_ERRORS:
            raise ValueError(f"{error_type} is not a validation error")
        super().__init__(error_type, message)

    @property
    def kind(self) -> ErrorType:
        return self.error_type


class ProductNotFound(AppException):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(ErrorType.NOT_FOUND, "Product not found")


async def app_exception_handler(_request: Request, exc: AppException) -> JSONResponse:
    """Global handler for AppException - converts to proper HTTP response."""
    status_code = ERROR_STATUS_MAP.get(exc.error_type, 500)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.error_type.value},
    )


async def generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Global handler for unhandled exceptions - returns 500."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "code": ErrorType.INTERNAL_ERROR.value},
    )
