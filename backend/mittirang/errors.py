from enum import Enum


class ErrorType(Enum):
    MISSING_NAME = "missing_name"
    INVALID_PRICE = "invalid_price"
    INVALID_SELLING_PRICE = "invalid_selling_price"
    NOT_FOUND = "not_found"
    INVALID_UPLOAD = "invalid_upload"
    UPLOAD_TOO_LARGE = "upload_too_large"
    STORAGE_ERROR = "storage_error"
    INTERNAL_ERROR = "internal_error"


# write-path validation failures, surfaced to the admin form
VALIDATION_ERRORS = frozenset(
    {
        ErrorType.MISSING_NAME,
        ErrorType.INVALID_PRICE,
        ErrorType.INVALID_SELLING_PRICE,
    }
)

# Map error types to HTTP status codes
ERROR_STATUS_MAP = {
    ErrorType.MISSING_NAME: 400,
    ErrorType.INVALID_PRICE: 400,
    ErrorType.INVALID_SELLING_PRICE: 400,
    ErrorType.NOT_FOUND: 404,
    ErrorType.INVALID_UPLOAD: 400,
    ErrorType.UPLOAD_TOO_LARGE: 413,
    ErrorType.STORAGE_ERROR: 502,
    ErrorType.INTERNAL_ERROR: 500,
}
