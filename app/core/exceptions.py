from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse


class AppError(Exception):
    """Base application error. Carries a stable code, never an HTTP status."""

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request", details: dict[str, Any] | None = None):
        super().__init__(message, code="BAD_REQUEST", details=details)


class ValidationError(AppError):
    """A record is missing a field required before it can be stored."""

    def __init__(self, message: str = "Validation error", details: dict[str, Any] | None = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class CurrencyMismatchError(ValidationError):
    def __init__(self, currency: str, expected: str):
        super().__init__(
            "wrong currency given",
            details={"currency": currency, "expected": expected},
        )
        self.code = "CURRENCY_MISMATCH"


class DuplicateError(AppError):
    def __init__(self, message: str = "Already exists", details: dict[str, Any] | None = None):
        super().__init__(message, code="DUPLICATE", details=details)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found", details: dict[str, Any] | None = None):
        super().__init__(message, code="NOT_FOUND", details=details)


class UserNotFoundError(NotFoundError):
    def __init__(self, key: str):
        super().__init__(f"user not found: {key}", details={"key": key})
        self.code = "USER_NOT_FOUND"


class OrderNotFoundError(NotFoundError):
    def __init__(self, key: str):
        super().__init__("order not found", details={"key": key})
        self.code = "ORDER_NOT_FOUND"


class VoucherNotFoundError(NotFoundError):
    def __init__(self, key: str):
        super().__init__("account not found", details={"key": key})
        self.code = "VOUCHER_NOT_FOUND"


class AlreadyRefundedError(AppError):
    def __init__(self, key: str):
        super().__init__("order already refunded", code="ALREADY_REFUNDED", details={"key": key})


class VoucherConstructionError(AppError):
    def __init__(self, message: str = "user key cannot be empty"):
        super().__init__(message, code="VOUCHER_CONSTRUCTION_ERROR")


class SeedDataError(AppError):
    """Seed file missing, unreadable or malformed. Aborts startup."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code="SEED_DATA_ERROR", details=details)


async def app_exception_handler(request: Request, exc: AppError) -> PlainTextResponse:
    from app.core.logging import get_logger
    get_logger(__name__).info("request_failed", code=exc.code, message=exc.message, **exc.details)
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    from app.core.logging import get_logger
    get_logger(__name__).info("request_invalid", errors=len(exc.errors()))
    return PlainTextResponse("invalid request body", status_code=status.HTTP_400_BAD_REQUEST)


async def generic_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    from app.core.logging import get_logger
    get_logger(__name__).exception("unhandled_exception", exc_info=exc)
    return PlainTextResponse("Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
