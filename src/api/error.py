"""API error type and error-code to HTTP status mapping"""

from typing import Optional
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

STATUS_BY_CODE = {
    "TRANSFER_NOT_ALLOWED": status.HTTP_403_FORBIDDEN,
    "RECHARGE_NOT_ALLOWED": status.HTTP_403_FORBIDDEN,
    "INVALID_RECHARGE_STATE": status.HTTP_409_CONFLICT,
}


def status_for(error: Error) -> int:
    """
    Map a use case error code to an HTTP status

    - *_NOT_FOUND -> 404
    - INSUFFICIENT_* -> 402
    - TRANSFER_NOT_ALLOWED, RECHARGE_NOT_ALLOWED -> 403
    - INVALID_RECHARGE_STATE -> 409
    - *_FAILED -> 500
    - anything else -> 400
    """
    if error.code in STATUS_BY_CODE:
        return STATUS_BY_CODE[error.code]
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code.startswith("INSUFFICIENT_"):
        return status.HTTP_402_PAYMENT_REQUIRED
    if error.code.endswith("_FAILED") and error.code != "WALLET_DEBIT_FAILED":
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    """Raised by routes to return a use case error to the client"""

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error)


def error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error.code, exc.error.message),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", details or "Invalid request parameters"),
    )
