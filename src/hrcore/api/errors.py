"""HTTP error envelope and exception handlers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hrcore.core.exceptions import InvalidReportType


class ApiError(Exception):
    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message


def error_response(*, status_code: int, code: str, message: str) -> JSONResponse:
    payload = {"error": {"code": code, "message": message}}
    return JSONResponse(status_code=status_code, content=payload)


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(status_code=exc.status_code, code=exc.code, message=exc.message)


async def _invalid_report_type_handler(request: Request, exc: InvalidReportType) -> JSONResponse:
    return error_response(status_code=400, code="INVALID_REPORT_TYPE", message="Invalid report type")


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status_code=422, code="VALIDATION_ERROR", message=str(exc.errors()))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(InvalidReportType, _invalid_report_type_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
