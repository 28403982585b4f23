from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from errorcode_admin.api import error_code
from errorcode_admin.config import settings
from errorcode_admin.exceptions import (
    ApplicationError,
    ConflictError,
    ResourceNotFoundError,
    ValidationError,
)
from errorcode_admin.repositories import init_db
from errorcode_admin.utils.logger import logger

_STATUS_MAP = (
    (ValidationError, 400),
    (ResourceNotFoundError, 404),
    (ConflictError, 409),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("{} {} started", settings.app.name, settings.app.version)
    yield
    logger.info("{} stopped", settings.app.name)


app = FastAPI(title=settings.app.name, version=settings.app.version, lifespan=lifespan)


@app.exception_handler(ApplicationError)
async def handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
    status = next((code for error_type, code in _STATUS_MAP if isinstance(exc, error_type)), 500)
    if status >= 500:
        logger.opt(exception=exc).error("{} {} failed: {}", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError("Request validation failed", details={"errors": jsonable_encoder(exc.errors())})
    return JSONResponse(status_code=422, content=error.to_dict())


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:  # pragma: no cover - safeguard
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    body = {
        "success": False,
        "error": "Internal server error",
        "error_code": "INTERNAL_ERROR",
        "details": {},
    }
    return JSONResponse(status_code=500, content=body)


app.include_router(error_code.router, prefix="/api/v1")


@app.get("/")
def root() -> dict:
    return {"success": True, "message": settings.app.name, "version": settings.app.version}
