# app/errors.py

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ValidationError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=409, detail=detail)


class InternalError(HTTPException):
    def __init__(self, detail: str = "Error interno del servidor"):
        super().__init__(status_code=500, detail=detail)


def _field_name(loc) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts in front
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def describe_validation_errors(errors) -> str:
    """Turn pydantic error entries into one readable message."""
    missing = []
    invalid = []
    for error in errors:
        name = _field_name(error.get("loc", ()))
        # An explicit null counts as missing
        if error.get("type") == "missing" or error.get("input") is None:
            missing.append(name)
        else:
            msg = error.get("msg", "valor inválido")
            invalid.append(f"{name}: {msg}" if name != "body" else msg)

    parts = []
    if missing:
        parts.append("Faltan campos obligatorios: " + ", ".join(missing))
    if invalid:
        parts.append("Datos inválidos: " + "; ".join(invalid))
    return ". ".join(parts) or "Datos inválidos"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_errors(exc.errors())
        logger.info(f"Rejected {request.method} {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"detail": message})

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": InternalError().detail})
