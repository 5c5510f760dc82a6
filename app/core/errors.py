# app/core/errors.py
"""
Application error taxonomy.

Services raise these instead of HTTPException so the HTTP mapping lives in
one place (see `register_exception_handlers`):

  - ValidationError  -> 400
  - NotFoundError    -> 404
  - PersistenceError -> 500 (body also carries the underlying error text)
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"message": self.message}


class ValidationError(StorefrontError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(StorefrontError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(StorefrontError):
    """The store is unreachable or rejected a write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.error = error

    def to_body(self) -> dict:
        body = super().to_body()
        if self.error is not None:
            body["error"] = self.error
        return body


@contextmanager
def persistence_guard(session: Session, message: str) -> Iterator[None]:
    """
    Wrap a unit of store writes.

    On any SQLAlchemy failure the session is rolled back and the failure is
    re-raised as PersistenceError(message). Nothing is retried.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("%s", message)
        raise PersistenceError(message, str(exc)) from exc


# ---- FastAPI wiring ----


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    error = PersistenceError("Database error", str(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
