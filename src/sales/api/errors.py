"""Translate order lifecycle errors into HTTP responses.

Protean's own exceptions (``ValidationError``, ``ObjectNotFoundError``, ...)
are handled by ``protean.integrations.fastapi``; this adds the sales errors
on top with the same ``{"error": ...}`` body shape.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from sales.shared.exceptions import CommitFailure, OperationCancelled, OrderNotFound, ProductNotFound

_STATUS_BY_ERROR = {
    OrderNotFound: 404,
    ProductNotFound: 422,
    OperationCancelled: 409,
    CommitFailure: 503,
}


def _respond_with(status_code):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    return handler


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    for error_cls, status_code in _STATUS_BY_ERROR.items():
        app.add_exception_handler(error_cls, _respond_with(status_code))
