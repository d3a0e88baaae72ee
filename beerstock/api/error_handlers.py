from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from beerstock.services.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockUnderExpectedLimitError,
    InvalidQuantityError,
    ServiceError,
    StockConflictError,
    StockLimitError,
)

# Traducción explícita tipo de error -> status HTTP.
EXCEPTION_STATUS_CODES: dict[type[ServiceError], int] = {
    BeerNotFoundError: 404,
    BeerAlreadyRegisteredError: 400,
    BeerStockUnderExpectedLimitError: 400,
    BeerStockExceededError: 400,
    InvalidQuantityError: 422,
    StockConflictError: 409,
    ServiceError: 400,
}


def status_code_for(exc: ServiceError) -> int:
    """Resolve the most specific status registered along the exception's MRO."""
    for cls in type(exc).__mro__:
        code = EXCEPTION_STATUS_CODES.get(cls)
        if code is not None:
            return code
    return 400


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def handle_service_error(_: Request, exc: ServiceError) -> JSONResponse:
        content: dict = {"detail": exc.detail}
        if isinstance(exc, StockLimitError):
            content["beer_id"] = exc.item_id
            content["quantity"] = exc.quantity
        return JSONResponse(status_code=status_code_for(exc), content=content)
