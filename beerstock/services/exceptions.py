# beerstock/services/exceptions.py
from __future__ import annotations

from typing import Any

from beerstock.services.stock_guard import StockExceededFailure, StockUnderLimitFailure


class ServiceError(Exception):
    """Clase base para errores de la capa de servicio."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class InvalidQuantityError(ServiceError):
    """Lanzada cuando una cantidad es inválida (e.g., <= 0)."""
    pass


class BeerNotFoundError(ServiceError):
    """La cerveza buscada (por id o por nombre) no existe."""

    def __init__(self, key: Any):
        self.key = key
        if isinstance(key, int):
            detail = f"Beer not found with ID {key}"
        else:
            detail = f"Beer not found with name {key}"
        super().__init__(detail)


class BeerAlreadyRegisteredError(ServiceError):
    """Ya existe una cerveza con el mismo nombre."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class StockLimitError(ServiceError):
    """Base para los rechazos de las reglas de stock."""

    def __init__(self, failure: StockUnderLimitFailure | StockExceededFailure):
        self.failure = failure
        self.item_id = failure.item_id
        self.quantity = failure.quantity
        super().__init__(failure.message)


class BeerStockUnderExpectedLimitError(StockLimitError):
    """El decremento dejaría el stock por debajo del mínimo esperado."""

    failure: StockUnderLimitFailure


class BeerStockExceededError(StockLimitError):
    """El incremento superaría la capacidad máxima de la cerveza."""

    failure: StockExceededFailure


class StockConflictError(ServiceError):
    """El stock cambió concurrentemente y el movimiento no pudo aplicarse."""

    def __init__(self, beer_id: int):
        self.beer_id = beer_id
        super().__init__(f"Stock of beer {beer_id} changed concurrently, retry the operation.")
