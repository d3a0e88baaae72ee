from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from beerstock.core.config import settings
from beerstock.core.logging import get_logger
from beerstock.core.metrics import record_stock_rejection
from beerstock.db.operations import flush_async, refresh_async, rollback_async
from beerstock.models.beer import Beer
from beerstock.schemas.beer import BeerCreate
from beerstock.services.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockUnderExpectedLimitError,
    InvalidQuantityError,
    StockConflictError,
)
from beerstock.services.stock_guard import check_decrement, check_increment

logger = get_logger("beerstock.stock")

# reintentos cuando otro writer cambia la fila entre la lectura y el UPDATE
_MAX_APPLY_ATTEMPTS = 3


async def _find_by_name(db: AsyncSession, name: str) -> Beer | None:
    stmt = select(Beer).where(Beer.name == name).limit(1)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def _get_for_update(db: AsyncSession, beer_id: int) -> Beer:
    """Load the beer, locking its row on backends that support FOR UPDATE.

    SQLite ignores the lock; there the conditional UPDATE in ``_apply_delta``
    is what keeps concurrent movements from overwriting each other.
    """
    beer = await db.get(Beer, beer_id, with_for_update=True)
    if beer is None:
        raise BeerNotFoundError(beer_id)
    return beer


def _ensure_positive(quantity: int) -> None:
    if quantity <= 0:
        raise InvalidQuantityError("La cantidad debe ser mayor que 0.")


async def create_beer(db: AsyncSession, payload: BeerCreate) -> Beer:
    if await _find_by_name(db, payload.name):
        raise BeerAlreadyRegisteredError(payload.name)

    beer = Beer(**payload.model_dump())
    db.add(beer)
    try:
        await flush_async(db)
    except IntegrityError as exc:
        await rollback_async(db)
        raise BeerAlreadyRegisteredError(payload.name) from exc
    await refresh_async(db, beer)
    return beer


async def get_by_name(db: AsyncSession, name: str) -> Beer:
    beer = await _find_by_name(db, name)
    if beer is None:
        raise BeerNotFoundError(name)
    return beer


async def list_all(db: AsyncSession) -> list[Beer]:
    result = await db.execute(select(Beer).order_by(Beer.id.asc()))
    return list(result.scalars().all())


async def delete_by_id(db: AsyncSession, beer_id: int) -> None:
    beer = await db.get(Beer, beer_id)
    if beer is None:
        raise BeerNotFoundError(beer_id)
    await db.delete(beer)
    await flush_async(db)


async def _apply_delta(db: AsyncSession, beer: Beer, delta: int, limit_clause) -> bool:
    """Apply ``quantity += delta`` only while ``limit_clause`` still holds in the database.

    The condition is evaluated by the UPDATE itself, so a concurrent writer
    that changed the row after it was loaded makes this update match zero
    rows instead of overwriting its result.
    """
    stmt = (
        update(Beer)
        .where(Beer.id == beer.id, limit_clause)
        .values(quantity=Beer.quantity + delta)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    await refresh_async(db, beer)
    return result.rowcount == 1


async def increment(db: AsyncSession, beer_id: int, quantity: int) -> Beer:
    _ensure_positive(quantity)
    beer = await _get_for_update(db, beer_id)

    for _ in range(_MAX_APPLY_ATTEMPTS):
        check = check_increment(beer.id, beer.quantity, quantity, beer.max)
        if not check.ok:
            record_stock_rejection(check.kind)
            logger.warning(
                "Stock increment rejected",
                extra={"beer_id": beer.id, "quantity": quantity, "stock": beer.quantity, "max": beer.max},
            )
            raise BeerStockExceededError(check)

        if await _apply_delta(db, beer, quantity, Beer.quantity + quantity <= Beer.max):
            logger.info(
                "Stock incremented",
                extra={"beer_id": beer.id, "quantity": quantity, "stock": beer.quantity},
            )
            return beer

    raise StockConflictError(beer.id)


async def decrement(
    db: AsyncSession,
    beer_id: int,
    quantity: int,
    minimum_allowed: int | None = None,
) -> Beer:
    _ensure_positive(quantity)
    floor = settings.BEER_MIN_STOCK if minimum_allowed is None else minimum_allowed
    if floor < 0:
        raise InvalidQuantityError("El stock mínimo no puede ser negativo.")
    beer = await _get_for_update(db, beer_id)

    for _ in range(_MAX_APPLY_ATTEMPTS):
        check = check_decrement(beer.id, beer.quantity, quantity, floor)
        if not check.ok:
            record_stock_rejection(check.kind)
            logger.warning(
                "Stock decrement rejected",
                extra={"beer_id": beer.id, "quantity": quantity, "stock": beer.quantity, "min_stock": floor},
            )
            raise BeerStockUnderExpectedLimitError(check)

        if await _apply_delta(db, beer, -quantity, Beer.quantity - quantity >= floor):
            logger.info(
                "Stock decremented",
                extra={"beer_id": beer.id, "quantity": quantity, "stock": beer.quantity},
            )
            return beer

    raise StockConflictError(beer.id)
