from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from beerstock.db.operations import commit_async
from beerstock.db.session_async import get_async_db
from beerstock.schemas.beer import BeerCreate, BeerRead, QuantityUpdate
from beerstock.services import beer_service

router = APIRouter(prefix="/beers", tags=["beers"])


@router.post(
    "",
    response_model=BeerRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new beer",
)
async def create_beer(payload: BeerCreate, db: AsyncSession = Depends(get_async_db)):
    beer = await beer_service.create_beer(db, payload)
    await commit_async(db)
    return beer


@router.get("", response_model=list[BeerRead], summary="List all beers")
async def list_beers(db: AsyncSession = Depends(get_async_db)):
    beers = await beer_service.list_all(db)
    return [BeerRead.model_validate(b) for b in beers]


@router.get("/{name}", response_model=BeerRead, summary="Find a beer by name")
async def get_beer_by_name(
    name: str = Path(..., min_length=1, max_length=200),
    db: AsyncSession = Depends(get_async_db),
):
    return await beer_service.get_by_name(db, name)


@router.delete(
    "/{beer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a beer by id",
)
async def delete_beer(
    beer_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_async_db),
):
    await beer_service.delete_by_id(db, beer_id)
    await commit_async(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=BeerRead, summary="Increment beer stock")
async def increment_stock(
    payload: QuantityUpdate,
    beer_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_async_db),
):
    beer = await beer_service.increment(db, beer_id, payload.quantity)
    await commit_async(db)
    return beer


@router.patch(
    "/{beer_id}/decrement",
    response_model=BeerRead,
    summary="Decrement beer stock",
    responses={400: {"description": "Stock would fall below the minimum expected"}},
)
async def decrement_stock(
    payload: QuantityUpdate,
    beer_id: int = Path(..., ge=1),
    db: AsyncSession = Depends(get_async_db),
):
    beer = await beer_service.decrement(db, beer_id, payload.quantity)
    await commit_async(db)
    return beer
