"""Seed script for populating a development beer catalog."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH when running as a script.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from beerstock.core.config import settings
from beerstock.db.session_async import AsyncSessionLocal
from beerstock.models.beer import BeerType
from beerstock.schemas.beer import BeerCreate
from beerstock.services import beer_service
from beerstock.services.exceptions import BeerNotFoundError


@dataclass(frozen=True, slots=True)
class DevBeer:
    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType


DEV_BEERS: tuple[DevBeer, ...] = (
    DevBeer(name="Brahma", brand="Ambev", max=50, quantity=10, type=BeerType.LAGER),
    DevBeer(name="Colorado Indica", brand="Colorado", max=40, quantity=25, type=BeerType.IPA),
    DevBeer(name="Eisenbahn Weizenbier", brand="Eisenbahn", max=30, quantity=12, type=BeerType.WEISS),
    DevBeer(name="Baden Baden Stout", brand="Baden Baden", max=20, quantity=4, type=BeerType.STOUT),
)


async def seed_dev_beers() -> None:
    """Insert missing development beers; existing names are left untouched."""
    logger = logging.getLogger("seed_dev_beers")
    logger.info("Seeding development beers into %s", settings.ASYNC_DATABASE_URL)

    created = 0
    skipped = 0

    async with AsyncSessionLocal() as session:
        for dev_beer in DEV_BEERS:
            try:
                await beer_service.get_by_name(session, dev_beer.name)
            except BeerNotFoundError:
                payload = BeerCreate(
                    name=dev_beer.name,
                    brand=dev_beer.brand,
                    max=dev_beer.max,
                    quantity=dev_beer.quantity,
                    type=dev_beer.type,
                )
                await beer_service.create_beer(session, payload)
                created += 1
                logger.debug("Created beer %s", dev_beer.name)
            else:
                skipped += 1
                logger.debug("Skipped beer %s (already registered)", dev_beer.name)

        await session.commit()

    logger.info("Seed completed: %s created, %s skipped", created, skipped)


async def main() -> None:
    await seed_dev_beers()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
