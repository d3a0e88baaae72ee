# tests/conftest.py
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import os
from typing import AsyncIterator, Generator

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("ASYNC_DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from beerstock.main import app
from beerstock.db.session import Base, engine as sync_engine
from beerstock.db.session_async import AsyncSessionLocal, async_engine
from beerstock.models.beer import Beer, BeerType


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sync_engine)


# ---------- Fixtures ----------
@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Crea las tablas en SQLite solo una vez por sesión de tests."""
    Base.metadata.create_all(bind=sync_engine)
    yield
    Base.metadata.drop_all(bind=sync_engine)


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    with sync_engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Provee una sesión sync corta para preparar datos."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncIterator[httpx.AsyncClient]:
    """Provee un AsyncClient enlazado a la app."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    # las conexiones del pool quedan atadas al loop de este test
    await async_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def async_db_session() -> AsyncIterator[AsyncSession]:
    """Provee una AsyncSession para pruebas asíncronas directas."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.rollback()
    await async_engine.dispose()


@pytest.fixture(scope="function")
def make_beer(db_session: Session):
    """Factory que persiste una cerveza con valores por defecto razonables."""

    def _make(
        name: str = "Brahma",
        brand: str = "Ambev",
        max: int = 50,
        quantity: int = 10,
        type: BeerType = BeerType.LAGER,
    ) -> Beer:
        beer = Beer(name=name, brand=brand, max=max, quantity=quantity, type=type)
        db_session.add(beer)
        db_session.commit()
        db_session.refresh(beer)
        return beer

    return _make
