# beerstock/db/operations.py
"""Common async session helpers."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession


async def commit_async(session: AsyncSession) -> None:
    """Commit and rollback on failure."""
    try:
        await session.commit()
    except Exception:
        await rollback_async(session)
        raise


async def rollback_async(session: AsyncSession) -> None:
    if session.in_transaction():
        await session.rollback()


async def flush_async(session: AsyncSession) -> None:
    await session.flush()


async def refresh_async(session: AsyncSession, *instances: Any) -> None:
    for instance in instances:
        await session.refresh(instance)
