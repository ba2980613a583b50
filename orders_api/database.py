# orders_api/database.py
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from . import config

# Base declarative
Base = declarative_base()


def make_engine(url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    return create_async_engine(
        url or config.DATABASE_URL,
        echo=config.SQL_ECHO if echo is None else echo,
        future=True,
    )


def make_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def init_models(engine: AsyncEngine) -> None:
    """Create the tables (development / tests). Managed databases use alembic."""
    # models must be imported so the table is registered on Base.metadata
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    # the session factory lives on the app, not in this module
    session_maker = request.app.state.session_maker
    async with session_maker() as session:
        yield session
