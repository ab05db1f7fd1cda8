"""FastAPI dependency injection."""

from collections.abc import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from trustreet.config import Settings, settings
from trustreet.data.city_defaults import CityDefaultsProvider
from trustreet.data.listings import ListingRepository

engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with async_session() as session:
        yield session


def get_settings() -> Settings:
    return settings


def get_listing_repository(session: AsyncSession = Depends(get_db)) -> ListingRepository:
    return ListingRepository(session)


def get_city_defaults_provider(session: AsyncSession = Depends(get_db)) -> CityDefaultsProvider:
    return CityDefaultsProvider(session)
