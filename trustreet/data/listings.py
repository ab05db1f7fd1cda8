"""Listing lookups against the hosted listings table."""

import logging

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from trustreet.data.slugs import generate_listing_slug, parse_listing_slug
from trustreet.models.db import ListingRecord
from trustreet.models.listing import Listing

logger = logging.getLogger(__name__)


def listing_from_record(row: ListingRecord) -> Listing:
    record = {attr.key: getattr(row, attr.key) for attr in inspect(ListingRecord).column_attrs}
    return Listing.from_record(record)


class ListingRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, listing_id: str) -> Listing | None:
        row = await self.session.get(ListingRecord, listing_id)
        if row is None:
            logger.info("Listing not found: %s", listing_id)
            return None
        return listing_from_record(row)

    async def get_by_slug(self, slug: str) -> Listing | None:
        """Resolve an address slug. Candidates are narrowed by zipcode, then matched on the full slug."""
        parsed = parse_listing_slug(slug)
        if parsed is None:
            return None

        result = await self.session.execute(
            select(ListingRecord).where(ListingRecord.zipcode == parsed.zipcode)
        )
        for row in result.scalars().all():
            if generate_listing_slug(row.address, row.city, row.state, row.zipcode) == slug:
                return listing_from_record(row)

        logger.info("No listing matches slug: %s", slug)
        return None
