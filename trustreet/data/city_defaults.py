"""City-level market defaults.

Rows live in the `city_defaults` table. When the table has no row for a city,
or the database is unreachable, the in-code table below is used, then the
national average.
"""

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trustreet.models.city_defaults import CityDefaults
from trustreet.models.db import CityDefaultRecord

logger = logging.getLogger(__name__)

NATIONAL_AVERAGE = CityDefaults(
    city_name="National Average",
    state_code="US",
    zip_code="00000",
    property_tax_rate=Decimal("0.012"),
    insurance_rate=Decimal("0.005"),
    avg_appreciation_rate=Decimal("0.035"),
    avg_rent_growth_rate=Decimal("0.03"),
    vacancy_rate=Decimal("0.05"),
    property_management_rate=Decimal("0.08"),
    maintenance_rate=Decimal("0.05"),
    capex_reserve_rate=Decimal("0.05"),
    avg_market_cap_rate=Decimal("0.06"),
    median_home_price=Decimal("400000"),
    median_rent=Decimal("2000"),
    closing_costs_percentage=Decimal("0.03"),
    data_source="Trustreet Internal",
)

CITY_DEFAULTS_FALLBACK: dict[str, CityDefaults] = {
    "Somerville": CityDefaults(
        city_name="Somerville",
        state_code="TN",
        zip_code="38135",
        property_tax_rate=Decimal("0.0065"),
        insurance_rate=Decimal("0.0040"),
        avg_appreciation_rate=Decimal("0.030"),
        avg_rent_growth_rate=Decimal("0.020"),
        vacancy_rate=Decimal("0.050"),
        property_management_rate=Decimal("0.080"),
        maintenance_rate=Decimal("0.050"),
        capex_reserve_rate=Decimal("0.050"),
        avg_market_cap_rate=Decimal("0.075"),
        median_home_price=Decimal("350000"),
        median_rent=Decimal("1800"),
        closing_costs_percentage=Decimal("0.02"),
        data_source="internal assumptions",
    ),
    "Brooklyn": CityDefaults(
        city_name="Brooklyn",
        state_code="NY",
        zip_code="11201",
        property_tax_rate=Decimal("0.019"),
        insurance_rate=Decimal("0.006"),
        avg_appreciation_rate=Decimal("0.045"),
        avg_rent_growth_rate=Decimal("0.035"),
        vacancy_rate=Decimal("0.03"),
        property_management_rate=Decimal("0.06"),
        maintenance_rate=Decimal("0.04"),
        capex_reserve_rate=Decimal("0.04"),
        avg_market_cap_rate=Decimal("0.045"),
        median_home_price=Decimal("950000"),
        median_rent=Decimal("3500"),
        closing_costs_percentage=Decimal("0.04"),
        data_source="Trustreet Internal",
    ),
    "Manhattan": CityDefaults(
        city_name="Manhattan",
        state_code="NY",
        zip_code="10016",
        property_tax_rate=Decimal("0.020"),
        insurance_rate=Decimal("0.005"),
        avg_appreciation_rate=Decimal("0.040"),
        avg_rent_growth_rate=Decimal("0.040"),
        vacancy_rate=Decimal("0.04"),
        property_management_rate=Decimal("0.05"),
        maintenance_rate=Decimal("0.03"),
        capex_reserve_rate=Decimal("0.03"),
        avg_market_cap_rate=Decimal("0.04"),
        median_home_price=Decimal("1300000"),
        median_rent=Decimal("4200"),
        closing_costs_percentage=Decimal("0.05"),
        data_source="Trustreet Internal",
    ),
}


def fallback_defaults(city: str) -> CityDefaults:
    return CITY_DEFAULTS_FALLBACK.get(city, NATIONAL_AVERAGE)


def _from_record(row: CityDefaultRecord) -> CityDefaults:
    def d(value) -> Decimal:
        return Decimal(str(value)) if value is not None else Decimal("0")

    return CityDefaults(
        city_name=row.city_name,
        state_code=row.state_code,
        zip_code=row.zip_code or "",
        property_tax_rate=d(row.property_tax_rate),
        insurance_rate=d(row.insurance_rate),
        avg_appreciation_rate=d(row.avg_appreciation_rate),
        avg_rent_growth_rate=d(row.avg_rent_growth_rate),
        vacancy_rate=d(row.vacancy_rate),
        property_management_rate=d(row.property_management_rate),
        maintenance_rate=d(row.maintenance_rate),
        capex_reserve_rate=d(row.capex_reserve_rate),
        avg_market_cap_rate=d(row.avg_market_cap_rate),
        median_home_price=d(row.median_home_price),
        median_rent=d(row.median_rent),
        closing_costs_percentage=d(row.closing_costs_percentage),
        data_source=row.data_source or "",
    )


class CityDefaultsProvider:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, city: str, zip_code: str | None = None) -> CityDefaults:
        """Most specific defaults for a city: exact zip match, else any row for the city.

        City names match case-insensitively.
        """
        try:
            result = await self.session.execute(
                select(CityDefaultRecord)
                .where(func.lower(CityDefaultRecord.city_name) == city.lower())
                .order_by(CityDefaultRecord.city_id)
            )
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("City defaults lookup failed for %s: %s", city, e)
            return fallback_defaults(city)

        if not rows:
            logger.warning("No city defaults for %s, using fallback", city)
            return fallback_defaults(city)

        if zip_code:
            for row in rows:
                if row.zip_code == zip_code:
                    return _from_record(row)

        return _from_record(rows[0])
