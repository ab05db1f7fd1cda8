"""SQLAlchemy ORM models for the hosted listings database (read-only from here)."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ListingRecord(Base):
    __tablename__ = "listings"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    title: Mapped[str] = mapped_column(String(255), default="")
    address: Mapped[str] = mapped_column(String(255), default="")
    city: Mapped[str] = mapped_column(String(100), default="")
    state: Mapped[str] = mapped_column(String(2), default="")
    zipcode: Mapped[str] = mapped_column(String(10), default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    beds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    baths: Mapped[Decimal | None] = mapped_column(Numeric(3, 1), nullable=True)
    sqft: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year_built: Mapped[int | None] = mapped_column(Integer, nullable=True)
    property_type: Mapped[str] = mapped_column(String(50), default="SFR")

    # Financials (annual, except estimated_rent which is monthly)
    estimated_rent: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_tax: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_insurance: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_maintenance: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_management: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_hoa: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_utilities: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_gardener: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    expense_trash: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    closing_costs_percentage: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)

    # Valuation
    estimated_market_value: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    stabilized_market_value: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    estimated_rehab_cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)

    features: Mapped[list | None] = mapped_column(JSON, nullable=True)


class CityDefaultRecord(Base):
    __tablename__ = "city_defaults"

    city_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    city_name: Mapped[str] = mapped_column(String(100), index=True)
    state_code: Mapped[str] = mapped_column(String(2))
    zip_code: Mapped[str | None] = mapped_column(String(10), nullable=True)

    property_tax_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    insurance_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    avg_appreciation_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    avg_rent_growth_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    vacancy_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    property_management_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    maintenance_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    capex_reserve_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    avg_market_cap_rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)
    median_home_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    median_rent: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)
    closing_costs_percentage: Mapped[Decimal] = mapped_column(Numeric(6, 4), default=0)

    last_updated: Mapped[str | None] = mapped_column(String(20), nullable=True)
    data_source: Mapped[str] = mapped_column(String(100), default="")
