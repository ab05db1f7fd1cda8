"""Canonical test fixtures used across all tests.

Fixture: $300K single-family rental, 20% down, 6.5% rate, 30yr fixed.
Rent $2,500/mo, operating expenses $9,000/yr, 3% closing costs,
stabilized value $330K after $10K rehab.
"""

from decimal import Decimal

import pytest

from trustreet.config import Settings
from trustreet.models.assumptions import (
    FinancingAssumptions,
    MarketAssumptions,
    OperatingAssumptions,
    PropertyValuation,
    TaxPolicy,
)
from trustreet.models.listing import Listing


@pytest.fixture
def canonical_financing() -> FinancingAssumptions:
    return FinancingAssumptions(
        purchase_price=Decimal("300000"),
        down_payment_percent=Decimal("20"),
        interest_rate_percent=Decimal("6.5"),
        loan_term_years=30,
    )


@pytest.fixture
def canonical_operating() -> OperatingAssumptions:
    """$750/mo of expenses = $9,000/yr."""
    return OperatingAssumptions(
        monthly_rent=Decimal("2500"),
        monthly_tax=Decimal("300"),
        monthly_insurance=Decimal("100"),
        monthly_maintenance=Decimal("200"),
        monthly_management=Decimal("150"),
    )


@pytest.fixture
def canonical_market() -> MarketAssumptions:
    return MarketAssumptions(
        closing_costs_percent=Decimal("3"),
        annual_appreciation_rate=Decimal("0.03"),
        year_one_appreciation_rate=Decimal("0.05"),
        annual_rent_growth_rate=Decimal("0.03"),
        annual_expense_inflation_rate=Decimal("0.02"),
        vacancy_rate=Decimal("0.05"),
    )


@pytest.fixture
def canonical_valuation() -> PropertyValuation:
    return PropertyValuation(
        estimated_market_value=Decimal("310000"),
        stabilized_market_value=Decimal("330000"),
        estimated_rehab_cost=Decimal("10000"),
    )


@pytest.fixture
def policy() -> TaxPolicy:
    return TaxPolicy()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def canonical_listing() -> Listing:
    """The canonical deal as a stored listing (annual expenses)."""
    return Listing(
        id="lst-001",
        title="Renovated 3BR Ranch",
        address="123 Main Street",
        city="Somerville",
        state="TN",
        zipcode="38135",
        price=Decimal("300000"),
        beds=3,
        baths=Decimal("2"),
        sqft=1500,
        year_built=1998,
        estimated_rent=Decimal("2500"),
        expense_tax=Decimal("3600"),
        expense_insurance=Decimal("1200"),
        expense_maintenance=Decimal("2400"),
        expense_management=Decimal("1800"),
        closing_costs_percentage=Decimal("3"),
        estimated_market_value=Decimal("310000"),
        stabilized_market_value=Decimal("330000"),
        estimated_rehab_cost=Decimal("10000"),
    )
