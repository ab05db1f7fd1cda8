"""Assumption builder: turns a stored listing into engine inputs.

Sits between the data boundary and the pure engine:
    Listing + CityDefaults + UserOverrides → DealInputs

Precedence for every field: user override, then the listing, then city
defaults, then deployment settings.
"""

from decimal import Decimal

from trustreet.config import Settings, settings as default_settings
from trustreet.models.assumptions import (
    DealInputs,
    FinancingAssumptions,
    MarketAssumptions,
    OperatingAssumptions,
    PropertyValuation,
)
from trustreet.models.city_defaults import CityDefaults, UserOverrides
from trustreet.models.listing import Listing


def _first(*values):
    for v in values:
        if v is not None:
            return v
    return None


def _monthly(annual: Decimal) -> Decimal:
    return annual / 12


def valuation_from_listing(listing: Listing) -> PropertyValuation:
    return PropertyValuation(
        estimated_market_value=listing.estimated_market_value,
        stabilized_market_value=listing.stabilized_market_value,
        estimated_rehab_cost=listing.estimated_rehab_cost,
    )


def operating_from_listing(listing: Listing, overrides: UserOverrides | None = None) -> OperatingAssumptions:
    """Listing expenses are annual; the calculator works in monthly amounts."""
    o = overrides or UserOverrides()
    return OperatingAssumptions(
        monthly_rent=_first(o.monthly_rent, listing.estimated_rent),
        monthly_tax=_first(o.monthly_tax, _monthly(listing.expense_tax)),
        monthly_insurance=_first(o.monthly_insurance, _monthly(listing.expense_insurance)),
        monthly_maintenance=_first(o.monthly_maintenance, _monthly(listing.expense_maintenance)),
        monthly_management=_first(o.monthly_management, _monthly(listing.expense_management)),
        monthly_hoa=_first(o.monthly_hoa, _monthly(listing.expense_hoa)),
        monthly_utilities=_first(o.monthly_utilities, _monthly(listing.expense_utilities)),
        monthly_other=_first(
            o.monthly_other,
            _monthly(listing.expense_gardener + listing.expense_trash),
        ),
        monthly_capex_reserve=_first(o.monthly_capex_reserve, Decimal("0")),
    )


def financing_from_listing(
    listing: Listing,
    overrides: UserOverrides | None = None,
    s: Settings | None = None,
) -> FinancingAssumptions:
    o = overrides or UserOverrides()
    s = s or default_settings
    return FinancingAssumptions(
        purchase_price=_first(o.purchase_price, listing.price),
        down_payment_percent=_first(o.down_payment_percent, s.default_down_payment_percent),
        interest_rate_percent=_first(o.interest_rate_percent, s.default_interest_rate_percent),
        loan_term_years=_first(o.loan_term_years, s.default_loan_term_years),
    )


def market_from_listing(
    listing: Listing,
    city: CityDefaults | None = None,
    overrides: UserOverrides | None = None,
    s: Settings | None = None,
) -> MarketAssumptions:
    o = overrides or UserOverrides()
    s = s or default_settings

    # A listing-level closing cost percentage of 0 means "not set"
    listing_closing = listing.closing_costs_percentage or None
    city_closing = city.closing_costs_percent if city else None

    return MarketAssumptions(
        closing_costs_percent=_first(o.closing_costs_percent, listing_closing, city_closing, Decimal("0")),
        annual_appreciation_rate=_first(
            o.annual_appreciation_rate,
            city.avg_appreciation_rate if city else None,
            s.default_appreciation_rate,
        ),
        year_one_appreciation_rate=s.default_year_one_appreciation_rate,
        annual_rent_growth_rate=_first(
            o.annual_rent_growth_rate,
            city.avg_rent_growth_rate if city else None,
            s.default_rent_growth_rate,
        ),
        annual_expense_inflation_rate=_first(
            o.annual_expense_inflation_rate, s.default_expense_inflation_rate,
        ),
        vacancy_rate=_first(
            o.vacancy_rate,
            city.vacancy_rate if city else None,
            s.default_vacancy_rate,
        ),
    )


def build_assumptions(
    listing: Listing,
    city: CityDefaults | None = None,
    overrides: UserOverrides | None = None,
    s: Settings | None = None,
) -> DealInputs:
    """Build all engine inputs for one listing.

    Raises InvalidInputError if an override (or the stored listing) is out of range.
    """
    return DealInputs(
        financing=financing_from_listing(listing, overrides, s),
        operating=operating_from_listing(listing, overrides),
        market=market_from_listing(listing, city, overrides, s),
        valuation=valuation_from_listing(listing),
    )
