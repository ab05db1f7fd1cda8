"""Cash flow primitives: rent, vacancy, expenses, NOI and ratio helpers.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from trustreet.models.assumptions import MarketAssumptions, OperatingAssumptions
from trustreet.models.validation import MAX_PROJECTION_YEAR, require_at_most, require_positive


def _growth_factor(rate: Decimal, year: int) -> Decimal:
    require_positive("year", year)
    require_at_most("year", year, MAX_PROJECTION_YEAR)
    return (1 + rate) ** (year - 1)


def gross_potential_rent(operating: OperatingAssumptions, market: MarketAssumptions, year: int) -> Decimal:
    """Scheduled rent for a given year (1-indexed), grown from year 1."""
    return operating.annual_rent * _growth_factor(market.annual_rent_growth_rate, year)


def vacancy_loss(operating: OperatingAssumptions, market: MarketAssumptions, year: int) -> Decimal:
    return gross_potential_rent(operating, market, year) * market.vacancy_rate


def effective_gross_income(operating: OperatingAssumptions, market: MarketAssumptions, year: int) -> Decimal:
    """EGI = gross potential rent - vacancy."""
    return gross_potential_rent(operating, market, year) - vacancy_loss(operating, market, year)


def operating_expenses(operating: OperatingAssumptions, market: MarketAssumptions, year: int) -> Decimal:
    """Annual operating expenses, inflated from year 1."""
    return operating.annual_expenses * _growth_factor(market.annual_expense_inflation_rate, year)


def noi(operating: OperatingAssumptions, market: MarketAssumptions, year: int) -> Decimal:
    """Net Operating Income = EGI - operating expenses."""
    return effective_gross_income(operating, market, year) - operating_expenses(operating, market, year)


def undiscounted_noi(operating: OperatingAssumptions, market: MarketAssumptions, year: int) -> Decimal:
    """NOI before vacancy: grown rent - inflated expenses."""
    return gross_potential_rent(operating, market, year) - operating_expenses(operating, market, year)


def percent_of(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator * 100, or 0 when the denominator is 0."""
    if denominator == 0:
        return Decimal("0")
    return numerator / denominator * 100


def cap_rate(annual_noi: Decimal, purchase_price: Decimal) -> Decimal:
    """Cap rate (percent) = NOI / purchase price."""
    return percent_of(annual_noi, purchase_price)


def gross_yield(annual_rent: Decimal, purchase_price: Decimal) -> Decimal:
    """Gross yield (percent) = annual rent / purchase price."""
    return percent_of(annual_rent, purchase_price)


def cash_on_cash(annual_cash_flow: Decimal, cash_invested: Decimal) -> Decimal:
    """Cash-on-cash return (percent) = annual pre-tax cash flow / cash invested."""
    return percent_of(annual_cash_flow, cash_invested)


def property_value(purchase_price: Decimal, appreciation_rate: Decimal, years: int) -> Decimal:
    """Estimated property value after compounding appreciation for `years` years."""
    require_at_most("years", years, MAX_PROJECTION_YEAR)
    return purchase_price * (1 + appreciation_rate) ** years
