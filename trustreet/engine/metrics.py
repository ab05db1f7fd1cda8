"""Display metrics: the headline ratios shown on listing pages and cards.

Pure functions. Percentages are returned unrounded; formatting is the
caller's job.
"""

from decimal import Decimal

from trustreet.config import Settings, settings as default_settings, tax_policy
from trustreet.models.assumptions import (
    FinancingAssumptions,
    MarketAssumptions,
    OperatingAssumptions,
    PropertyValuation,
    TaxPolicy,
)
from trustreet.models.listing import Listing
from trustreet.models.results import ReturnMetrics

from trustreet.engine.debt import monthly_payment
from trustreet.engine.cashflow import cap_rate, cash_on_cash, gross_yield, percent_of, property_value
from trustreet.engine.proforma import (
    compute_year_one,
    cumulative_cash_flow,
    cumulative_principal_paid,
)
from trustreet.engine.assumptions_builder import valuation_from_listing

TOTAL_RETURN_YEARS = 5


def five_year_total_return(
    financing: FinancingAssumptions,
    operating: OperatingAssumptions,
    market: MarketAssumptions,
) -> Decimal:
    """(Appreciation + cumulative cash flow + principal paid) over 5 years / down payment, in percent.

    Unlike the cumulative ROI, this excludes closing costs from the denominator
    and leaves out built-in equity and tax savings.
    """
    price = financing.purchase_price
    appreciation = property_value(price, market.annual_appreciation_rate, TOTAL_RETURN_YEARS) - price
    cash_flow = cumulative_cash_flow(financing, operating, market, TOTAL_RETURN_YEARS)
    equity_buildup = cumulative_principal_paid(financing, TOTAL_RETURN_YEARS)
    return percent_of(appreciation + cash_flow + equity_buildup, financing.down_payment_amount)


def compute_display_metrics(
    listing: Listing,
    financing: FinancingAssumptions,
    operating: OperatingAssumptions,
    market: MarketAssumptions | None = None,
    valuation: PropertyValuation | None = None,
    policy: TaxPolicy | None = None,
) -> ReturnMetrics:
    """Headline metrics for a listing under the current calculator inputs.

    Cash-on-cash divides by the down payment alone, while year-1 ROI divides by
    down payment + closing costs. Both are kept as separate named metrics.
    """
    market = market or MarketAssumptions(closing_costs_percent=listing.closing_costs_percentage)
    valuation = valuation or valuation_from_listing(listing)
    policy = policy or tax_policy()

    price = financing.purchase_price
    mortgage = monthly_payment(
        financing.loan_amount,
        financing.interest_rate_percent,
        financing.loan_term_years,
    )

    annual_noi = operating.annual_rent - operating.annual_expenses
    annual_cash_flow = annual_noi - mortgage * 12

    year_one = compute_year_one(financing, operating, market, valuation, policy)

    return ReturnMetrics(
        cap_rate_percent=cap_rate(annual_noi, price),
        gross_yield_percent=gross_yield(operating.annual_rent, price),
        cash_on_cash_percent=cash_on_cash(annual_cash_flow, financing.down_payment_amount),
        year_one_roi_percent=year_one.return_on_cash_invested_with_tax_percent,
        five_year_total_return_percent=five_year_total_return(financing, operating, market),
        annual_noi=annual_noi,
        annual_cash_flow=annual_cash_flow,
        monthly_cash_flow=annual_cash_flow / 12,
        monthly_mortgage=mortgage,
    )


def compute_card_metrics(listing: Listing, s: Settings | None = None) -> ReturnMetrics:
    """Metrics for a listing card: default financing, card expense lines only."""
    s = s or default_settings
    financing = FinancingAssumptions(
        purchase_price=listing.price,
        down_payment_percent=s.default_down_payment_percent,
        interest_rate_percent=s.default_interest_rate_percent,
        loan_term_years=s.default_loan_term_years,
    )
    operating = OperatingAssumptions(
        monthly_rent=listing.estimated_rent,
        monthly_other=listing.annual_card_expenses / 12,
    )
    market = MarketAssumptions(
        closing_costs_percent=listing.closing_costs_percentage,
        annual_appreciation_rate=s.default_appreciation_rate,
        year_one_appreciation_rate=s.default_year_one_appreciation_rate,
        annual_rent_growth_rate=s.default_rent_growth_rate,
        annual_expense_inflation_rate=s.default_expense_inflation_rate,
        vacancy_rate=s.default_vacancy_rate,
    )

    return compute_display_metrics(listing, financing, operating, market, policy=tax_policy(s))
