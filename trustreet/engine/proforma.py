"""Pro forma: year-1 return, multi-year projection and cumulative return.

Pure computation. No I/O. Assumption records in, result dataclasses out.
"""

from collections.abc import Iterable
from decimal import Decimal

from trustreet.models.assumptions import (
    FinancingAssumptions,
    MarketAssumptions,
    OperatingAssumptions,
    PropertyValuation,
    TaxPolicy,
)
from trustreet.models.results import FiveYearReturn, ProFormaYear, YearOneReturn
from trustreet.models.validation import MAX_PROJECTION_YEAR, require_at_most, require_positive

from trustreet.engine.debt import amortize, monthly_payment
from trustreet.engine.cashflow import (
    effective_gross_income,
    gross_potential_rent,
    operating_expenses,
    percent_of,
    property_value,
    undiscounted_noi,
    vacancy_loss,
)
from trustreet.engine.depreciation import (
    annual_depreciation,
    annual_tax_savings,
    cumulative_tax_savings,
)


def _monthly_mortgage(financing: FinancingAssumptions) -> Decimal:
    return monthly_payment(
        financing.loan_amount,
        financing.interest_rate_percent,
        financing.loan_term_years,
    )


def _annual_debt_service(financing: FinancingAssumptions, year: int) -> Decimal:
    """Twelve payments while the loan is outstanding, nothing once it is paid off."""
    if year > financing.loan_term_years:
        return Decimal("0")
    return _monthly_mortgage(financing) * 12


def closing_costs(financing: FinancingAssumptions, market: MarketAssumptions) -> Decimal:
    return financing.purchase_price * market.closing_costs_percent / 100


def cash_investment(financing: FinancingAssumptions, market: MarketAssumptions) -> Decimal:
    """Cash in at purchase = down payment + closing costs."""
    return financing.down_payment_amount + closing_costs(financing, market)


def compute_year_one(
    financing: FinancingAssumptions,
    operating: OperatingAssumptions,
    market: MarketAssumptions,
    valuation: PropertyValuation,
    policy: TaxPolicy,
) -> YearOneReturn:
    """Year-1 return on cash invested, with and without the depreciation tax shield.

    Appreciation is reported but left out of the totals: the year-1 figure is a
    day-1 equity view (cash flow + loan paydown + built-in equity).

    Loan paydown is approximated as a year of payments minus simple interest on
    the original balance, not a month-by-month sum.
    """
    price = financing.purchase_price
    loan = financing.loan_amount
    invested = cash_investment(financing, market)

    mortgage = _monthly_mortgage(financing)
    annual_debt_service = mortgage * 12

    annual_cash_flow = operating.annual_rent - operating.annual_expenses - annual_debt_service

    first_year_interest = loan * financing.interest_rate_percent / 100
    annual_loan_paydown = annual_debt_service - first_year_interest

    annual_appreciation = price * market.year_one_appreciation_rate

    tax_savings = annual_tax_savings(price, policy)
    built_in_equity = valuation.built_in_equity(price)

    total = annual_cash_flow + annual_loan_paydown + built_in_equity
    total_with_tax = total + tax_savings

    return YearOneReturn(
        cash_investment=invested,
        annual_cash_flow=annual_cash_flow,
        annual_loan_paydown=annual_loan_paydown,
        annual_appreciation=annual_appreciation,
        tax_savings=tax_savings,
        built_in_equity=built_in_equity,
        total_annual_return=total,
        total_annual_return_with_tax=total_with_tax,
        return_on_cash_invested_percent=percent_of(total, invested),
        return_on_cash_invested_with_tax_percent=percent_of(total_with_tax, invested),
        monthly_mortgage=mortgage,
        down_payment_amount=financing.down_payment_amount,
        loan_amount=loan,
        closing_costs=closing_costs(financing, market),
        annual_depreciation=annual_depreciation(price, policy),
    )


def compute_projection(
    financing: FinancingAssumptions,
    operating: OperatingAssumptions,
    market: MarketAssumptions,
    years: Iterable[int],
) -> list[ProFormaYear]:
    """Project income and expenses for each requested year (1-indexed, any order).

    Debt service is constant over the loan term (fixed rate, no refinance)
    and 0 in years after the final payment.
    """
    projections: list[ProFormaYear] = []
    for year in years:
        require_positive("year", year)
        require_at_most("year", year, MAX_PROJECTION_YEAR)
        debt_service = _annual_debt_service(financing, year)
        gpr = gross_potential_rent(operating, market, year)
        vacancy = vacancy_loss(operating, market, year)
        egi = effective_gross_income(operating, market, year)
        expenses = operating_expenses(operating, market, year)
        year_noi = egi - expenses

        projections.append(ProFormaYear(
            year=year,
            gross_potential_rent=gpr,
            vacancy_loss=vacancy,
            effective_gross_income=egi,
            operating_expenses=expenses,
            net_operating_income=year_noi,
            debt_service=debt_service,
            cash_flow=year_noi - debt_service,
        ))
    return projections


def cumulative_cash_flow(
    financing: FinancingAssumptions,
    operating: OperatingAssumptions,
    market: MarketAssumptions,
    years: int,
) -> Decimal:
    """Sum of (grown rent - inflated expenses - debt service) over years 1..years.

    No vacancy allowance, matching the cumulative return figures shown on listings.
    Years after the loan is paid off carry no debt service.
    """
    require_at_most("years", years, MAX_PROJECTION_YEAR)
    return sum(
        (
            undiscounted_noi(operating, market, y) - _annual_debt_service(financing, y)
            for y in range(1, years + 1)
        ),
        Decimal("0"),
    )


def cumulative_principal_paid(financing: FinancingAssumptions, years: int) -> Decimal:
    """Principal repaid over the first `years` years, month by month."""
    amort = amortize(
        financing.loan_amount,
        financing.interest_rate_percent,
        financing.loan_term_years,
    )
    return amort.cumulative_principal_paid(min(years * 12, amort.periods))


def compute_five_year_return(
    financing: FinancingAssumptions,
    operating: OperatingAssumptions,
    market: MarketAssumptions,
    valuation: PropertyValuation,
    policy: TaxPolicy,
    years: int = 5,
) -> FiveYearReturn:
    """Cumulative return over a hold period (5 years by default)."""
    require_positive("years", years)
    require_at_most("years", years, MAX_PROJECTION_YEAR)
    price = financing.purchase_price

    cash_flow = cumulative_cash_flow(financing, operating, market, years)
    principal = cumulative_principal_paid(financing, years)

    future_value = property_value(price, market.annual_appreciation_rate, years)
    total_appreciation = future_value - price
    built_in_equity = valuation.built_in_equity(price)

    total = cash_flow + principal + total_appreciation + built_in_equity
    invested = cash_investment(financing, market)

    tax_savings = cumulative_tax_savings(price, policy, years)
    total_with_tax = total + tax_savings

    return FiveYearReturn(
        years=years,
        cumulative_cash_flow=cash_flow,
        cumulative_principal_paid=principal,
        future_property_value=future_value,
        total_appreciation=total_appreciation,
        built_in_equity=built_in_equity,
        total_cumulative_return=total,
        cash_investment=invested,
        return_on_cash_invested_percent=percent_of(total, invested),
        cumulative_tax_savings=tax_savings,
        total_return_with_tax=total_with_tax,
        return_on_cash_invested_with_tax_percent=percent_of(total_with_tax, invested),
    )
