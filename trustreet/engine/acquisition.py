"""Acquisition figures: financing summary, cash to close, monthly cash flow.

Pure functions. No I/O.
"""

from trustreet.models.assumptions import (
    FinancingAssumptions,
    MarketAssumptions,
    OperatingAssumptions,
    PropertyValuation,
)
from trustreet.models.results import CashRequiredAtClose, FinancingSummary, MonthlyCashflow

from trustreet.engine.debt import monthly_payment
from trustreet.engine.cashflow import percent_of
from trustreet.engine.proforma import closing_costs


def financing_summary(financing: FinancingAssumptions) -> FinancingSummary:
    return FinancingSummary(
        purchase_price=financing.purchase_price,
        down_payment_percent=financing.down_payment_percent,
        down_payment_amount=financing.down_payment_amount,
        loan_percent=financing.loan_percent,
        loan_amount=financing.loan_amount,
        interest_rate_percent=financing.interest_rate_percent,
        loan_term_years=financing.loan_term_years,
        monthly_payment=monthly_payment(
            financing.loan_amount,
            financing.interest_rate_percent,
            financing.loan_term_years,
        ),
    )


def cash_required_at_close(
    financing: FinancingAssumptions,
    market: MarketAssumptions,
    valuation: PropertyValuation,
) -> CashRequiredAtClose:
    """Down payment + closing costs + planned rehab."""
    closing = closing_costs(financing, market)
    return CashRequiredAtClose(
        down_payment=financing.down_payment_amount,
        closing_costs_percent=market.closing_costs_percent,
        closing_costs=closing,
        estimated_rehab_cost=valuation.estimated_rehab_cost,
        net_cash_required=financing.down_payment_amount + closing + valuation.estimated_rehab_cost,
    )


def monthly_cashflow(financing: FinancingAssumptions, operating: OperatingAssumptions) -> MonthlyCashflow:
    """Itemised monthly budget. Total expenses include the mortgage payment."""
    mortgage = monthly_payment(
        financing.loan_amount,
        financing.interest_rate_percent,
        financing.loan_term_years,
    )
    total = mortgage + operating.monthly_expenses
    return MonthlyCashflow(
        rent=operating.monthly_rent,
        mortgage=mortgage,
        tax=operating.monthly_tax,
        insurance=operating.monthly_insurance,
        maintenance=operating.monthly_maintenance,
        management=operating.monthly_management,
        hoa=operating.monthly_hoa,
        utilities=operating.monthly_utilities,
        other=operating.monthly_other,
        capex_reserve=operating.monthly_capex_reserve,
        total_expenses=total,
        cash_flow=operating.monthly_rent - total,
        management_percent_of_rent=percent_of(operating.monthly_management, operating.monthly_rent),
    )
