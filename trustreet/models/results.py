from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProFormaYear:
    year: int
    gross_potential_rent: Decimal
    vacancy_loss: Decimal
    effective_gross_income: Decimal
    operating_expenses: Decimal
    net_operating_income: Decimal
    debt_service: Decimal
    cash_flow: Decimal


@dataclass(frozen=True)
class YearOneReturn:
    cash_investment: Decimal
    annual_cash_flow: Decimal
    annual_loan_paydown: Decimal
    annual_appreciation: Decimal  # Reported only; not part of total_annual_return
    tax_savings: Decimal
    built_in_equity: Decimal
    total_annual_return: Decimal
    total_annual_return_with_tax: Decimal
    return_on_cash_invested_percent: Decimal
    return_on_cash_invested_with_tax_percent: Decimal
    monthly_mortgage: Decimal

    # Intermediate figures, kept for display breakdowns
    down_payment_amount: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    closing_costs: Decimal = Decimal("0")
    annual_depreciation: Decimal = Decimal("0")


@dataclass(frozen=True)
class FiveYearReturn:
    years: int
    cumulative_cash_flow: Decimal
    cumulative_principal_paid: Decimal
    future_property_value: Decimal
    total_appreciation: Decimal
    built_in_equity: Decimal
    total_cumulative_return: Decimal
    cash_investment: Decimal
    return_on_cash_invested_percent: Decimal
    cumulative_tax_savings: Decimal
    total_return_with_tax: Decimal
    return_on_cash_invested_with_tax_percent: Decimal


@dataclass(frozen=True)
class ReturnMetrics:
    cap_rate_percent: Decimal
    gross_yield_percent: Decimal
    cash_on_cash_percent: Decimal  # Denominator: down payment only
    year_one_roi_percent: Decimal  # Denominator: down payment + closing costs
    five_year_total_return_percent: Decimal

    annual_noi: Decimal = Decimal("0")
    annual_cash_flow: Decimal = Decimal("0")
    monthly_cash_flow: Decimal = Decimal("0")
    monthly_mortgage: Decimal = Decimal("0")


@dataclass(frozen=True)
class FinancingSummary:
    purchase_price: Decimal
    down_payment_percent: Decimal
    down_payment_amount: Decimal
    loan_percent: Decimal
    loan_amount: Decimal
    interest_rate_percent: Decimal
    loan_term_years: int
    monthly_payment: Decimal


@dataclass(frozen=True)
class CashRequiredAtClose:
    down_payment: Decimal
    closing_costs_percent: Decimal
    closing_costs: Decimal
    estimated_rehab_cost: Decimal
    net_cash_required: Decimal


@dataclass(frozen=True)
class MonthlyCashflow:
    rent: Decimal
    mortgage: Decimal
    tax: Decimal
    insurance: Decimal
    maintenance: Decimal
    management: Decimal
    hoa: Decimal
    utilities: Decimal
    other: Decimal
    capex_reserve: Decimal
    total_expenses: Decimal  # Includes mortgage
    cash_flow: Decimal
    management_percent_of_rent: Decimal
