"""Pydantic schemas for API request/response models.

Responses carry unrounded numbers; currency and percent formatting is done by
the front end.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ---- Request schemas ----

class FinancingInput(BaseModel):
    purchase_price: Decimal
    down_payment_percent: Decimal = Decimal("20")
    interest_rate_percent: Decimal = Decimal("6.5")
    loan_term_years: int = 30


class OperatingInput(BaseModel):
    monthly_rent: Decimal = Decimal("0")
    monthly_tax: Decimal = Decimal("0")
    monthly_insurance: Decimal = Decimal("0")
    monthly_maintenance: Decimal = Decimal("0")
    monthly_management: Decimal = Decimal("0")
    monthly_hoa: Decimal = Decimal("0")
    monthly_utilities: Decimal = Decimal("0")
    monthly_other: Decimal = Decimal("0")
    monthly_capex_reserve: Decimal = Decimal("0")


class MarketInput(BaseModel):
    closing_costs_percent: Decimal = Decimal("0")
    annual_appreciation_rate: Decimal = Decimal("0.03")
    year_one_appreciation_rate: Decimal = Decimal("0.05")
    annual_rent_growth_rate: Decimal = Decimal("0.03")
    annual_expense_inflation_rate: Decimal = Decimal("0.02")
    vacancy_rate: Decimal = Decimal("0.05")


class ValuationInput(BaseModel):
    estimated_market_value: Decimal = Decimal("0")
    stabilized_market_value: Decimal = Decimal("0")
    estimated_rehab_cost: Decimal = Decimal("0")


class AnalyzeRequest(BaseModel):
    """Run the calculator on explicit assumptions (no listing lookup)."""
    financing: FinancingInput
    operating: OperatingInput = Field(default_factory=OperatingInput)
    market: MarketInput = Field(default_factory=MarketInput)
    valuation: ValuationInput = Field(default_factory=ValuationInput)
    projection_years: list[int] | None = Field(None, description="Defaults to the configured years")


class ListingOverrides(BaseModel):
    """Calculator adjustments applied on top of a stored listing."""
    purchase_price: Decimal | None = None
    down_payment_percent: Decimal | None = None
    interest_rate_percent: Decimal | None = None
    loan_term_years: int | None = None
    monthly_rent: Decimal | None = None
    monthly_tax: Decimal | None = None
    monthly_insurance: Decimal | None = None
    monthly_maintenance: Decimal | None = None
    monthly_management: Decimal | None = None
    monthly_hoa: Decimal | None = None
    monthly_utilities: Decimal | None = None
    monthly_other: Decimal | None = None
    monthly_capex_reserve: Decimal | None = None
    closing_costs_percent: Decimal | None = None
    annual_appreciation_rate: Decimal | None = None
    annual_rent_growth_rate: Decimal | None = None
    annual_expense_inflation_rate: Decimal | None = None
    vacancy_rate: Decimal | None = None


# ---- Response schemas ----

class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ReturnMetricsResponse(_FromEngine):
    cap_rate_percent: Decimal
    gross_yield_percent: Decimal
    cash_on_cash_percent: Decimal
    year_one_roi_percent: Decimal
    five_year_total_return_percent: Decimal
    annual_noi: Decimal
    annual_cash_flow: Decimal
    monthly_cash_flow: Decimal
    monthly_mortgage: Decimal


class YearOneResponse(_FromEngine):
    cash_investment: Decimal
    annual_cash_flow: Decimal
    annual_loan_paydown: Decimal
    annual_appreciation: Decimal
    tax_savings: Decimal
    built_in_equity: Decimal
    total_annual_return: Decimal
    total_annual_return_with_tax: Decimal
    return_on_cash_invested_percent: Decimal
    return_on_cash_invested_with_tax_percent: Decimal
    monthly_mortgage: Decimal
    down_payment_amount: Decimal
    loan_amount: Decimal
    closing_costs: Decimal
    annual_depreciation: Decimal


class ProFormaYearResponse(_FromEngine):
    year: int
    gross_potential_rent: Decimal
    vacancy_loss: Decimal
    effective_gross_income: Decimal
    operating_expenses: Decimal
    net_operating_income: Decimal
    debt_service: Decimal
    cash_flow: Decimal


class FiveYearResponse(_FromEngine):
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


class FinancingSummaryResponse(_FromEngine):
    purchase_price: Decimal
    down_payment_percent: Decimal
    down_payment_amount: Decimal
    loan_percent: Decimal
    loan_amount: Decimal
    interest_rate_percent: Decimal
    loan_term_years: int
    monthly_payment: Decimal


class CashRequiredResponse(_FromEngine):
    down_payment: Decimal
    closing_costs_percent: Decimal
    closing_costs: Decimal
    estimated_rehab_cost: Decimal
    net_cash_required: Decimal


class MonthlyCashflowResponse(_FromEngine):
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
    total_expenses: Decimal
    cash_flow: Decimal
    management_percent_of_rent: Decimal


class YearlyDebtResponse(_FromEngine):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class AnalysisResponse(BaseModel):
    listing_id: str | None = None
    metrics: ReturnMetricsResponse
    year_one: YearOneResponse
    projections: list[ProFormaYearResponse]
    five_year: FiveYearResponse
    debt_schedule: list[YearlyDebtResponse]
    financing: FinancingSummaryResponse
    cash_required: CashRequiredResponse
    monthly_cashflow: MonthlyCashflowResponse


class CityDefaultsResponse(_FromEngine):
    city_name: str
    state_code: str
    zip_code: str
    property_tax_rate: Decimal
    insurance_rate: Decimal
    avg_appreciation_rate: Decimal
    avg_rent_growth_rate: Decimal
    vacancy_rate: Decimal
    property_management_rate: Decimal
    maintenance_rate: Decimal
    capex_reserve_rate: Decimal
    avg_market_cap_rate: Decimal
    median_home_price: Decimal
    median_rent: Decimal
    closing_costs_percentage: Decimal
    data_source: str