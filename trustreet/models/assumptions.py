from dataclasses import dataclass, fields
from decimal import Decimal

from trustreet.models.validation import (
    MAX_LOAN_TERM_YEARS,
    require_at_most,
    require_fraction,
    require_growth_rate,
    require_non_negative,
    require_percent,
    require_positive,
)


@dataclass(frozen=True)
class FinancingAssumptions:
    purchase_price: Decimal
    down_payment_percent: Decimal = Decimal("20")  # 0-100
    interest_rate_percent: Decimal = Decimal("6.5")  # Annual, e.g. 6.5 for 6.5%
    loan_term_years: int = 30

    def __post_init__(self):
        require_non_negative("purchase_price", self.purchase_price)
        require_percent("down_payment_percent", self.down_payment_percent)
        require_non_negative("interest_rate_percent", self.interest_rate_percent)
        require_positive("loan_term_years", self.loan_term_years)
        require_at_most("loan_term_years", self.loan_term_years, MAX_LOAN_TERM_YEARS)

    @property
    def down_payment_amount(self) -> Decimal:
        return self.purchase_price * self.down_payment_percent / 100

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.down_payment_amount

    @property
    def loan_percent(self) -> Decimal:
        return 100 - self.down_payment_percent


@dataclass(frozen=True)
class OperatingAssumptions:
    """Monthly rent and monthly operating expenses. Debt service is not an expense here."""
    monthly_rent: Decimal = Decimal("0")
    monthly_tax: Decimal = Decimal("0")
    monthly_insurance: Decimal = Decimal("0")
    monthly_maintenance: Decimal = Decimal("0")
    monthly_management: Decimal = Decimal("0")
    monthly_hoa: Decimal = Decimal("0")
    monthly_utilities: Decimal = Decimal("0")
    monthly_other: Decimal = Decimal("0")  # Gardener, trash, misc.
    monthly_capex_reserve: Decimal = Decimal("0")

    def __post_init__(self):
        for f in fields(self):
            require_non_negative(f.name, getattr(self, f.name))

    @property
    def monthly_expenses(self) -> Decimal:
        return (
            self.monthly_tax
            + self.monthly_insurance
            + self.monthly_maintenance
            + self.monthly_management
            + self.monthly_hoa
            + self.monthly_utilities
            + self.monthly_other
            + self.monthly_capex_reserve
        )

    @property
    def annual_rent(self) -> Decimal:
        return self.monthly_rent * 12

    @property
    def annual_expenses(self) -> Decimal:
        return self.monthly_expenses * 12


@dataclass(frozen=True)
class MarketAssumptions:
    closing_costs_percent: Decimal = Decimal("0")  # 0-100, of purchase price
    annual_appreciation_rate: Decimal = Decimal("0.03")
    year_one_appreciation_rate: Decimal = Decimal("0.05")  # Informational year-1 figure only
    annual_rent_growth_rate: Decimal = Decimal("0.03")
    annual_expense_inflation_rate: Decimal = Decimal("0.02")
    vacancy_rate: Decimal = Decimal("0.05")

    def __post_init__(self):
        require_percent("closing_costs_percent", self.closing_costs_percent)
        require_growth_rate("annual_appreciation_rate", self.annual_appreciation_rate)
        require_growth_rate("year_one_appreciation_rate", self.year_one_appreciation_rate)
        require_growth_rate("annual_rent_growth_rate", self.annual_rent_growth_rate)
        require_growth_rate("annual_expense_inflation_rate", self.annual_expense_inflation_rate)
        require_fraction("vacancy_rate", self.vacancy_rate)


@dataclass(frozen=True)
class TaxPolicy:
    """Policy constants. Fixed within one calculation, overridable per deployment."""
    depreciation_period_years: Decimal = Decimal("27.5")
    structure_value_fraction: Decimal = Decimal("0.80")  # Land is not depreciable
    marginal_tax_rate: Decimal = Decimal("0.25")

    def __post_init__(self):
        require_positive("depreciation_period_years", self.depreciation_period_years)
        require_fraction("structure_value_fraction", self.structure_value_fraction)
        require_fraction("marginal_tax_rate", self.marginal_tax_rate)


@dataclass(frozen=True)
class PropertyValuation:
    estimated_market_value: Decimal = Decimal("0")
    stabilized_market_value: Decimal = Decimal("0")
    estimated_rehab_cost: Decimal = Decimal("0")

    def __post_init__(self):
        for f in fields(self):
            require_non_negative(f.name, getattr(self, f.name))

    def built_in_equity(self, purchase_price: Decimal) -> Decimal:
        """Stabilized value - purchase price - rehab. Zero when no valuation is on file."""
        if self.stabilized_market_value == 0:
            return Decimal("0")
        return self.stabilized_market_value - purchase_price - self.estimated_rehab_cost


@dataclass(frozen=True)
class DealInputs:
    """Everything one calculation pass needs, as built from a listing."""
    financing: FinancingAssumptions
    operating: OperatingAssumptions
    market: MarketAssumptions
    valuation: PropertyValuation
