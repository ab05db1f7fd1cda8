from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CityDefaults:
    """Locality-level market assumptions. Rates are fractions (0.05 = 5%)."""
    city_name: str
    state_code: str
    zip_code: str = ""
    property_tax_rate: Decimal = Decimal("0")
    insurance_rate: Decimal = Decimal("0")
    avg_appreciation_rate: Decimal = Decimal("0")
    avg_rent_growth_rate: Decimal = Decimal("0")
    vacancy_rate: Decimal = Decimal("0")
    property_management_rate: Decimal = Decimal("0")
    maintenance_rate: Decimal = Decimal("0")
    capex_reserve_rate: Decimal = Decimal("0")
    avg_market_cap_rate: Decimal = Decimal("0")
    median_home_price: Decimal = Decimal("0")
    median_rent: Decimal = Decimal("0")
    closing_costs_percentage: Decimal = Decimal("0")
    data_source: str = ""

    @property
    def closing_costs_percent(self) -> Decimal:
        """Closing costs on the 0-100 scale used by MarketAssumptions."""
        return self.closing_costs_percentage * 100


@dataclass(frozen=True)
class UserOverrides:
    """Every calculator input the user can adjust on a listing page."""
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
