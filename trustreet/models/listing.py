from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Listing:
    """A property listing as stored. Expense fields are annual amounts."""
    id: str
    title: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zipcode: str = ""
    price: Decimal = Decimal("0")
    beds: int = 0
    baths: Decimal = Decimal("0")
    sqft: int = 0
    year_built: int = 0
    property_type: str = "SFR"

    # Financials (annual)
    estimated_rent: Decimal = Decimal("0")  # Monthly
    expense_tax: Decimal = Decimal("0")
    expense_insurance: Decimal = Decimal("0")
    expense_maintenance: Decimal = Decimal("0")
    expense_management: Decimal = Decimal("0")
    expense_hoa: Decimal = Decimal("0")
    expense_utilities: Decimal = Decimal("0")
    expense_gardener: Decimal = Decimal("0")
    expense_trash: Decimal = Decimal("0")
    closing_costs_percentage: Decimal = Decimal("0")  # 0-100; 0 means use city default

    # Valuation
    estimated_market_value: Decimal = Decimal("0")
    stabilized_market_value: Decimal = Decimal("0")
    estimated_rehab_cost: Decimal = Decimal("0")

    features: list[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Listing":
        """Build from a raw row/dict. Absent or null numeric fields become 0."""
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in record:
                continue
            value = record[f.name]
            if f.type in ("Decimal", Decimal):
                value = Decimal(str(value)) if value is not None else Decimal("0")
            elif f.type in ("int", int):
                value = int(value) if value is not None else 0
            elif f.type in ("str", str):
                value = str(value) if value is not None else ""
            elif value is None:
                continue
            kwargs[f.name] = value
        return cls(**kwargs)

    @property
    def annual_rent(self) -> Decimal:
        return self.estimated_rent * 12

    @property
    def annual_card_expenses(self) -> Decimal:
        """The four expense lines shown on listing cards."""
        return (
            self.expense_tax
            + self.expense_insurance
            + self.expense_maintenance
            + self.expense_management
        )
