"""Straight-line depreciation of the structure and the resulting tax shield.

Pure functions. The policy constants come in through TaxPolicy.
"""

from decimal import Decimal

from trustreet.models.assumptions import TaxPolicy


def structure_value(purchase_price: Decimal, policy: TaxPolicy) -> Decimal:
    """Depreciable part of the price (land excluded)."""
    return purchase_price * policy.structure_value_fraction


def annual_depreciation(purchase_price: Decimal, policy: TaxPolicy) -> Decimal:
    return structure_value(purchase_price, policy) / policy.depreciation_period_years


def annual_tax_savings(purchase_price: Decimal, policy: TaxPolicy) -> Decimal:
    """Tax saved by deducting one year of depreciation at the marginal rate."""
    return annual_depreciation(purchase_price, policy) * policy.marginal_tax_rate


def cumulative_tax_savings(purchase_price: Decimal, policy: TaxPolicy, years: int) -> Decimal:
    return annual_tax_savings(purchase_price, policy) * years
