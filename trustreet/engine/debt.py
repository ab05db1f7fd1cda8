"""Amortization computation.

Pure functions: Decimal in, dataclass out. No I/O. No intermediate rounding.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal

from trustreet.models.validation import (
    MAX_LOAN_TERM_YEARS,
    InvalidInputError,
    require_at_most,
    require_non_negative,
    require_positive,
)


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationSchedule:
    payments: list[AmortizationPayment]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal


@dataclass(frozen=True)
class YearlyDebtService:
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


def _validate(loan_amount: Decimal, annual_rate_percent: Decimal, term_years: int) -> None:
    require_non_negative("loan_amount", loan_amount)
    require_non_negative("annual_rate_percent", annual_rate_percent)
    require_positive("term_years", term_years)
    require_at_most("term_years", term_years, MAX_LOAN_TERM_YEARS)


def monthly_payment(loan_amount: Decimal, annual_rate_percent: Decimal, term_years: int) -> Decimal:
    """Fixed monthly principal + interest payment.

    A 0% loan is repaid straight-line: loan_amount / number of periods.
    """
    _validate(loan_amount, annual_rate_percent, term_years)
    if loan_amount == 0:
        return Decimal("0")

    n = term_years * 12
    if annual_rate_percent == 0:
        return loan_amount / n

    r = annual_rate_percent / 100 / 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return loan_amount * (r * factor) / (factor - 1)


@dataclass(frozen=True)
class AmortizationResult:
    """Per-period view of a fixed-rate loan. Periods are 1-indexed months."""
    loan_amount: Decimal
    monthly_rate: Decimal
    periods: int
    monthly_payment: Decimal

    def _check_period(self, k: int, lowest: int) -> None:
        if k < lowest or k > self.periods:
            raise InvalidInputError("period", f"must be between {lowest} and {self.periods}, got {k}")

    def remaining_balance(self, k: int) -> Decimal:
        """Balance after k payments. remaining_balance(0) is the original loan."""
        self._check_period(k, 0)
        balance = self.loan_amount
        for _ in range(k):
            balance -= self.monthly_payment - balance * self.monthly_rate
        return balance

    def interest_payment(self, k: int) -> Decimal:
        self._check_period(k, 1)
        return self.remaining_balance(k - 1) * self.monthly_rate

    def principal_payment(self, k: int) -> Decimal:
        return self.monthly_payment - self.interest_payment(k)

    def cumulative_principal_paid(self, through_period: int) -> Decimal:
        return self.loan_amount - self.remaining_balance(through_period)

    def cumulative_interest_paid(self, through_period: int) -> Decimal:
        self._check_period(through_period, 0)
        return self.monthly_payment * through_period - self.cumulative_principal_paid(through_period)

    def iter_payments(self, through_period: int | None = None) -> Iterator[AmortizationPayment]:
        """Walk the loan month by month, carrying the balance forward."""
        last = self.periods if through_period is None else through_period
        self._check_period(last, 0)
        balance = self.loan_amount
        for k in range(1, last + 1):
            interest = balance * self.monthly_rate
            principal = self.monthly_payment - interest
            balance -= principal
            yield AmortizationPayment(
                period=k,
                payment=self.monthly_payment,
                principal=principal,
                interest=interest,
                balance=balance,
            )


def amortize(loan_amount: Decimal, annual_rate_percent: Decimal, term_years: int) -> AmortizationResult:
    pmt = monthly_payment(loan_amount, annual_rate_percent, term_years)
    return AmortizationResult(
        loan_amount=loan_amount,
        monthly_rate=annual_rate_percent / 100 / 12,
        periods=term_years * 12,
        monthly_payment=pmt,
    )


def amortization_schedule(
    loan_amount: Decimal,
    annual_rate_percent: Decimal,
    term_years: int,
    hold_years: int | None = None,
) -> AmortizationSchedule:
    """Month-by-month payments over the whole term, or only the first `hold_years`.

    A hold longer than the term stops at the final payment.
    """
    result = amortize(loan_amount, annual_rate_percent, term_years)
    years = term_years
    if hold_years is not None:
        require_positive("hold_years", hold_years)
        years = min(hold_years, term_years)

    payments = list(result.iter_payments(years * 12))
    return AmortizationSchedule(
        payments=payments,
        monthly_payment=result.monthly_payment,
        total_interest=sum((p.interest for p in payments), Decimal("0")),
        total_principal=sum((p.principal for p in payments), Decimal("0")),
    )


def yearly_debt_summary(schedule: AmortizationSchedule) -> list[YearlyDebtService]:
    """Roll a schedule up into loan years of 12 payments each."""
    yearly: list[YearlyDebtService] = []
    for start in range(0, len(schedule.payments), 12):
        months = schedule.payments[start:start + 12]
        yearly.append(YearlyDebtService(
            year=start // 12 + 1,
            principal=sum((p.principal for p in months), Decimal("0")),
            interest=sum((p.interest for p in months), Decimal("0")),
            debt_service=sum((p.payment for p in months), Decimal("0")),
            ending_balance=months[-1].balance,
        ))
    return yearly
