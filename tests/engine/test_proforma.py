from decimal import Decimal

import pytest

from trustreet.engine.proforma import (
    cash_investment,
    closing_costs,
    compute_five_year_return,
    compute_projection,
    compute_year_one,
    cumulative_cash_flow,
    cumulative_principal_paid,
)
from trustreet.engine.cashflow import undiscounted_noi
from trustreet.engine.debt import amortize
from trustreet.models.assumptions import FinancingAssumptions, MarketAssumptions, PropertyValuation
from trustreet.models.validation import InvalidInputError


class TestCashInvestment:
    def test_closing_costs(self, canonical_financing, canonical_market):
        assert closing_costs(canonical_financing, canonical_market) == Decimal("9000")

    def test_cash_investment(self, canonical_financing, canonical_market):
        assert cash_investment(canonical_financing, canonical_market) == Decimal("69000")


class TestYearOne:
    @pytest.fixture
    def year_one(self, canonical_financing, canonical_operating, canonical_market, canonical_valuation, policy):
        return compute_year_one(
            canonical_financing, canonical_operating, canonical_market, canonical_valuation, policy,
        )

    def test_cash_investment(self, year_one):
        assert year_one.cash_investment == Decimal("69000")

    def test_monthly_mortgage(self, year_one):
        assert abs(year_one.monthly_mortgage - Decimal("1516.96")) < Decimal("0.01")

    def test_cash_flow(self, year_one):
        # 30000 - 9000 - 12 * 1516.96
        assert abs(year_one.annual_cash_flow - Decimal("2796.44")) < Decimal("0.1")

    def test_loan_paydown(self, year_one):
        # 12 * 1516.96 - 240000 * 6.5%
        assert abs(year_one.annual_loan_paydown - Decimal("2603.56")) < Decimal("0.1")

    def test_built_in_equity(self, year_one):
        # 330000 - 300000 - 10000
        assert year_one.built_in_equity == Decimal("20000")

    def test_appreciation_reported(self, year_one):
        assert year_one.annual_appreciation == Decimal("15000")

    def test_total_excludes_appreciation(self, year_one):
        # Debt service cancels out: rent - expenses - interest + built-in equity
        assert abs(year_one.total_annual_return - Decimal("25400")) < Decimal("0.000001")

    def test_tax_savings(self, year_one):
        assert abs(year_one.tax_savings - Decimal("2181.82")) < Decimal("0.01")
        assert year_one.total_annual_return_with_tax == year_one.total_annual_return + year_one.tax_savings

    def test_roi(self, year_one):
        assert abs(year_one.return_on_cash_invested_percent - Decimal("36.81")) < Decimal("0.01")
        assert abs(year_one.return_on_cash_invested_with_tax_percent - Decimal("39.97")) < Decimal("0.01")

    def test_no_stabilized_value_means_no_equity(
        self, canonical_financing, canonical_operating, canonical_market, policy,
    ):
        result = compute_year_one(
            canonical_financing, canonical_operating, canonical_market, PropertyValuation(), policy,
        )
        assert result.built_in_equity == Decimal("0")

    def test_all_cash_purchase(self, canonical_operating, policy):
        financing = FinancingAssumptions(
            purchase_price=Decimal("300000"),
            down_payment_percent=Decimal("100"),
        )
        result = compute_year_one(
            financing, canonical_operating, MarketAssumptions(), PropertyValuation(), policy,
        )
        assert result.monthly_mortgage == Decimal("0")
        assert result.annual_loan_paydown == Decimal("0")
        assert result.annual_cash_flow == Decimal("21000")

    def test_zero_cash_investment_guarded(self, canonical_operating, policy):
        financing = FinancingAssumptions(
            purchase_price=Decimal("300000"),
            down_payment_percent=Decimal("0"),
        )
        result = compute_year_one(
            financing, canonical_operating, MarketAssumptions(), PropertyValuation(), policy,
        )
        assert result.cash_investment == Decimal("0")
        assert result.return_on_cash_invested_percent == Decimal("0")
        assert result.return_on_cash_invested_with_tax_percent == Decimal("0")

    def test_idempotent(self, canonical_financing, canonical_operating, canonical_market, canonical_valuation, policy):
        a = compute_year_one(canonical_financing, canonical_operating, canonical_market, canonical_valuation, policy)
        b = compute_year_one(canonical_financing, canonical_operating, canonical_market, canonical_valuation, policy)
        assert a == b


class TestProjection:
    def test_requested_years_in_order(self, canonical_financing, canonical_operating, canonical_market):
        rows = compute_projection(canonical_financing, canonical_operating, canonical_market, [1, 2, 3, 5])
        assert [r.year for r in rows] == [1, 2, 3, 5]

    def test_year_one_row(self, canonical_financing, canonical_operating, canonical_market):
        row = compute_projection(canonical_financing, canonical_operating, canonical_market, [1])[0]
        assert row.gross_potential_rent == Decimal("30000")
        assert row.vacancy_loss == Decimal("1500")
        assert row.effective_gross_income == Decimal("28500")
        assert row.operating_expenses == Decimal("9000")
        assert row.net_operating_income == Decimal("19500")
        assert abs(row.cash_flow - Decimal("1296.44")) < Decimal("0.1")

    def test_year_five_row(self, canonical_financing, canonical_operating, canonical_market):
        row = compute_projection(canonical_financing, canonical_operating, canonical_market, [5])[0]
        # 30000 * 1.03^4 = 33765.2643, 9000 * 1.02^4 = 9741.88944
        assert row.gross_potential_rent == Decimal("33765.2643")
        assert row.net_operating_income == Decimal("22335.111645")

    def test_rows_are_consistent(self, canonical_financing, canonical_operating, canonical_market):
        rows = compute_projection(canonical_financing, canonical_operating, canonical_market, range(1, 11))
        for row in rows:
            assert row.effective_gross_income == row.gross_potential_rent - row.vacancy_loss
            assert row.net_operating_income == row.effective_gross_income - row.operating_expenses
            assert row.cash_flow == row.net_operating_income - row.debt_service

    def test_debt_service_constant(self, canonical_financing, canonical_operating, canonical_market):
        rows = compute_projection(canonical_financing, canonical_operating, canonical_market, [1, 2, 3, 5])
        assert len({r.debt_service for r in rows}) == 1

    def test_noi_increases(self, canonical_financing, canonical_operating, canonical_market):
        rows = compute_projection(canonical_financing, canonical_operating, canonical_market, [1, 2, 3, 5])
        nois = [r.net_operating_income for r in rows]
        assert all(a < b for a, b in zip(nois, nois[1:]))

    def test_empty_years(self, canonical_financing, canonical_operating, canonical_market):
        assert compute_projection(canonical_financing, canonical_operating, canonical_market, []) == []

    def test_year_zero_rejected(self, canonical_financing, canonical_operating, canonical_market):
        with pytest.raises(InvalidInputError):
            compute_projection(canonical_financing, canonical_operating, canonical_market, [0, 1])

    def test_no_debt_service_after_payoff(self, canonical_operating, canonical_market):
        financing = FinancingAssumptions(purchase_price=Decimal("300000"), loan_term_years=3)
        last_payment, paid_off = compute_projection(financing, canonical_operating, canonical_market, [3, 4])
        assert last_payment.debt_service > 0
        assert paid_off.debt_service == Decimal("0")
        assert paid_off.cash_flow == paid_off.net_operating_income

    def test_year_past_limit_rejected(self, canonical_financing, canonical_operating, canonical_market):
        with pytest.raises(InvalidInputError) as exc:
            compute_projection(canonical_financing, canonical_operating, canonical_market, [100_000_000])
        assert exc.value.field == "year"

    def test_hundred_years_accepted(self, canonical_financing, canonical_operating, canonical_market):
        row = compute_projection(canonical_financing, canonical_operating, canonical_market, [100])[0]
        assert row.debt_service == Decimal("0")


class TestFiveYearReturn:
    @pytest.fixture
    def five_year(self, canonical_financing, canonical_operating, canonical_market, canonical_valuation, policy):
        return compute_five_year_return(
            canonical_financing, canonical_operating, canonical_market, canonical_valuation, policy,
        )

    def test_cumulative_cash_flow(self, five_year):
        # Rent 159274.07 - expenses 46836.36 - debt service 5 * 18203.56
        assert abs(five_year.cumulative_cash_flow - Decimal("21419.91")) < Decimal("1")

    def test_principal_matches_amortization(self, canonical_financing, five_year):
        amort = amortize(Decimal("240000"), Decimal("6.5"), 30)
        assert five_year.cumulative_principal_paid == amort.cumulative_principal_paid(60)

    def test_appreciation(self, five_year):
        assert abs(five_year.total_appreciation - Decimal("47782.22")) < Decimal("0.01")
        assert five_year.future_property_value == Decimal("300000") + five_year.total_appreciation

    def test_total_includes_every_component(self, five_year):
        assert five_year.total_cumulative_return == (
            five_year.cumulative_cash_flow
            + five_year.cumulative_principal_paid
            + five_year.total_appreciation
            + five_year.built_in_equity
        )

    def test_roi(self, five_year):
        assert abs(five_year.return_on_cash_invested_percent - Decimal("151.5")) < Decimal("0.1")

    def test_tax_savings(self, five_year):
        assert abs(five_year.cumulative_tax_savings - Decimal("10909.09")) < Decimal("0.01")
        assert five_year.total_return_with_tax > five_year.total_cumulative_return

    def test_hold_longer_than_term(self, canonical_operating, canonical_market, policy):
        financing = FinancingAssumptions(purchase_price=Decimal("300000"), loan_term_years=5)
        result = compute_five_year_return(
            financing, canonical_operating, canonical_market, PropertyValuation(), policy, years=10,
        )
        assert abs(result.cumulative_principal_paid - Decimal("240000")) < Decimal("0.01")
        # Debt service stops with the last payment, like principal does
        ten_years_noi = cumulative_cash_flow(
            FinancingAssumptions(purchase_price=Decimal("300000"), down_payment_percent=Decimal("100")),
            canonical_operating, canonical_market, 10,
        )
        five_years_payments = amortize(Decimal("240000"), Decimal("6.5"), 5).monthly_payment * 60
        assert abs(result.cumulative_cash_flow - (ten_years_noi - five_years_payments)) < Decimal("0.000001")

    def test_years_must_be_positive(self, canonical_financing, canonical_operating, canonical_market, policy):
        with pytest.raises(InvalidInputError):
            compute_five_year_return(
                canonical_financing, canonical_operating, canonical_market, PropertyValuation(), policy, years=0,
            )

    def test_years_past_limit_rejected(self, canonical_financing, canonical_operating, canonical_market, policy):
        with pytest.raises(InvalidInputError) as exc:
            compute_five_year_return(
                canonical_financing, canonical_operating, canonical_market, PropertyValuation(), policy,
                years=100_000_000,
            )
        assert exc.value.field == "years"

    def test_short_loan_over_longer_hold(self, canonical_operating, canonical_market, policy):
        financing = FinancingAssumptions(purchase_price=Decimal("300000"), loan_term_years=3)
        result = compute_five_year_return(
            financing, canonical_operating, canonical_market, PropertyValuation(), policy,
        )
        annual_payments = amortize(Decimal("240000"), Decimal("6.5"), 3).monthly_payment * 12
        noi_total = sum(
            (undiscounted_noi(canonical_operating, canonical_market, y) for y in range(1, 6)),
            Decimal("0"),
        )
        assert abs(result.cumulative_cash_flow - (noi_total - 3 * annual_payments)) < Decimal("0.000001")
        assert abs(result.cumulative_principal_paid - Decimal("240000")) < Decimal("0.01")


class TestCumulativeHelpers:
    def test_one_year_cash_flow(self, canonical_financing, canonical_operating, canonical_market):
        cf = cumulative_cash_flow(canonical_financing, canonical_operating, canonical_market, 1)
        assert abs(cf - Decimal("2796.44")) < Decimal("0.1")

    def test_principal_without_loan(self):
        financing = FinancingAssumptions(purchase_price=Decimal("300000"), down_payment_percent=Decimal("100"))
        assert cumulative_principal_paid(financing, 5) == Decimal("0")
