"""Analysis routes: run the return calculator for ad-hoc inputs or a stored listing."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from trustreet.api.deps import get_city_defaults_provider, get_listing_repository, get_settings
from trustreet.api.schemas import (
    AnalysisResponse,
    AnalyzeRequest,
    CashRequiredResponse,
    FinancingSummaryResponse,
    FiveYearResponse,
    ListingOverrides,
    MonthlyCashflowResponse,
    ProFormaYearResponse,
    ReturnMetricsResponse,
    YearlyDebtResponse,
    YearOneResponse,
)
from trustreet.config import Settings, tax_policy
from trustreet.data.city_defaults import CityDefaultsProvider
from trustreet.data.listings import ListingRepository
from trustreet.engine.acquisition import cash_required_at_close, financing_summary, monthly_cashflow
from trustreet.engine.assumptions_builder import build_assumptions
from trustreet.engine.debt import amortization_schedule, yearly_debt_summary
from trustreet.engine.metrics import compute_card_metrics, compute_display_metrics
from trustreet.engine.proforma import compute_five_year_return, compute_projection, compute_year_one
from trustreet.models.assumptions import (
    DealInputs,
    FinancingAssumptions,
    MarketAssumptions,
    OperatingAssumptions,
    PropertyValuation,
)
from trustreet.models.city_defaults import UserOverrides
from trustreet.models.listing import Listing
from trustreet.models.validation import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


def _invalid_input(e: InvalidInputError) -> HTTPException:
    logger.info("Rejected calculator input: %s", e)
    return HTTPException(status_code=422, detail={"field": e.field, "detail": str(e)})


def _run_analysis(
    listing: Listing,
    inputs: DealInputs,
    years: list[int],
    s: Settings,
) -> AnalysisResponse:
    """Run every calculation for one set of inputs and bundle the results."""
    policy = tax_policy(s)
    f, o, m, v = inputs.financing, inputs.operating, inputs.market, inputs.valuation

    metrics = compute_display_metrics(listing, f, o, m, v, policy)
    year_one = compute_year_one(f, o, m, v, policy)
    projections = compute_projection(f, o, m, years)
    five_year = compute_five_year_return(f, o, m, v, policy)
    debt = amortization_schedule(
        f.loan_amount, f.interest_rate_percent, f.loan_term_years, hold_years=five_year.years,
    )

    return AnalysisResponse(
        listing_id=listing.id or None,
        metrics=ReturnMetricsResponse.model_validate(metrics),
        year_one=YearOneResponse.model_validate(year_one),
        projections=[ProFormaYearResponse.model_validate(p) for p in projections],
        five_year=FiveYearResponse.model_validate(five_year),
        debt_schedule=[YearlyDebtResponse.model_validate(y) for y in yearly_debt_summary(debt)],
        financing=FinancingSummaryResponse.model_validate(financing_summary(f)),
        cash_required=CashRequiredResponse.model_validate(cash_required_at_close(f, m, v)),
        monthly_cashflow=MonthlyCashflowResponse.model_validate(monthly_cashflow(f, o)),
    )


async def _analyze_listing(
    listing: Listing | None,
    overrides: ListingOverrides,
    cities: CityDefaultsProvider,
    s: Settings,
) -> AnalysisResponse:
    if listing is None:
        raise HTTPException(status_code=404, detail="Listing not found")

    city = await cities.get(listing.city, listing.zipcode or None)
    try:
        inputs = build_assumptions(
            listing, city, UserOverrides(**overrides.model_dump()), s
        )
        return _run_analysis(listing, inputs, s.projection_years, s)
    except InvalidInputError as e:
        raise _invalid_input(e)


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(req: AnalyzeRequest, s: Settings = Depends(get_settings)):
    """Run the calculator on explicit assumptions."""
    try:
        inputs = DealInputs(
            financing=FinancingAssumptions(**req.financing.model_dump()),
            operating=OperatingAssumptions(**req.operating.model_dump()),
            market=MarketAssumptions(**req.market.model_dump()),
            valuation=PropertyValuation(**req.valuation.model_dump()),
        )
        listing = Listing(
            id="",
            price=inputs.financing.purchase_price,
            **asdict(inputs.valuation),
        )
        return _run_analysis(listing, inputs, req.projection_years or s.projection_years, s)
    except InvalidInputError as e:
        raise _invalid_input(e)


@router.get("/listings/{listing_id}/analysis", response_model=AnalysisResponse)
async def analyze_listing(
    listing_id: str,
    overrides: ListingOverrides = Depends(),
    listings: ListingRepository = Depends(get_listing_repository),
    cities: CityDefaultsProvider = Depends(get_city_defaults_provider),
    s: Settings = Depends(get_settings),
):
    """Analysis of a stored listing, with optional calculator overrides as query params."""
    listing = await listings.get(listing_id)
    return await _analyze_listing(listing, overrides, cities, s)


@router.get("/listings/by-slug/{slug}/analysis", response_model=AnalysisResponse)
async def analyze_listing_by_slug(
    slug: str,
    overrides: ListingOverrides = Depends(),
    listings: ListingRepository = Depends(get_listing_repository),
    cities: CityDefaultsProvider = Depends(get_city_defaults_provider),
    s: Settings = Depends(get_settings),
):
    listing = await listings.get_by_slug(slug)
    return await _analyze_listing(listing, overrides, cities, s)


@router.get("/listings/{listing_id}/metrics", response_model=ReturnMetricsResponse)
async def listing_card_metrics(
    listing_id: str,
    listings: ListingRepository = Depends(get_listing_repository),
    s: Settings = Depends(get_settings),
):
    """Listing card figures under default financing."""
    listing = await listings.get(listing_id)
    if listing is None:
        raise HTTPException(status_code=404, detail="Listing not found")
    try:
        return ReturnMetricsResponse.model_validate(compute_card_metrics(listing, s))
    except InvalidInputError as e:
        raise _invalid_input(e)
