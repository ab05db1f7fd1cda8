"""Market data routes."""

from fastapi import APIRouter, Depends

from trustreet.api.deps import get_city_defaults_provider
from trustreet.api.schemas import CityDefaultsResponse
from trustreet.data.city_defaults import CityDefaultsProvider

router = APIRouter(prefix="/api/v1/market", tags=["market"])


@router.get("/city-defaults", response_model=CityDefaultsResponse)
async def get_city_defaults(
    city: str,
    zip_code: str | None = None,
    cities: CityDefaultsProvider = Depends(get_city_defaults_provider),
):
    """Locality defaults for a city, refined by zip code when one matches."""
    defaults = await cities.get(city, zip_code)
    return CityDefaultsResponse.model_validate(defaults)
