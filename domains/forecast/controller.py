import math

from fastapi import APIRouter, Depends, HTTPException, Request

from domains.forecast import handler
from domains.forecast.errors import ForecastError
from domains.forecast.models import ForecastSummary
from domains.forecast.repository import ForecastRepository

router = APIRouter(tags=["Forecast"])


def get_repository(request: Request) -> ForecastRepository:
    return request.app.state.forecast_repository


def _parse_coordinate(value: str, name: str) -> float:
    # float() also accepts digit separators and padding, which are not coordinates.
    if "_" in value or value != value.strip():
        raise HTTPException(status_code=400, detail=f"Invalid {name}")
    try:
        parsed = float(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid {name}") from exc
    if not math.isfinite(parsed):
        raise HTTPException(status_code=400, detail=f"Invalid {name}")
    return parsed


@router.get("/forecast", response_model=ForecastSummary)
async def get_forecast(
    lat: str | None = None,
    lon: str | None = None,
    repository: ForecastRepository = Depends(get_repository),
) -> ForecastSummary:
    if not lat or not lon:
        raise HTTPException(status_code=400, detail="Missing latitude or longitude")

    latitude = _parse_coordinate(lat, "latitude")
    longitude = _parse_coordinate(lon, "longitude")

    try:
        return await handler.get_forecast(repository, latitude=latitude, longitude=longitude)
    except ForecastError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
