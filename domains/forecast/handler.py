import logging

from domains.forecast.errors import ForecastError
from domains.forecast.models import ForecastSummary
from domains.forecast.repository import ForecastRepository
from domains.forecast.temperature import describe_temperature

logger = logging.getLogger(__name__)

FORECAST_URL_CONTEXT = "Error fetching forecast URL"
TODAYS_FORECAST_CONTEXT = "Error fetching today's temperature"


async def get_forecast(repository: ForecastRepository, latitude: float, longitude: float) -> ForecastSummary:
    try:
        forecast_url = await repository.get_forecast_url(latitude=latitude, longitude=longitude)
    except ForecastError as exc:
        exc.context = FORECAST_URL_CONTEXT
        raise

    try:
        period = await repository.get_todays_forecast(forecast_url=forecast_url)
    except ForecastError as exc:
        exc.context = TODAYS_FORECAST_CONTEXT
        raise

    logger.info("Forecast for %s,%s: %s %s", latitude, longitude, period.name, period.temperature)
    return ForecastSummary(
        latitude=latitude,
        longitude=longitude,
        short_forecast=period.short_forecast,
        temperature=period.temperature,
        temperature_description=describe_temperature(period.temperature),
    )
