import logging
from typing import Any

import httpx
from pydantic import ValidationError

from domains.forecast.errors import DecodeError, NetworkError, NotFoundError, UpstreamError
from domains.forecast.models import ForecastPeriod, ForecastResponse, MetadataResponse

logger = logging.getLogger(__name__)


class ForecastRepository:
    DEFAULT_BASE_URL = "https://api.weather.gov"
    DEFAULT_USER_AGENT = "forecast-proxy (https://github.com/forecast-proxy)"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "application/geo+json",
        }

    def metadata_url(self, latitude: float, longitude: float) -> str:
        return f"{self.base_url}/points/{latitude:f},{longitude:f}"

    async def _get_json(self, url: str) -> Any:
        logger.info("Fetching %s", url)
        async with httpx.AsyncClient(headers=self._headers, timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                logger.warning("Request to %s failed: %s", url, exc)
                raise NetworkError(f"request to {url} failed: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            logger.warning("Weather provider answered %s for %s", response.status_code, url)
            raise UpstreamError(
                f"failed to fetch data: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"invalid JSON from {url}: {exc}") from exc

    async def get_forecast_url(self, latitude: float, longitude: float) -> str:
        payload = await self._get_json(self.metadata_url(latitude, longitude))
        try:
            metadata = MetadataResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"unexpected metadata response: {exc.error_count()} invalid field(s)") from exc
        return metadata.properties.forecast

    async def get_todays_forecast(self, forecast_url: str) -> ForecastPeriod:
        payload = await self._get_json(forecast_url)
        try:
            forecast = ForecastResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"unexpected forecast response: {exc.error_count()} invalid field(s)") from exc

        if not forecast.properties.periods:
            raise NotFoundError("no forecast periods found")
        # The first period is the current one, e.g. "Today" or "Tonight".
        return forecast.properties.periods[0]
